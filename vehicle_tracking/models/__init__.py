from vehicle_tracking.models.vehicles_model import Vehicle, PositionReportSchema

__all__ = [
    'Vehicle',
    'PositionReportSchema'
]
