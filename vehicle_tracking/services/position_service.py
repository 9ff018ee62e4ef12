import logging
from marshmallow import ValidationError as SchemaValidationError
from vehicle_tracking.exceptions import ValidationError
from vehicle_tracking.models.vehicles_model import PositionReportSchema

logger = logging.getLogger(__name__)

class PositionService:
    def __init__(self, store, hub):
        self.store = store
        self.hub = hub
        self.schema = PositionReportSchema()

    def report_position(self, plate, lat, lon, speed):
        """Store the latest position for a plate and push it to every connected viewer.

        Raises ValidationError for a malformed report and lets StorageError
        propagate untouched; in both cases nothing is broadcast.
        """
        try:
            report = self.schema.load({
                'plat_nomor': plate,
                'latitude': lat,
                'longitude': lon,
                'speed': speed
            })
        except SchemaValidationError as e:
            raise ValidationError(e.messages) from e

        self.store.upsert(
            report['plat_nomor'],
            report['latitude'],
            report['longitude'],
            report['speed']
        )

        delivered = self.hub.publish({
            'plat_nomor': report['plat_nomor'],
            'latitude': report['latitude'],
            'longitude': report['longitude'],
            'speed': report['speed']
        })
        logger.debug("Position for %s pushed to %d viewer(s)", report['plat_nomor'], delivered)
        return {'success': True}
