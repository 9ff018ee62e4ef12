from datetime import datetime
from vehicle_tracking import db
from marshmallow import Schema, fields, validate, validates, ValidationError

PLATE_MAX_LENGTH = 50

# One row per plate, holding its last reported position
class Vehicle(db.Model):
    __tablename__ = 'vehicles'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    plat_nomor = db.Column(db.String(PLATE_MAX_LENGTH), unique=True, nullable=False)
    driver_name = db.Column(db.String(100))
    latitude = db.Column(db.Float)
    longitude = db.Column(db.Float)
    speed = db.Column(db.Float)
    last_update = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'plat_nomor': self.plat_nomor,
            'driver_name': self.driver_name,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'speed': self.speed,
            'last_update': self.last_update.isoformat() if self.last_update else None
        }

    def __repr__(self):
        return f'<Vehicle id={self.id} plate={self.plat_nomor}>'

class PositionReportSchema(Schema):
    plat_nomor = fields.Str(required=True, validate=validate.Length(max=PLATE_MAX_LENGTH))
    latitude = fields.Float(required=True, validate=validate.Range(min=-90, max=90))
    longitude = fields.Float(required=True, validate=validate.Range(min=-180, max=180))
    speed = fields.Float(required=True, validate=validate.Range(min=0))

    @validates('plat_nomor')
    def validate_plat_nomor(self, value, **kwargs):
        if not value.strip():
            raise ValidationError('Plate number must not be empty.')
