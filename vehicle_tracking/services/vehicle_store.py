import logging
from datetime import datetime
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from vehicle_tracking.exceptions import StorageError
from vehicle_tracking.models.vehicles_model import Vehicle

logger = logging.getLogger(__name__)

# Dialects with native INSERT ... ON CONFLICT support
_INSERT_BY_DIALECT = {
    'sqlite': sqlite.insert,
    'postgresql': postgresql.insert,
}

class VehicleStore:
    """Persistence for the vehicles table, keyed by plate number.

    Every write is a single INSERT ... ON CONFLICT statement so the row is
    the unit of atomicity; nothing here spans more than one record.
    """

    def __init__(self, db):
        self.db = db

    def upsert(self, plate, lat, lon, speed):
        """Insert or overwrite the position for a plate and return the stored row.

        The row comes back through RETURNING on the same statement, so a
        successful write never needs a second round trip to be reported.
        """
        now = datetime.utcnow()
        try:
            stmt = self._insert(Vehicle).values(
                plat_nomor=plate,
                latitude=lat,
                longitude=lon,
                speed=speed,
                last_update=now
            )
            stmt = stmt.on_conflict_do_update(
                index_elements=[Vehicle.plat_nomor],
                set_={
                    'latitude': stmt.excluded.latitude,
                    'longitude': stmt.excluded.longitude,
                    'speed': stmt.excluded.speed,
                    'last_update': stmt.excluded.last_update
                }
            ).returning(Vehicle)
            record = self.db.session.scalars(
                stmt, execution_options={'populate_existing': True}
            ).one()
            # detached so the loaded values survive expire-on-commit
            self.db.session.expunge(record)
            self.db.session.commit()
            return record
        except SQLAlchemyError as e:
            self._fail('upsert', plate, e)

    def insert_if_absent(self, plate, driver_name, lat, lon, speed):
        """Insert a vehicle unless the plate already exists; returns True if a row was created."""
        try:
            stmt = self._insert(Vehicle.__table__).values(
                plat_nomor=plate,
                driver_name=driver_name,
                latitude=lat,
                longitude=lon,
                speed=speed,
                last_update=datetime.utcnow()
            ).on_conflict_do_nothing(index_elements=[Vehicle.__table__.c.plat_nomor])
            result = self.db.session.execute(stmt)
            self.db.session.commit()
            return result.rowcount > 0
        except SQLAlchemyError as e:
            self._fail('insert', plate, e)

    def list_all(self):
        try:
            return Vehicle.query.order_by(Vehicle.id).all()
        except SQLAlchemyError as e:
            self._fail('list', None, e)

    def _insert(self, target):
        dialect = self.db.engine.dialect.name
        insert = _INSERT_BY_DIALECT.get(dialect)
        if insert is None:
            raise StorageError(f'Upsert is not supported on the {dialect} dialect')
        return insert(target)

    def _fail(self, operation, plate, error):
        self.db.session.rollback()
        logger.error("Vehicle %s failed (plate=%s): %s", operation, plate, error)
        raise StorageError(str(error.orig) if getattr(error, 'orig', None) else str(error)) from error
