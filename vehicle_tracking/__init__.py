import logging
from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_socketio import SocketIO
from flask_cors import CORS
from vehicle_tracking.config.config import Config

logger = logging.getLogger(__name__)

# sql alchemy instance
db = SQLAlchemy()

# Flask Migrate instance to handle migrations
migrate = Migrate()

# Socket.IO server pushing position updates to viewers
socketio = SocketIO()


class TrackingServices:
    """Storage, hub and the services built on them, shared by one application."""

    def __init__(self, store, hub, position_service, snapshot_service):
        self.store = store
        self.hub = hub
        self.position_service = position_service
        self.snapshot_service = snapshot_service


def create_app(config=None, **overrides):
    # declaring flask application
    app = Flask(__name__)

    if config is None:
        config = Config().current()
    app.config.from_object(config)
    app.config.update(overrides)

    # Enable CORS on the API only
    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    db.init_app(app)
    migrate.init_app(app, db)

    # socket handlers must be known before the server is created
    from vehicle_tracking.controllers import viewer_controller  # noqa: F401
    socketio.init_app(app,
                      cors_allowed_origins=app.config["CORS_ORIGINS"],
                      async_mode=app.config.get("SOCKETIO_ASYNC_MODE"))

    from vehicle_tracking.services.vehicle_store import VehicleStore
    from vehicle_tracking.services.broadcast_hub import BroadcastHub
    from vehicle_tracking.services.position_service import PositionService
    from vehicle_tracking.services.snapshot_service import SnapshotService

    store = VehicleStore(db)
    hub = BroadcastHub(socketio)
    app.extensions['tracking'] = TrackingServices(
        store=store,
        hub=hub,
        position_service=PositionService(store, hub),
        snapshot_service=SnapshotService(store)
    )

    # Register blueprints
    from vehicle_tracking.controllers.vehicles_controller import vehicles_bp
    app.register_blueprint(vehicles_bp, url_prefix='/api')

    with app.app_context():
        db.create_all()
        if app.config.get("SEED_SAMPLE_DATA"):
            from vehicle_tracking.seed_vehicles import seed_vehicles
            seed_vehicles(store)

    logger.info("Vehicles table ready (%s)", app.config["SQLALCHEMY_DATABASE_URI"])
    return app


def run(app):
    """Serve the app; the Werkzeug dev server is only allowed in debug mode."""
    debug = app.config["DEBUG"]
    logger.info("Vehicle tracking server running on port %s", app.config["PORT"])
    socketio.run(app, host=app.config["HOST"],
            port=app.config["PORT"],
            debug=debug,
            allow_unsafe_werkzeug=debug)
