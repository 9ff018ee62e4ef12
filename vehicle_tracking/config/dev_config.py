import os

class DevConfig:
    def __init__(self):
        self.ENV = os.environ.get("FLASK_ENV", "development")
        self.DEBUG = os.environ.get("FLASK_DEBUG", "True").lower() == "true"
        self.PORT = int(os.environ.get("PORT", 5000))
        self.HOST = os.environ.get("HOST", "0.0.0.0")
        self.SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///tracking.db")
        self.SQLALCHEMY_TRACK_MODIFICATIONS = False
        self.CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")
        self.SOCKETIO_ASYNC_MODE = os.environ.get("SOCKETIO_ASYNC_MODE") or None
        self.SEED_SAMPLE_DATA = os.environ.get("SEED_SAMPLE_DATA", "True").lower() == "true"
        self.LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
