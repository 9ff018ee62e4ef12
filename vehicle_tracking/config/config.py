import os
from dotenv import load_dotenv
from vehicle_tracking.config.dev_config import DevConfig
from vehicle_tracking.config.production import ProductionConfig

load_dotenv()


class Config:
    def __init__(self):
        self.dev_config = DevConfig()
        self.production_config = ProductionConfig()

    def current(self):
        """Pick the config matching FLASK_ENV; anything but 'production' runs as dev."""
        if os.environ.get("FLASK_ENV", "development").lower() == "production":
            return self.production_config
        return self.dev_config
