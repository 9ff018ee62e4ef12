import logging
from vehicle_tracking import create_app, run
from vehicle_tracking.config.config import Config

config = Config().current()

# Setup logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(levelname)s - %(message)s'
)

app = create_app(config)

if __name__ == "__main__":
    run(app)
