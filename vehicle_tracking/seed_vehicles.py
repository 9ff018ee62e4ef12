import logging

logger = logging.getLogger(__name__)

SAMPLE_VEHICLES = [
    ('B 1234 ABC', 'Driver A', -6.2088, 106.8456, 40),
    ('B 5678 XYZ', 'Driver B', -6.2146, 106.8451, 35)
]

def seed_vehicles(store, vehicles=SAMPLE_VEHICLES):
    # Existing plates are left untouched
    created = 0
    for plate, driver_name, lat, lon, speed in vehicles:
        if store.insert_if_absent(plate, driver_name, lat, lon, speed):
            created += 1
    logger.info("Seeded %d of %d sample vehicles", created, len(vehicles))
    return created

if __name__ == "__main__":
    from vehicle_tracking import create_app

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    app = create_app(SEED_SAMPLE_DATA=False)
    with app.app_context():
        seed_vehicles(app.extensions['tracking'].store)
    print("Vehicles seeded successfully.")
