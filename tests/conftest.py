"""
Shared fixtures: an application backed by a throwaway SQLite file, an HTTP
test client, and Socket.IO viewer clients.
"""

import pytest

from vehicle_tracking import create_app, db, socketio


@pytest.fixture
def app(tmp_path):
    """Create an application with its own database file and no sample data."""
    app = create_app(
        TESTING=True,
        SQLALCHEMY_DATABASE_URI=f"sqlite:///{tmp_path / 'tracking.db'}",
        SEED_SAMPLE_DATA=False,
        SOCKETIO_ASYNC_MODE='threading',
    )

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()
        db.engine.dispose()


@pytest.fixture
def app_ctx(app):
    """Push an application context for tests that talk to the store directly."""
    with app.app_context():
        yield app


@pytest.fixture
def services(app):
    return app.extensions['tracking']


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def connect_viewer(app):
    """Factory connecting Socket.IO viewers; all are disconnected on teardown."""
    viewers = []

    def _connect():
        viewer = socketio.test_client(app)
        assert viewer.is_connected()
        viewers.append(viewer)
        return viewer

    yield _connect

    for viewer in viewers:
        if viewer.is_connected():
            viewer.disconnect()


def _position_updates(viewer):
    return [
        message['args'][0]
        for message in viewer.get_received()
        if message['name'] == 'position_update'
    ]


@pytest.fixture
def position_updates():
    """Helper returning the position_update payloads a viewer has received."""
    return _position_updates
