import logging
from flask import request, current_app
from vehicle_tracking import socketio

logger = logging.getLogger(__name__)

def _hub():
    return current_app.extensions['tracking'].hub

@socketio.on('connect')
def handle_connect(auth=None):
    hub = _hub()
    hub.register(request.sid)
    logger.info("Viewer connected: %s (%d active)", request.sid, hub.session_count())

@socketio.on('disconnect')
def handle_disconnect(reason=None):
    hub = _hub()
    hub.unregister(request.sid)
    logger.info("Viewer disconnected: %s (%d active)", request.sid, hub.session_count())
