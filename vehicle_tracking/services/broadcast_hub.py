import logging
from threading import Lock

logger = logging.getLogger(__name__)

POSITION_UPDATE = 'position_update'

class BroadcastHub:
    """Tracks connected viewer sessions and pushes events to each of them.

    Delivery is at-most-once and best-effort: an event is handed to the
    Socket.IO server's outbound queue for every session in the membership
    snapshot taken at publish time, without waiting for acknowledgement.
    Nothing is buffered for sessions that connect later.
    """

    def __init__(self, socketio, namespace='/'):
        self.socketio = socketio
        self.namespace = namespace
        self._sessions = set()
        self._lock = Lock()

    def register(self, session_id):
        with self._lock:
            self._sessions.add(session_id)

    def unregister(self, session_id):
        with self._lock:
            self._sessions.discard(session_id)

    def session_count(self):
        with self._lock:
            return len(self._sessions)

    def publish(self, event, name=POSITION_UPDATE):
        with self._lock:
            sessions = list(self._sessions)

        delivered = 0
        for session_id in sessions:
            try:
                self.socketio.emit(name, event, to=session_id, namespace=self.namespace)
                delivered += 1
            except Exception as e:
                logger.warning("Dropping %s for session %s: %s", name, session_id, e)
        return delivered
