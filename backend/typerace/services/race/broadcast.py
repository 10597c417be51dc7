import logging
from typing import Any


class BroadcastChannel:
    """Fire-and-forget delivery of outbound events over Socket.IO.

    `emit_all` reaches every client connected to the namespace, `emit_one`
    a single connection. Delivery errors are logged here and never reach
    the caller.
    """

    def __init__(self, socketio, namespace: str = '/', logger=None):
        self._socketio = socketio
        self._namespace = namespace
        self._logger = logger or logging.getLogger(__name__)

    def emit_all(self, event: str, payload: Any) -> None:
        try:
            self._socketio.emit(event, payload, namespace=self._namespace)
        except Exception as exc:
            self._logger.warning(f"[emit-failed] event={event} to=all error={exc!r}")

    def emit_one(self, connection_id: str, event: str, payload: Any) -> None:
        try:
            self._socketio.emit(event, payload, to=connection_id, namespace=self._namespace)
        except Exception as exc:
            self._logger.warning(f"[emit-failed] event={event} to={connection_id} error={exc!r}")
