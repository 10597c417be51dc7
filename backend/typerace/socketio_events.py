from flask import current_app, request
from typerace import socketio
from typing import Any, Optional


def _coordinator():
    return current_app.extensions['typerace']


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _payload_value(data: Any, key: str) -> Optional[str]:
    """Accept either a bare string or an object carrying `key`."""
    if isinstance(data, str):
        return data
    if isinstance(data, dict):
        value = data.get(key)
        return value if isinstance(value, str) else None
    return None


def handle_connect():
    current_app.logger.info(f"[connect] sid={_get_sid()}")


def handle_disconnect(*args):
    sid = _get_sid()
    current_app.logger.info(f"[disconnect] sid={sid}")
    _coordinator().disconnect(sid)


def handle_join(data=None):
    _coordinator().join(_get_sid(), _payload_value(data, 'name'))


def handle_typed(data=None):
    text = _payload_value(data, 'text')
    if text is None:
        return
    _coordinator().submit(_get_sid(), text)


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register the race event handlers on `namespace`."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('join', handle_join, namespace=namespace)
    socketio.on_event('typed', handle_typed, namespace=namespace)
