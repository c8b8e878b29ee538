"""Socket.IO bindings: parse untrusted client payloads and hand them to the
SessionCoordinator, which does all validation against server-held state.
"""

from functools import wraps

from flask import current_app, request
from flask_socketio import emit

from recapture import socketio

NAMESPACE = '/'


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _coordinator():
    return current_app.extensions['survey']


def _guarded(handler):
    """Keep one bad event from taking down the shared session."""

    @wraps(handler)
    def wrapper(*args):
        try:
            return handler(*args)
        except Exception:
            current_app.logger.exception(f"[handler-error] event={handler.__name__} sid={_get_sid()}")
            return None

    return wrapper


def handle_connect(auth=None):
    current_app.logger.info(f"[connect] sid={_get_sid()}")
    # Late observers render from the current state right away
    emit('state-update', _coordinator().snapshot())


def handle_disconnect(reason=None):
    _coordinator().disconnect(_get_sid())


def handle_join(data=None):
    name = data.get('name') if isinstance(data, dict) else data
    _coordinator().join(_get_sid(), name)


def handle_move(data=None):
    if not isinstance(data, dict):
        return
    _coordinator().move(_get_sid(), data.get('x'), data.get('y'))


def handle_detection_trigger(data=None):
    if isinstance(data, dict):
        detector_id = data.get('detectorId', data.get('cameraId'))
    else:
        detector_id = data
    _coordinator().detection_trigger(_get_sid(), detector_id)


def handle_next_phase(data=None):
    _coordinator().advance_phase(_get_sid())


def handle_reset_game(data=None):
    _coordinator().reset_game(_get_sid())


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on the default namespace."""
    handlers = {
        'connect': handle_connect,
        'disconnect': handle_disconnect,
        'join': handle_join,
        'move': handle_move,
        'camera-trigger': handle_detection_trigger,
        'detection-trigger': handle_detection_trigger,
        'next-phase': handle_next_phase,
        'reset-game': handle_reset_game,
    }
    for event, handler in handlers.items():
        socketio.on_event(event, _guarded(handler), namespace=NAMESPACE)
