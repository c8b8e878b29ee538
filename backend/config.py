import os


def parse_detectors(raw):
    """Parse a detector layout of the form ``"1:400:400,2:1600:400"``.

    Numeric ids become ints so they match what browser clients send.
    """
    detectors = []
    for chunk in (raw or '').split(','):
        chunk = chunk.strip()
        if not chunk:
            continue
        parts = chunk.split(':')
        if len(parts) != 3:
            raise ValueError(f"Invalid detector entry {chunk!r}, expected id:x:y")
        det_id, x, y = parts
        det_id = det_id.strip()
        detectors.append({
            'id': int(det_id) if det_id.isdigit() else det_id,
            'x': float(x),
            'y': float(y),
        })
    return detectors


DEFAULT_DETECTORS = '1:400:400,2:1600:400,3:1000:1000,4:400:1600,5:1600:1600'


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    CORS_ORIGINS = [o.strip() for o in os.environ.get(
        'CORS_ORIGINS',
        'http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173,http://127.0.0.1:5173',
    ).split(',') if o.strip()]
    # Survey map (pixels)
    MAP_WIDTH = int(os.environ.get('MAP_WIDTH', '2000'))
    MAP_HEIGHT = int(os.environ.get('MAP_HEIGHT', '2000'))
    # Camera-trap stations and how close an avatar must be to register
    DETECTORS = parse_detectors(os.environ.get('DETECTORS', DEFAULT_DETECTORS))
    DETECTION_RADIUS = float(os.environ.get('DETECTION_RADIUS', '50'))
    # Slack on top of the radius for the server-side re-check
    DETECTION_TOLERANCE = float(os.environ.get('DETECTION_TOLERANCE', '10'))
    NAME_MAX_LENGTH = int(os.environ.get('NAME_MAX_LENGTH', '20'))
    SPAWN_JITTER = float(os.environ.get('SPAWN_JITTER', '20'))
