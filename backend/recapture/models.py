import math
from collections import namedtuple

# Avatar colours, handed out in join order
PALETTE = [
    "#1abc9c", "#e67e22", "#9b59b6",
    "#e74c3c", "#3498db", "#2ecc71",
    "#f1c40f", "#e84393", "#00cec9",
]

CAPTURE = 'capture'
RECAPTURE = 'recapture'
RESULTS = 'results'
PHASE_ORDER = (CAPTURE, RECAPTURE, RESULTS)
SURVEY_PHASES = (CAPTURE, RECAPTURE)


class Detector(namedtuple('Detector', 'id x y')):
    """A fixed camera-trap station. Never mutated after startup."""

    __slots__ = ()

    def distance_to(self, x, y):
        return math.hypot(x - self.x, y - self.y)

    def to_dict(self):
        return {'id': self.id, 'x': self.x, 'y': self.y}


class Participant:
    def __init__(self, sid, name, x, y, color):
        self.sid = sid
        self.name = name
        self.x = x
        self.y = y
        self.color = color

    def to_dict(self):
        return {
            'name': self.name,
            'x': self.x,
            'y': self.y,
            'color': self.color,
        }


class DetectionRecord:
    """Two-phase detection flags for one display name."""

    def __init__(self, captured=False, recaptured=False):
        self.captured = captured
        self.recaptured = recaptured

    def is_marked(self, phase):
        if phase == CAPTURE:
            return self.captured
        if phase == RECAPTURE:
            return self.recaptured
        return False

    def mark(self, phase):
        if phase == CAPTURE:
            self.captured = True
        elif phase == RECAPTURE:
            self.recaptured = True

    def clear(self):
        self.captured = False
        self.recaptured = False

    def to_dict(self):
        return {
            'captured': self.captured,
            'recaptured': self.recaptured,
        }
