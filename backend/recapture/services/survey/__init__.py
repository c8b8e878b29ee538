"""Survey domain services: detectors, participants, ledger, phases, estimator.

Everything here is plain in-memory state with no transport or Flask
dependencies. The SessionCoordinator owns one instance of each and is the
only caller that mutates them.
"""

from .directory import ParticipantDirectory, sanitize_name
from .estimator import lincoln_petersen
from .ledger import DetectionLedger
from .phases import PhaseMachine
from .registry import DetectorRegistry

__all__ = [
    'DetectionLedger',
    'DetectorRegistry',
    'ParticipantDirectory',
    'PhaseMachine',
    'lincoln_petersen',
    'sanitize_name',
]
