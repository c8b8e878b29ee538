import logging
import math
import threading
from typing import Optional

from recapture.models import PALETTE
from recapture.services.survey import (
    DetectionLedger,
    DetectorRegistry,
    ParticipantDirectory,
    PhaseMachine,
    lincoln_petersen,
)


def _coerce_coordinate(value) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


class SessionCoordinator:
    """Authoritative owner of the shared survey state.

    Every inbound event runs under ``self.lock`` from the first read to the
    last broadcast, so handlers dispatched on different threads or greenlets
    never interleave and every snapshot is consistent.
    """

    def __init__(self, socketio, config, logger=None, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace
        self.logger = logger or logging.getLogger(__name__)
        self.lock = threading.RLock()

        self.map_width = int(config.get('MAP_WIDTH', 2000))
        self.map_height = int(config.get('MAP_HEIGHT', 2000))
        self.detection_radius = float(config.get('DETECTION_RADIUS', 50))
        self.detection_tolerance = float(config.get('DETECTION_TOLERANCE', 10))

        self.registry = DetectorRegistry(config.get('DETECTORS') or [])
        self.directory = ParticipantDirectory(
            spawn_x=self.map_width / 2,
            spawn_y=self.map_height / 2,
            spawn_jitter=float(config.get('SPAWN_JITTER', 20)),
            name_max_length=int(config.get('NAME_MAX_LENGTH', 20)),
            palette=PALETTE,
        )
        self.ledger = DetectionLedger(lambda: self.phases.current)
        self.phases = PhaseMachine(self.ledger)

    # ---- read-only views ----

    @property
    def phase(self) -> str:
        return self.phases.current

    def estimate(self) -> dict:
        with self.lock:
            return lincoln_petersen(self.ledger.records())

    def snapshot(self) -> dict:
        with self.lock:
            return {
                'phase': self.phases.current,
                'participants': self.directory.to_dict(),
                'detectionLedger': self.ledger.to_dict(),
                'detectors': self.registry.to_list(),
                'estimatorResult': lincoln_petersen(self.ledger.records()),
            }

    def public_config(self) -> dict:
        return {
            'detectors': self.registry.to_list(),
            'detectionRadius': self.detection_radius,
            'detectionTolerance': self.detection_tolerance,
            'mapWidth': self.map_width,
            'mapHeight': self.map_height,
            'palette': list(self.directory.palette),
        }

    # ---- authorization seam ----

    def authorize_admin(self, sid: str, action: str) -> bool:
        """Gate for privileged actions. Any connection is currently allowed."""
        return True

    # ---- event handlers ----

    def join(self, sid: str, raw_name):
        with self.lock:
            participant = self.directory.join(sid, raw_name)
            self.ledger.ensure_record(participant.name)
            self.logger.info(f"[join] sid={sid} name={participant.name!r} color={participant.color}")
            self._broadcast_state()
            return participant

    def move(self, sid: str, x, y) -> bool:
        x = _coerce_coordinate(x)
        y = _coerce_coordinate(y)
        if x is None or y is None:
            self.logger.debug(f"[move-drop] sid={sid} malformed position")
            return False
        with self.lock:
            if not self.directory.update_position(sid, x, y):
                return False
            self._emit('players-update', self.directory.positions())
            return True

    def detection_trigger(self, sid: str, detector_id) -> bool:
        with self.lock:
            phase = self.phases.current
            participant = self.directory.get(sid)
            if participant is None:
                return False
            detector = self.registry.get(detector_id)
            if detector is None:
                self.logger.debug(f"[trigger-drop] sid={sid} unknown detector={detector_id!r}")
                return False

            # Server-held position only; the client's own overlap test is advisory
            dist = detector.distance_to(participant.x, participant.y)
            if dist > self.detection_radius + self.detection_tolerance:
                self.logger.info(
                    f"[trigger-reject] name={participant.name!r} detector={detector.id} dist={dist:.1f}"
                )
                return False

            if not self.ledger.mark_detected(participant.name, phase):
                return False

            self.logger.info(f"[{phase}] name={participant.name!r} detector={detector.id}")
            self._emit('capture-event', {
                'participantName': participant.name,
                'detectorId': detector.id,
                'phase': phase,
            })
            self._broadcast_state()
            return True

    def advance_phase(self, sid: str) -> bool:
        with self.lock:
            if not self.authorize_admin(sid, 'next-phase'):
                return False
            previous = self.phases.current
            changed = self.phases.advance()
            if changed:
                self.logger.info(f"[phase] {previous} -> {self.phases.current} by sid={sid}")
            self._broadcast_state()
            return changed

    def reset_game(self, sid: str) -> bool:
        with self.lock:
            if not self.authorize_admin(sid, 'reset-game'):
                return False
            self.phases.reset()
            self.logger.info(f"[reset] by sid={sid} names_kept={len(self.ledger)}")
            self._broadcast_state()
            return True

    def disconnect(self, sid: str):
        with self.lock:
            participant = self.directory.remove(sid)
            if participant is not None:
                self.logger.info(f"[leave] sid={sid} name={participant.name!r}")
            self._broadcast_state()
            return participant

    # ---- outbound ----

    def _emit(self, event: str, payload) -> None:
        self.socketio.emit(event, payload, namespace=self.namespace)

    def _broadcast_state(self) -> None:
        self._emit('state-update', self.snapshot())
