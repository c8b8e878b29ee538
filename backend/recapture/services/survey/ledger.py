from typing import Callable, Dict, List, Optional

from recapture.models import CAPTURE, SURVEY_PHASES, DetectionRecord


class DetectionLedger:
    """Per-name capture/recapture flags.

    Keyed by display name so history survives a reconnect. Names are never
    purged, only their marks are cleared on reset. ``current_phase`` is read
    on every mark, so a mark for a phase that has since ended is refused.
    """

    def __init__(self, current_phase: Optional[Callable[[], str]] = None) -> None:
        self.current_phase = current_phase or (lambda: CAPTURE)
        self._records: Dict[str, DetectionRecord] = {}

    def ensure_record(self, name: str) -> DetectionRecord:
        record = self._records.get(name)
        if record is None:
            record = DetectionRecord()
            self._records[name] = record
        return record

    def mark_detected(self, name: str, phase: str) -> bool:
        """Set the ``phase`` flag for ``name``; return True only on a real change.

        A mark for a phase that is no longer current (a stale event), for the
        results phase, for an unknown name, or for a flag already set is
        ignored.
        """
        if phase != self.current_phase() or phase not in SURVEY_PHASES:
            return False
        record = self._records.get(name)
        if record is None or record.is_marked(phase):
            return False
        record.mark(phase)
        return True

    def reset(self) -> None:
        for record in self._records.values():
            record.clear()

    def get(self, name: str):
        return self._records.get(name)

    def records(self) -> List[DetectionRecord]:
        return list(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, name) -> bool:
        return name in self._records

    def to_dict(self) -> Dict[str, dict]:
        return {name: r.to_dict() for name, r in self._records.items()}
