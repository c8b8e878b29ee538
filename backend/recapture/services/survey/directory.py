import random
from typing import Dict, List, Optional

from recapture.models import PALETTE, Participant

DEFAULT_NAME = 'Anon'


def sanitize_name(raw, max_length: int = 20) -> str:
    """Trim, truncate and default a user-supplied display name."""
    if not isinstance(raw, str):
        raw = ''
    return raw.strip()[:max_length] or DEFAULT_NAME


class ParticipantDirectory:
    """Live participants keyed by connection sid.

    The sid is not stable across reconnects; detection history is keyed by
    display name in the ledger instead.
    """

    def __init__(self, spawn_x: float, spawn_y: float, spawn_jitter: float = 20.0,
                 name_max_length: int = 20, palette: Optional[List[str]] = None,
                 rng: Optional[random.Random] = None) -> None:
        self.spawn_x = spawn_x
        self.spawn_y = spawn_y
        self.spawn_jitter = spawn_jitter
        self.name_max_length = name_max_length
        self.palette = list(palette or PALETTE)
        self._rng = rng or random.Random()
        self._participants: Dict[str, Participant] = {}

    def join(self, sid: str, raw_name) -> Participant:
        name = sanitize_name(raw_name, self.name_max_length)
        # Counted before insert, so a re-join on the same sid counts its own
        # entry and may pick the next colour; otherwise colour never changes
        color = self.palette[len(self._participants) % len(self.palette)]
        jitter = self.spawn_jitter
        participant = Participant(
            sid=sid,
            name=name,
            x=self.spawn_x + self._rng.uniform(-jitter, jitter),
            y=self.spawn_y + self._rng.uniform(-jitter, jitter),
            color=color,
        )
        self._participants[sid] = participant
        return participant

    def update_position(self, sid: str, x: float, y: float) -> bool:
        participant = self._participants.get(sid)
        if participant is None:
            return False
        participant.x = x
        participant.y = y
        return True

    def remove(self, sid: str) -> Optional[Participant]:
        return self._participants.pop(sid, None)

    def get(self, sid: str) -> Optional[Participant]:
        return self._participants.get(sid)

    def names(self) -> List[str]:
        return [p.name for p in self._participants.values()]

    def __len__(self) -> int:
        return len(self._participants)

    def __contains__(self, sid) -> bool:
        return sid in self._participants

    def positions(self) -> Dict[str, dict]:
        return {sid: {'x': p.x, 'y': p.y} for sid, p in self._participants.items()}

    def to_dict(self) -> Dict[str, dict]:
        return {sid: p.to_dict() for sid, p in self._participants.items()}
