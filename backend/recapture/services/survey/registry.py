from typing import Dict, Iterable, List, Optional

from recapture.models import Detector


class DetectorRegistry:
    """Fixed set of camera-trap stations, built once at startup."""

    def __init__(self, detectors: Iterable) -> None:
        self._detectors: List[Detector] = []
        self._by_key: Dict[str, Detector] = {}
        for entry in detectors:
            if isinstance(entry, Detector):
                det = entry
            else:
                det = Detector(entry['id'], float(entry['x']), float(entry['y']))
            key = self._key(det.id)
            if key in self._by_key:
                raise ValueError(f"Duplicate detector id {det.id!r}")
            self._detectors.append(det)
            self._by_key[key] = det

    @staticmethod
    def _key(detector_id) -> str:
        # Clients may send 3, 3.0 or "3" for the same station
        if isinstance(detector_id, float) and detector_id.is_integer():
            detector_id = int(detector_id)
        return str(detector_id).strip()

    def get(self, detector_id) -> Optional[Detector]:
        if detector_id is None or isinstance(detector_id, (bool, dict, list)):
            return None
        return self._by_key.get(self._key(detector_id))

    def __iter__(self):
        return iter(self._detectors)

    def __len__(self) -> int:
        return len(self._detectors)

    def to_list(self) -> List[dict]:
        return [d.to_dict() for d in self._detectors]
