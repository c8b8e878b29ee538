import math
from typing import Iterable, Optional


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def estimate_from_counts(m: int, c: int, r: int) -> dict:
    """Lincoln-Petersen N = M * C / R, plus the Chapman correction.

    ``estimate`` is None when R == 0; the formula is undefined there and a
    zero or infinite number would mislead. ``chapman`` is
    (M+1)(C+1)/(R+1) - 1 and is always defined.
    """
    estimate: Optional[int] = round_half_up(m * c / r) if r > 0 else None
    return {
        'M': m,
        'C': c,
        'R': r,
        'estimate': estimate,
        'chapman': round_half_up((m + 1) * (c + 1) / (r + 1) - 1),
    }


def lincoln_petersen(records: Iterable) -> dict:
    """Estimator output for a set of detection records.

    M = marked in the capture phase, C = detected in the recapture phase,
    R = detected in both, observedTotal = distinct names in the ledger.
    """
    records = list(records)
    result = estimate_from_counts(
        sum(1 for r in records if r.captured),
        sum(1 for r in records if r.recaptured),
        sum(1 for r in records if r.captured and r.recaptured),
    )
    result['observedTotal'] = len(records)
    return result
