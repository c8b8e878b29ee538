from recapture.models import CAPTURE, PHASE_ORDER, RESULTS


class PhaseMachine:
    """capture -> recapture -> results, with reset back to capture.

    ``reset`` also clears the ledger it was built with; callers hold the
    coordinator lock so nobody observes one change without the other.
    """

    def __init__(self, ledger) -> None:
        self.ledger = ledger
        self.current = CAPTURE

    def advance(self) -> bool:
        if self.current == RESULTS:
            return False
        self.current = PHASE_ORDER[PHASE_ORDER.index(self.current) + 1]
        return True

    def reset(self) -> None:
        self.current = CAPTURE
        self.ledger.reset()
