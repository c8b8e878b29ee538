from recapture.models import DetectionRecord
from recapture.services.survey.estimator import (
    estimate_from_counts,
    lincoln_petersen,
    round_half_up,
)


def _records(both=0, first_only=0, second_only=0, neither=0):
    return (
        [DetectionRecord(True, True) for _ in range(both)]
        + [DetectionRecord(True, False) for _ in range(first_only)]
        + [DetectionRecord(False, True) for _ in range(second_only)]
        + [DetectionRecord(False, False) for _ in range(neither)]
    )


def test_textbook_example():
    # M=10, C=8, R=4 -> 20
    result = lincoln_petersen(_records(both=4, first_only=6, second_only=4, neither=3))
    assert result['M'] == 10
    assert result['C'] == 8
    assert result['R'] == 4
    assert result['estimate'] == 20
    assert result['observedTotal'] == 17


def test_no_recaptures_is_undefined_not_zero():
    result = lincoln_petersen(_records(first_only=5, second_only=3))
    assert result['R'] == 0
    assert result['estimate'] is None
    # Chapman stays defined: 6 * 4 / 1 - 1
    assert result['chapman'] == 23


def test_empty_ledger():
    result = lincoln_petersen([])
    assert result == {'M': 0, 'C': 0, 'R': 0, 'estimate': None, 'chapman': 0, 'observedTotal': 0}


def test_rounding_is_half_up():
    # 3 * 5 / 2 = 7.5
    assert estimate_from_counts(3, 5, 2)['estimate'] == 8
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2


def test_estimator_does_not_mutate_records():
    records = _records(both=2, first_only=1)
    before = [r.to_dict() for r in records]
    lincoln_petersen(records)
    lincoln_petersen(records)
    assert [r.to_dict() for r in records] == before
