"""Tests for slot usage in pyoseq classes."""

import pyoseq as ps


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(ps.Seq.from_(()))
    assert _check_slots(ps.PairSeq.from_({}))
    assert _check_slots(ps.Seq.from_(()).pull())
    assert _check_slots(ps.Some(42))
    assert _check_slots(ps.NoneOption())
    assert _check_slots(ps.get_config())
