"""Tests for slot usage in optres classes."""

import optres as ot


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(ot.Some(42))
    assert _check_slots(ot.NoneOption())
    assert _check_slots(ot.NONE)
    assert _check_slots(ot.Err[int, object](42))
    assert _check_slots(ot.Ok[int, object](42))


def test_hashable() -> None:
    """Frozen variants with hashable payloads can be used as keys."""
    seen = {ot.Some(1), ot.Some(1), ot.NONE, ot.NoneOption(), ot.Ok(1), ot.Err(1)}
    assert len(seen) == 4
