"""Tests for container reprs and display configuration."""

from collections.abc import Iterator

import pytest

import optres as ot


@pytest.fixture(autouse=True)
def _reset_config() -> Iterator[None]:
    yield
    ot.get_config().reset()


def test_default_reprs() -> None:  # noqa: D103
    assert repr(ot.Some(42)) == "Some(value=42)"
    assert repr(ot.NONE) == "NONE"
    assert repr(ot.Ok("a")) == "Ok(value='a')"
    assert repr(ot.Err(ValueError("x"))) == "Err(error=ValueError('x'))"


def test_truncation() -> None:
    """Long payloads are cut at `repr_max_length`."""
    ot.get_config().repr_max_length = 4
    assert repr(ot.Ok(123456789)) == "Ok(value=1234...)"


def test_depth() -> None:
    """Nested payloads are elided past `repr_depth`."""
    ot.get_config().repr_depth = 1
    assert repr(ot.Some([[1, 2], [3]])) == "Some(value=[[...], [...]])"


def test_config_is_shared() -> None:
    """`get_config` always returns the same instance."""
    assert ot.get_config() is ot.get_config()


def test_pipe_helpers() -> None:
    """`into` and `inspect` work on both containers."""
    seen: list[object] = []
    opt = ot.Some(2)
    assert opt.inspect(seen.append) is opt
    assert ot.Err("e").into(lambda r, suffix: r.error + suffix, "!") == "e!"
    assert seen == [opt]
