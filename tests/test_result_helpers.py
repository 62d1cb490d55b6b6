"""Tests for the Result helpers."""

import asyncio
import logging
from collections.abc import Iterator

import pytest

import optres as ot
from optres import result


class TestWrapSync:
    """`wrap_sync` captures the raised exception."""

    def test_success(self) -> None:
        """A returned value becomes `Ok`."""
        assert result.wrap_sync(lambda: 42) == ot.Ok(42)

    def test_raising_keeps_exception(self) -> None:
        """The raised object itself is the `Err` payload."""
        error = ValueError("test error")

        def _boom() -> int:
            raise error

        res = result.wrap_sync(_boom)
        assert res.is_err()
        assert res.error is error
        assert str(res.error) == "test error"

    def test_logs_captured_exception(self, caplog: pytest.LogCaptureFixture) -> None:
        """The captured exception type is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="optres"):
            result.wrap_sync(lambda: 1 / 0)
        assert "ZeroDivisionError" in caplog.text

    def test_base_exceptions_propagate(self) -> None:
        """Only `Exception` subclasses are captured."""

        def _interrupt() -> int:
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            result.wrap_sync(_interrupt)


class TestWrapAsync:
    """`wrap_async` captures the awaited exception."""

    @pytest.mark.asyncio
    async def test_success(self) -> None:
        """A completed coroutine becomes `Ok`."""

        async def _answer() -> int:
            await asyncio.sleep(0)
            return 42

        res = await result.wrap_async(_answer())
        assert res.unwrap() == 42

    @pytest.mark.asyncio
    async def test_raising_keeps_exception(self) -> None:
        """The rejection reason is the `Err` payload."""

        async def _boom() -> int:
            msg = "test error"
            raise ValueError(msg)

        res = await result.wrap_async(_boom())
        assert res.is_err()
        assert isinstance(res.error, ValueError)
        assert str(res.error) == "test error"


class TestCollect:
    """`collect` gathers every value or the first error."""

    def test_all_ok(self) -> None:
        """All values are gathered in order."""
        assert result.collect([ot.Ok(1), ot.Ok(2), ot.Ok(3)]).unwrap() == [1, 2, 3]

    def test_first_err_wins(self) -> None:
        """The first `Err` is returned as is."""
        first = ot.Err("error")
        collected = result.collect([ot.Ok(1), first, ot.Ok(3), ot.Err("later")])
        assert collected is first

    def test_empty(self) -> None:
        """No input gives an empty list."""
        assert result.collect([]) == ot.Ok([])

    def test_short_circuits(self) -> None:
        """Items after the first `Err` are never pulled."""
        seen: list[int] = []

        def _probe() -> Iterator[ot.Result[int, str]]:
            for idx, res in enumerate((ot.Ok(1), ot.Err("e"), ot.Ok(3))):
                seen.append(idx)
                yield res

        assert result.collect(_probe()) == ot.Err("e")
        assert seen == [0, 1]
