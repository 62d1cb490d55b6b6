"""Tests for the Option helpers."""

import asyncio
from collections.abc import Iterator

import pytest

import optres as ot
from optres import option


def _probe(seen: list[int]) -> Iterator[ot.Option[int]]:
    """Yield options lazily, recording which ones were pulled."""
    for idx, opt in enumerate((ot.Some(1), ot.NONE, ot.Some(3))):
        seen.append(idx)
        yield opt


class TestCollect:
    """`collect` gathers every value or nothing."""

    def test_all_some(self) -> None:
        """All values are gathered in order."""
        assert option.collect([ot.Some(1), ot.Some(2), ot.Some(3)]) == ot.Some([1, 2, 3])

    def test_any_none(self) -> None:
        """A single `NONE` makes the whole collection absent."""
        assert option.collect([ot.Some(1), ot.NONE, ot.Some(3)]).is_none()

    def test_empty(self) -> None:
        """No input gives an empty list."""
        assert option.collect([]) == ot.Some([])

    def test_short_circuits(self) -> None:
        """Items after the first `NONE` are never pulled."""
        seen: list[int] = []
        assert option.collect(_probe(seen)).is_none()
        assert seen == [0, 1]


class TestTranspose:
    """`transpose` keeps only present values."""

    def test_mixed(self) -> None:
        """`NONE` entries are dropped."""
        assert option.transpose([ot.Some(1), ot.NONE, ot.Some(3)]) == [1, 3]

    def test_all_none(self) -> None:
        """Nothing present gives an empty list."""
        assert option.transpose([ot.NONE, ot.NONE]) == []

    def test_scans_fully(self) -> None:
        """Every item is inspected."""
        seen: list[int] = []
        assert option.transpose(_probe(seen)) == [1, 3]
        assert seen == [0, 1, 2]


class TestFindSome:
    """`find_some` returns the first present option."""

    def test_finds_first(self) -> None:
        """The earliest `Some` wins."""
        assert option.find_some([ot.NONE, ot.Some(42), ot.Some(84)]) == ot.Some(42)

    def test_no_some(self) -> None:
        """All absent gives `NONE`."""
        assert option.find_some([ot.NONE, ot.NONE]).is_none()

    def test_empty(self) -> None:
        """No input gives `NONE`."""
        assert option.find_some([]).is_none()


class TestWrapSync:
    """`wrap_sync` bridges exceptions into `NONE`."""

    def test_success(self) -> None:
        """A returned value becomes `Some`."""
        assert option.wrap_sync(lambda: 42) == ot.Some(42)

    def test_returning_none(self) -> None:
        """A returned `None` is still a present value."""
        assert option.wrap_sync(lambda: None) == ot.Some(None)

    def test_raising(self) -> None:
        """A raised exception becomes `NONE`."""

        def _boom() -> int:
            msg = "test"
            raise ValueError(msg)

        assert option.wrap_sync(_boom).is_none()

    def test_calls_once(self) -> None:
        """The function runs exactly once."""
        calls: list[None] = []
        option.wrap_sync(lambda: calls.append(None))
        assert len(calls) == 1


class TestWrapAsync:
    """`wrap_async` bridges awaited exceptions into `NONE`."""

    @pytest.mark.asyncio
    async def test_success(self) -> None:
        """A completed coroutine becomes `Some`."""

        async def _answer() -> int:
            await asyncio.sleep(0)
            return 42

        assert await option.wrap_async(_answer()) == ot.Some(42)

    @pytest.mark.asyncio
    async def test_raising(self) -> None:
        """A failing coroutine becomes `NONE`."""

        async def _boom() -> int:
            msg = "test"
            raise ValueError(msg)

        assert (await option.wrap_async(_boom())).is_none()

    @pytest.mark.asyncio
    async def test_future(self) -> None:
        """Futures are awaited like coroutines."""
        fut: asyncio.Future[str] = asyncio.get_running_loop().create_future()
        fut.set_result("done")
        assert await option.wrap_async(fut) == ot.Some("done")
