"""Benchmarks for optres containers and helpers."""

import optres as ot
from optres import option, result

from ._registry import bench


def _nullable(size: int) -> list[int | None]:
    return [x if x % 3 != 0 else None for x in range(size)]


def _options(size: int) -> list[ot.Option[int]]:
    return [ot.Option.from_nullable(x) for x in _nullable(size)]


def _all_ok(size: int) -> list[ot.Result[int, str]]:
    return [ot.Ok(x) for x in range(size)]


def _checked(x: int) -> ot.Result[int, str]:
    return ot.Ok(x + 1) if x >= 0 else ot.Err("negative")


class Combinators:
    """Benchmark per-element combinator chains."""

    @bench(gen=_nullable)
    @staticmethod
    def from_nullable_map_or(data: list[int | None]) -> object:
        """Wrap nullable values, map them and fold back to plain ints."""
        return [
            ot.Option.from_nullable(x).map(lambda v: v * 2).unwrap_or(0) for x in data
        ]

    @bench(gen=_options)
    @staticmethod
    def option_filter_and_then(data: list[ot.Option[int]]) -> object:
        """Chain `filter` and `and_then` over mixed options."""
        return [
            opt.filter(lambda v: v % 2 == 0).and_then(lambda v: ot.Some(v // 2))
            for opt in data
        ]

    @bench()
    @staticmethod
    def result_and_then(data: list[int]) -> object:
        """Chain two fallible steps on every value."""
        return [ot.Ok[int, str](x).and_then(_checked).and_then(_checked) for x in data]


class Helpers:
    """Benchmark the collection helpers."""

    @bench(gen=_options)
    @staticmethod
    def option_transpose(data: list[ot.Option[int]]) -> object:
        """Drop absent values."""
        return option.transpose(data)

    @bench(gen=_options)
    @staticmethod
    def option_find_some(data: list[ot.Option[int]]) -> object:
        """Find the first present value."""
        return option.find_some(reversed(data))

    @bench(gen=_all_ok)
    @staticmethod
    def result_collect(data: list[ot.Result[int, str]]) -> object:
        """Collect a fully successful list."""
        return result.collect(data)

    @bench()
    @staticmethod
    def result_wrap_sync(data: list[int]) -> object:
        """Bridge a raising call on every value."""
        return [result.wrap_sync(lambda x=x: 1 // (x % 2)) for x in data]
