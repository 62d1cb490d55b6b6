"""Factories and collection helpers for `Option`.

Example:
```python
>>> from optres import option
>>> option.collect([option.some(1), option.some(2)])
Some(value=[1, 2])
>>> option.transpose([option.some(1), option.none(), option.some(3)])
[1, 3]

```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import Never

import more_itertools as mit

from ._results import NONE, Option, Some

__all__ = [
    "Option",
    "collect",
    "find_some",
    "from_nullable",
    "none",
    "some",
    "transpose",
    "wrap_async",
    "wrap_sync",
]


def some[T](value: T) -> Option[T]:
    """Wrap `value` in `Some`."""
    return Some(value)


def none[T = Never]() -> Option[T]:
    """Return the absent option.

    The type parameter is taken from context and falls back to `Never`.
    """
    return NONE


def from_nullable[T](value: T | None) -> Option[T]:
    """Alias of `Option.from_nullable`, `None` maps to `NONE`."""
    return Option.from_nullable(value)


def wrap_sync[T](f: Callable[[], T]) -> Option[T]:
    """Call `f` once and wrap its return value.

    Any exception raised by `f` is discarded and turns into `NONE`.

    Args:
        f (Callable[[], T]): The function to call.

    Returns:
        Option[T]: `Some(f())`, or `NONE` if `f` raised.

    Example:
    ```python
    >>> from optres import option
    >>> option.wrap_sync(lambda: int("42"))
    Some(value=42)
    >>> option.wrap_sync(lambda: int("not a number"))
    NONE

    ```
    """
    try:
        value = f()
    except Exception:  # noqa: BLE001
        return NONE
    return Some(value)


async def wrap_async[T](awaitable: Awaitable[T]) -> Option[T]:
    """Await `awaitable` once and wrap its outcome.

    An exception raised while awaiting is discarded and turns into `NONE`.
    There is no timeout, completion is that of `awaitable`.

    Args:
        awaitable (Awaitable[T]): A coroutine, task or future.

    Returns:
        Option[T]: `Some(result)`, or `NONE` if awaiting raised.
    """
    try:
        value = await awaitable
    except Exception:  # noqa: BLE001
        return NONE
    return Some(value)


def collect[T](options: Iterable[Option[T]]) -> Option[list[T]]:
    """Turn an iterable of options into an option of a list.

    Stops at the first `NONE`, later items are not pulled from the iterable.

    Args:
        options (Iterable[Option[T]]): The options to gather, in order.

    Returns:
        Option[list[T]]: `Some` of every value in input order, or `NONE` if any option is absent.

    Example:
    ```python
    >>> from optres import option
    >>> option.collect([option.some(1), option.none(), option.some(3)])
    NONE
    >>> option.collect([])
    Some(value=[])

    ```
    """
    values: list[T] = []
    for opt in options:
        if opt.is_none():
            return NONE
        values.append(opt.unwrap())
    return Some(values)


def transpose[T](options: Iterable[Option[T]]) -> list[T]:
    """Keep the values of the `Some` options, in order, dropping every `NONE`."""
    return [opt.unwrap() for opt in options if opt.is_some()]


def find_some[T](options: Iterable[Option[T]]) -> Option[T]:
    """Return the first `Some` of `options`, or `NONE` if there is none.

    Example:
    ```python
    >>> from optres import option
    >>> option.find_some([option.none(), option.some(42), option.some(84)])
    Some(value=42)

    ```
    """
    return mit.first_true(options, default=NONE, pred=lambda opt: opt.is_some())
