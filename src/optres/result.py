"""Factories and collection helpers for `Result`."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Never

from ._results import Err, Ok, Result

__all__ = [
    "Result",
    "collect",
    "err",
    "ok",
    "wrap_async",
    "wrap_sync",
]

log = logging.getLogger(__name__)


def ok[T](value: T) -> Result[T, Never]:
    """Wrap `value` in `Ok`."""
    return Ok(value)


def err[E](error: E) -> Result[Never, E]:
    """Wrap `error` in `Err`."""
    return Err(error)


def wrap_sync[T](f: Callable[[], T]) -> Result[T, Exception]:
    """Call `f` once, capturing a raised exception as the `Err` payload.

    Args:
        f (Callable[[], T]): The function to call.

    Returns:
        Result[T, Exception]: `Ok(f())`, or `Err` holding the exception object itself.

    Example:
    ```python
    >>> from optres import result
    >>> result.wrap_sync(lambda: 1 / 2)
    Ok(value=0.5)
    >>> result.wrap_sync(lambda: 1 / 0)
    Err(error=ZeroDivisionError('division by zero'))

    ```
    """
    try:
        return Ok(f())
    except Exception as e:  # noqa: BLE001
        log.debug("wrap_sync captured %s: %s", type(e).__name__, e)
        return Err(e)


async def wrap_async[T](awaitable: Awaitable[T]) -> Result[T, Exception]:
    """Await `awaitable` once, capturing a raised exception as the `Err` payload.

    `BaseException` subclasses such as `asyncio.CancelledError` are not captured.

    Args:
        awaitable (Awaitable[T]): A coroutine, task or future.

    Returns:
        Result[T, Exception]: `Ok(result)`, or `Err` holding the exception object itself.
    """
    try:
        return Ok(await awaitable)
    except Exception as e:  # noqa: BLE001
        log.debug("wrap_async captured %s: %s", type(e).__name__, e)
        return Err(e)


def collect[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Turn an iterable of results into a result of a list.

    The first `Err` is returned as is, and later items are not pulled from the iterable.

    Args:
        results (Iterable[Result[T, E]]): The results to gather, in order.

    Returns:
        Result[list[T], E]: `Ok` of every value in input order, or the first `Err`.

    Example:
    ```python
    >>> from optres import result
    >>> result.collect([result.ok(1), result.ok(2), result.ok(3)])
    Ok(value=[1, 2, 3])
    >>> result.collect([result.ok(1), result.err("e"), result.ok(3)])
    Err(error='e')

    ```
    """
    values: list[T] = []
    for res in results:
        if res.is_err():
            return res  # type: ignore[return-value]
        values.append(res.unwrap())
    return Ok(values)
