from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs

from .._core import Pipeable, get_config


class OptionUnwrapError(RuntimeError): ...


class Option[T](Pipeable, ABC):
    """A value that is either present (`Some`) or absent (`NONE`).

    Every combinator returns a new `Option` (or a plain value) and never mutates the receiver.
    """

    __slots__ = ()

    @staticmethod
    def from_nullable[V](value: V | None) -> Option[V]:
        """
        Builds an `Option` from a value that may be `None`.

        Only `None` maps to `NONE`. Falsy values such as `0`, `False` or `""` are wrapped in `Some`.

        Args:
            value: The possibly missing value.

        Returns:
            `Some(value)` if `value` is not `None`, otherwise `NONE`.

        Example:
            ```python
            >>> from optres import Option
            >>> Option.from_nullable(0)
            Some(value=0)
            >>> Option.from_nullable(None)
            NONE

            ```
        """
        return NONE if value is None else Some(value)

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `Some` value.

        Returns:
            `True` if the option is a `Some` variant, `False` otherwise.

        Example:
            ```python
            >>> from optres import Some, NONE, Option
            >>> x: Option[int] = Some(2)
            >>> x.is_some()
            True
            >>> y: Option[int] = NONE
            >>> y.is_some()
            False

            ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `None` value.

        Returns:
            `True` if the option is a `NoneOption` variant, `False` otherwise.

        Example:
            ```python
            >>> from optres import Some, NONE, Option
            >>> x: Option[int] = Some(2)
            >>> x.is_none()
            False
            >>> y: Option[int] = NONE
            >>> y.is_none()
            True

            ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Some` value.

        Returns:
            The contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `None`.

        Example:
            ```python
            >>> from optres import Some, NONE
            >>> Some("car").unwrap()
            'car'
            >>> NONE.unwrap()
            Traceback (most recent call last):
                ...
            optres._results._option.OptionUnwrapError: Called unwrap on a None value

            ```
        """
        ...

    def expect(self, msg: str) -> T:
        """
        Returns the contained `Some` value.
        Raises an exception with the provided message, unchanged, if the value is `None`.

        Args:
            msg: The message of the exception raised if the option is `None`.

        Returns:
            The contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `None`.

        Example:
            ```python
            >>> from optres import Some, NONE
            >>> Some("value").expect("fruits are healthy")
            'value'
            >>> NONE.expect("fruits are healthy")
            Traceback (most recent call last):
                ...
            optres._results._option.OptionUnwrapError: fruits are healthy

            ```
        """
        if self.is_some():
            return self.unwrap()
        raise OptionUnwrapError(msg)

    def unwrap_or[U](self, default: U) -> T | U:
        """
        Returns the contained `Some` value or a provided default.

        Args:
            default: The value to return if the option is `None`.

        Returns:
            The contained `Some` value or the provided default.

        Example:
            ```python
            >>> from optres import Some, NONE
            >>> Some("car").unwrap_or("bike")
            'car'
            >>> NONE.unwrap_or("bike")
            'bike'

            ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else[U](self, f: Callable[[], U]) -> T | U:
        """
        Returns the contained `Some` value or computes it from a function.

        Args:
            f: A function that returns a default value if the option is `None`.

        Returns:
            The contained `Some` value or the result of the function.

        Example:
            ```python
            >>> from optres import Some, NONE
            >>> k = 10
            >>> Some(4).unwrap_or_else(lambda: 2 * k)
            4
            >>> NONE.unwrap_or_else(lambda: 2 * k)
            20

            ```
        """
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value,
        leaving a `None` value untouched.

        Args:
            f: The function to apply to the `Some` value.

        Returns:
            A new `Option` with the mapped value if `Some`, otherwise `None`.

        Example:
            ```python
            >>> from optres import Some, NONE
            >>> Some("Hello, World!").map(len)
            Some(value=13)
            >>> NONE.map(len)
            NONE

            ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:
        """
        Returns the provided default (if `None`), or applies a function to the contained value (if `Some`).

        `default` is evaluated eagerly; use `map_or_else` to compute it lazily.

        Args:
            default: The value returned if the option is `None`.
            f: The function to apply to the `Some` value.

        Returns:
            `f(value)` if `Some`, otherwise `default`.

        Example:
            ```python
            >>> from optres import Some, NONE
            >>> Some("foo").map_or(42, len)
            3
            >>> NONE.map_or(42, len)
            42

            ```
        """
        return f(self.unwrap()) if self.is_some() else default

    def map_or_else[U](self, default: Callable[[], U], f: Callable[[T], U]) -> U:
        """
        Computes a default function result (if `None`), or applies a different function to the contained value (if `Some`).

        Args:
            default: Called with no argument if the option is `None`.
            f: The function to apply to the `Some` value.

        Returns:
            `f(value)` if `Some`, otherwise `default()`.

        Example:
            ```python
            >>> from optres import Some, NONE
            >>> k = 21
            >>> Some("foo").map_or_else(lambda: 2 * k, len)
            3
            >>> NONE.map_or_else(lambda: 2 * k, len)
            42

            ```
        """
        return f(self.unwrap()) if self.is_some() else default()

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """
        Returns `None` if the option is `None`, otherwise calls `predicate` with the wrapped value and returns:

        - `Some(value)` if `predicate` returns `True`,
        - `None` if `predicate` returns `False`.

        Args:
            predicate: The test applied to the `Some` value.

        Returns:
            The original option if it holds a value satisfying `predicate`, otherwise `None`.

        Example:
            ```python
            >>> from optres import Some, NONE
            >>> def is_even(n: int) -> bool:
            ...     return n % 2 == 0
            >>> NONE.filter(is_even)
            NONE
            >>> Some(3).filter(is_even)
            NONE
            >>> Some(4).filter(is_even)
            Some(value=4)

            ```
        """
        if self.is_some() and predicate(self.unwrap()):
            return self
        return NONE

    def and_[U](self, other: Option[U]) -> Option[U]:
        """
        Returns `None` if the option is `None`, otherwise returns `other`.

        `other` is already computed; use `and_then` to build it lazily from the contained value.

        Args:
            other: The option returned when `self` is `Some`.

        Returns:
            `other` if `self` is `Some`, otherwise `None`.

        Example:
            ```python
            >>> from optres import Some, NONE
            >>> Some(2).and_(Some("foo"))
            Some(value='foo')
            >>> Some(2).and_(NONE)
            NONE
            >>> NONE.and_(Some("foo"))
            NONE

            ```
        """
        return other if self.is_some() else NONE

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """
        Calls a function if the option is `Some`, otherwise returns `None`.
        Some languages call this operation flatmap.

        Args:
            f: The function to call with the `Some` value.

        Returns:
            The result of the function if `Some`, otherwise `None`.

        Example:
            ```python
            >>> from optres import Some, NONE, Option
            >>> def sq(x: int) -> Option[int]:
            ...     return Some(x * x)
            >>> def nope(x: int) -> Option[int]:
            ...     return NONE
            >>> Some(2).and_then(sq).and_then(sq)
            Some(value=16)
            >>> Some(2).and_then(sq).and_then(nope)
            NONE
            >>> Some(2).and_then(nope).and_then(sq)
            NONE
            >>> NONE.and_then(sq).and_then(sq)
            NONE

            ```
        """
        if self.is_some():
            return f(self.unwrap())
        return NONE

    def or_(self, other: Option[T]) -> Option[T]:
        """
        Returns the option if it contains a value, otherwise returns `other`.

        Args:
            other: The option returned when `self` is `None`.

        Returns:
            `self` if `Some`, otherwise `other`.

        Example:
            ```python
            >>> from optres import Some, NONE
            >>> Some(2).or_(NONE)
            Some(value=2)
            >>> NONE.or_(Some(100))
            Some(value=100)
            >>> Some(2).or_(Some(100))
            Some(value=2)
            >>> NONE.or_(NONE)
            NONE

            ```
        """
        return self if self.is_some() else other

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """
        Returns the option if it contains a value, otherwise calls a function and returns the result.

        Args:
            f: The function to call if the option is `None`.

        Returns:
            The original `Option` if it is `Some`, otherwise the result of the function.

        Example:
            ```python
            >>> from optres import Some, NONE, Option
            >>> def nobody() -> Option[str]:
            ...     return NONE
            >>> def vikings() -> Option[str]:
            ...     return Some("vikings")
            >>> Some("barbarians").or_else(vikings)
            Some(value='barbarians')
            >>> NONE.or_else(vikings)
            Some(value='vikings')
            >>> NONE.or_else(nobody)
            NONE

            ```
        """
        return self if self.is_some() else f()

    def to_nullable(self) -> T | None:
        """
        Collapses the option into its value, or `None` when absent.

        Example:
            ```python
            >>> from optres import Some, NONE
            >>> Some(1).to_nullable()
            1
            >>> NONE.to_nullable() is None
            True

            ```
        """
        return self.unwrap() if self.is_some() else None

    def to_undefined(self) -> T | None:
        """Same as `to_nullable`, `None` being Python's only missing value."""
        return self.unwrap() if self.is_some() else None


@dataclass(slots=True, frozen=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.

    Example:
    ```python
    >>> import optres as ot
    >>> ot.Some(42)
    Some(value=42)

    ```
    """

    value: T

    def __repr__(self) -> str:
        return f"Some(value={get_config().value_repr(self.value)})"

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` for `Some`."""
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `False` for `Some`."""
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True, frozen=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    @property
    def value(self) -> Never:
        """
        Raises `OptionUnwrapError` because there is no value.

        Raises:
            OptionUnwrapError: Always, since `None` contains no value.
        """
        raise OptionUnwrapError("Called value on a None option")

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        """Returns `False` for `None`."""
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` for `None`."""
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("Called unwrap on a None value")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
