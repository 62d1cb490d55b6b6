from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Never, TypeIs, cast

from .._core import Pipeable, get_config


class ResultUnwrapError(RuntimeError): ...


class Result[T, E](Pipeable, ABC):
    """The outcome of a computation: either a success (`Ok`) or a failure (`Err`).

    Combinators only ever touch one channel. The other one passes through as the very same instance.
    """

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """
        Returns True if the result is Ok.

        Equivalent to Rust's Result::is_ok().
        """
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """
        Returns True if the result is Err.

        Equivalent to Rust's Result::is_err().
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained Ok value, or raises ResultUnwrapError if the result is Err.

        Example:
            ```python
            >>> from optres import Ok, Err
            >>> Ok(2).unwrap()
            2
            >>> Err("emergency failure").unwrap()
            Traceback (most recent call last):
                ...
            optres._results._result.ResultUnwrapError: Called unwrap on an Err value: emergency failure

            ```

        Equivalent to Rust's Result::unwrap().
        """
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """
        Returns the contained Err value, or raises ResultUnwrapError if the result is Ok.

        Equivalent to Rust's Result::unwrap_err().
        """
        ...

    @property
    def ok(self) -> bool:
        """
        `True` for `Ok`, `False` for `Err`. Mirrors `is_ok()` for attribute-style checks.

        Example:
            ```python
            >>> from optres import Ok, Err
            >>> Ok(1).ok, Err("e").ok
            (True, False)

            ```
        """
        return self.is_ok()

    def expect(self, msg: str) -> T:
        """
        Returns the contained Ok value, or raises ResultUnwrapError with a custom message if the result is Err.

        Args:
            msg: The message to display if the result is Err.

        Returns:
            The contained Ok value.

        Raises:
            ResultUnwrapError: If the result is Err, with the provided message and error.

        Example:
            ```python
            >>> from optres import Err
            >>> Err("emergency failure").expect("Testing expect")
            Traceback (most recent call last):
                ...
            optres._results._result.ResultUnwrapError: Testing expect: emergency failure

            ```

        Equivalent to Rust's Result::expect().
        """
        if self.is_ok():
            return self.unwrap()
        raise ResultUnwrapError(f"{msg}: {self.unwrap_err()}")

    def expect_err(self, msg: str) -> E:
        """
        Returns the contained Err value, or raises ResultUnwrapError with a custom message if the result is Ok.

        Args:
            msg: The message to display if the result is Ok.

        Returns:
            The contained Err value.

        Raises:
            ResultUnwrapError: If the result is Ok, with the provided message and value.

        Equivalent to Rust's Result::expect_err().
        """
        if self.is_err():
            return self.unwrap_err()
        raise ResultUnwrapError(f"{msg}: {self.unwrap()}")

    def unwrap_or[U](self, default: U) -> T | U:
        """
        Returns the contained Ok value or a provided default.

        Args:
            default: The value to return if the result is Err.

        Returns:
            The contained Ok value or the default.

        Equivalent to Rust's Result::unwrap_or().
        """
        return self.unwrap() if self.is_ok() else default

    def unwrap_or_else[U](self, f: Callable[[E], U]) -> T | U:
        """
        Returns the contained Ok value or computes it from a function if Err.

        Args:
            f: Callable that takes the Err value and returns a fallback.

        Returns:
            The contained Ok value or the result of f(error).

        Example:
            ```python
            >>> from optres import Ok, Err
            >>> Ok(2).unwrap_or_else(len)
            2
            >>> Err("foo").unwrap_or_else(len)
            3

            ```

        Equivalent to Rust's Result::unwrap_or_else().
        """
        return self.unwrap() if self.is_ok() else f(self.unwrap_err())

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:
        """
        Returns the provided default if Err, or applies a function to the contained Ok value.

        Equivalent to Rust's Result::map_or().
        """
        return f(self.unwrap()) if self.is_ok() else default

    def map_or_else[U](self, default: Callable[[E], U], f: Callable[[T], U]) -> U:
        """
        Folds the result into a single value, calling `f` if Ok, or `default` with the error if Err.

        Args:
            default: Callable to handle the Err value.
            f: Callable to handle the Ok value.

        Returns:
            The result of the called function.

        Example:
            ```python
            >>> from optres import Ok, Err
            >>> k = 21
            >>> Ok("foo").map_or_else(lambda e: k * 2, len)
            3
            >>> Err("bar").map_or_else(lambda e: k * 2, len)
            42

            ```

        Equivalent to Rust's Result::map_or_else().
        """
        return f(self.unwrap()) if self.is_ok() else default(self.unwrap_err())

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """
        Maps a Result[T, E] to Result[U, E] by applying a function to a contained Ok value, leaving Err untouched.

        Args:
            f: Callable to apply to the Ok value.

        Returns:
            Result[U, E]: Ok(f(value)) if Ok, otherwise the same Err instance.

        Example:
            ```python
            >>> from optres import Ok, Err
            >>> Ok(2).map(lambda x: x * 2)
            Ok(value=4)
            >>> Err("nope").map(lambda x: x * 2)
            Err(error='nope')

            ```

        Equivalent to Rust's Result::map().
        """
        if self.is_ok():
            return Ok(f(self.unwrap()))
        return cast(Result[U, E], self)

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """
        Maps a Result[T, E] to Result[T, F] by applying a function to a contained Err value, leaving Ok untouched.

        Args:
            f: Callable to apply to the Err value.

        Returns:
            Result[T, F]: Err(f(error)) if Err, otherwise the same Ok instance.

        Example:
            ```python
            >>> from optres import Ok, Err
            >>> Err(13).map_err(str)
            Err(error='13')
            >>> Ok(2).map_err(str)
            Ok(value=2)

            ```

        Equivalent to Rust's Result::map_err().
        """
        if self.is_err():
            return Err(f(self.unwrap_err()))
        return cast(Result[T, F], self)

    def and_[U](self, other: Result[U, E]) -> Result[U, E]:
        """
        Returns `other` if the result is Ok, otherwise the Err value of self.

        Args:
            other: The result returned when `self` is Ok.

        Returns:
            Result[U, E]: `other` if Ok, otherwise `self`, preserving the original error.

        Example:
            ```python
            >>> from optres import Ok, Err
            >>> Ok(2).and_(Err("late error"))
            Err(error='late error')
            >>> Err("early error").and_(Ok("foo"))
            Err(error='early error')
            >>> Ok(2).and_(Ok("different result type"))
            Ok(value='different result type')

            ```

        Equivalent to Rust's Result::and().
        """
        if self.is_ok():
            return other
        return cast(Result[U, E], self)

    def and_then[U, F](self, f: Callable[[T], Result[U, F]]) -> Result[U, E | F]:
        """
        Calls f if the result is Ok, otherwise returns Err.

        The error type widens to `E | F`, so steps failing with unrelated error types can be chained.

        Args:
            f: Callable that takes the Ok value and returns a Result.

        Returns:
            Result[U, E | F]: The result of f(value) if Ok, otherwise the same Err instance.

        Equivalent to Rust's Result::and_then().
        """
        if self.is_ok():
            return f(self.unwrap())
        return cast(Result[U, E | F], self)

    def or_[U](self, other: Result[U, E]) -> Result[T | U, E]:
        """
        Returns `other` if the result is Err, otherwise the Ok value of self.

        Args:
            other: The result returned when `self` is Err.

        Returns:
            Result[T | U, E]: `self` if Ok, otherwise `other`.

        Example:
            ```python
            >>> from optres import Ok, Err
            >>> Ok(2).or_(Err("late error"))
            Ok(value=2)
            >>> Err("early error").or_(Ok(2))
            Ok(value=2)
            >>> Err("not a 2").or_(Err("late error"))
            Err(error='late error')

            ```

        Equivalent to Rust's Result::or().
        """
        if self.is_ok():
            return self
        return other

    def or_else[U, F](self, f: Callable[[E], Result[U, F]]) -> Result[T | U, F]:
        """
        Calls f if the result is Err, otherwise returns Ok.

        Args:
            f: Callable that takes the Err value and returns a Result.

        Returns:
            Result[T | U, F]: self if Ok, otherwise the result of f(error).

        Equivalent to Rust's Result::or_else().
        """
        if self.is_ok():
            return cast(Result[T | U, F], self)
        return f(self.unwrap_err())


@dataclass(slots=True, frozen=True)
class Ok[T, E](Result[T, E]):
    """Represents a successful value."""

    value: T

    def __repr__(self) -> str:
        return f"Ok(value={get_config().value_repr(self.value)})"

    @property
    def error(self) -> Never:
        """
        Raises ResultUnwrapError because there is no error value.

        Raises:
            ResultUnwrapError: Always, since Ok contains no error.
        """
        raise ResultUnwrapError("Called error on an Ok result")

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        raise ResultUnwrapError(f"Called unwrap_err on an Ok value: {self.value}")


@dataclass(slots=True, frozen=True)
class Err[T, E](Result[T, E]):
    """Represents an error value."""

    error: E

    def __repr__(self) -> str:
        return f"Err(error={get_config().value_repr(self.error)})"

    @property
    def value(self) -> Never:
        """
        Raises ResultUnwrapError because there is no Ok value.

        Raises:
            ResultUnwrapError: Always, since Err contains no value.
        """
        raise ResultUnwrapError("Called value on an Err result")

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise ResultUnwrapError(f"Called unwrap on an Err value: {self.error}")

    def unwrap_err(self) -> E:
        return self.error
