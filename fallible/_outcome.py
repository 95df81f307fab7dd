from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import Any, Literal, Never

import attrs
from typing_extensions import TypeIs

from ._exceptions import UnwrapError, with_note


@attrs.frozen(repr=False, str=False)
class Ok[T]:
    """The successful variant of an outcome, holding a value.

    The value can be None for operations that don't produce anything.
    """

    value: T

    @staticmethod
    def is_ok() -> Literal[True]:
        return True

    @staticmethod
    def is_err() -> Literal[False]:
        return False

    def error_or_none(self) -> None:
        return None

    def value_or_none(self) -> T:
        return self.value

    def value_or(self, default: T) -> T:
        """Return the value, or the default if the value is None.

        An ``Ok(None)`` falls back to the default just like an error does.
        """

        if self.value is None:
            return default
        return self.value

    def fold[R](self, on_ok: Callable[[T], R], on_err: Callable[[Any], R]) -> R:
        return on_ok(self.value)

    def map[R](self, func: Callable[[T], R]) -> Ok[R]:
        return Ok(func(self.value))

    def flat_map[R, E](self, func: Callable[[T], Outcome[R, E]]) -> Outcome[R, E]:
        return func(self.value)

    def map_error(self, func: Callable) -> Ok[T]:
        return self

    map_success = map
    map_failure = map_error

    def on_ok(self, action: Callable[[T], Any]) -> None:
        action(self.value)

    def on_err(self, action: Callable) -> None:
        pass

    def unwrap_or_raise(self) -> None:
        pass

    def __str__(self) -> str:
        return f"Outcome.ok({self.value})"

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@attrs.frozen(repr=False, str=False)
class Err[E]:
    """The failed variant of an outcome, holding an error."""

    error: E

    @staticmethod
    def is_ok() -> Literal[False]:
        return False

    @staticmethod
    def is_err() -> Literal[True]:
        return True

    def error_or_none(self) -> E:
        return self.error

    def value_or_none(self) -> None:
        return None

    def value_or[T](self, default: T) -> T:
        return default

    def fold[R](self, on_ok: Callable[[Any], R], on_err: Callable[[E], R]) -> R:
        return on_err(self.error)

    def map(self, func: Callable) -> Err[E]:
        return self

    def flat_map(self, func: Callable) -> Err[E]:
        return self

    def map_error[F](self, func: Callable[[E], F]) -> Err[F]:
        return Err(func(self.error))

    map_success = map
    map_failure = map_error

    def on_ok(self, action: Callable) -> None:
        pass

    def on_err(self, action: Callable[[E], Any]) -> None:
        action(self.error)

    def unwrap_or_raise(self) -> Never:
        """Raise an :class:`UnwrapError` carrying the error."""

        exc = with_note(
            UnwrapError(self.error),
            f"Unwrapped an outcome holding {type(self.error).__qualname__}.",
        )
        if isinstance(self.error, BaseException):
            raise exc from self.error
        raise exc

    def __str__(self) -> str:
        return f"Outcome.err({self.error})"

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Outcome[T, E] = Ok[T] | Err[E]


def is_ok[T](outcome: Outcome[T, Any]) -> TypeIs[Ok[T]]:
    return outcome.is_ok()


def is_err[E](outcome: Outcome[Any, E]) -> TypeIs[Err[E]]:
    return outcome.is_err()


def is_err_type[E](outcome: Outcome, error_type: type[E]) -> TypeIs[Err[E]]:
    return is_err(outcome) and isinstance(outcome.error, error_type)


def combine[T, E](outcomes: Iterable[Outcome[T, E]]) -> Outcome[list[T], E]:
    """Gather the values of several outcomes into a single outcome.

    The outcomes are consumed in order.
    As soon as an error is found, it is returned and the remaining outcomes are not
    consumed.
    If all outcomes are successful, the result holds the list of their values in the
    same order.
    """

    values: list[T] = []
    for outcome in outcomes:
        match outcome:
            case Err():
                return outcome
            case Ok(value):
                values.append(value)
    return Ok(values)


async def from_async[T](
    action: Callable[[], Awaitable[T]]
) -> Outcome[T, Exception]:
    """Await an asynchronous action and capture how it ended.

    Returns:
        Ok holding the value returned by the action, or Err holding the exception it
        raised.
        Exceptions that don't inherit from :class:`Exception`, like cancellation,
        are not captured and propagate to the caller.
    """

    try:
        value = await action()
    except Exception as error:
        return Err(error)
    return Ok(value)
