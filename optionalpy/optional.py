from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


class _Undefined:
    """Marker for a slot that was never given a value (distinct from ``None``)."""
    __slots__ = ()
    def __repr__(self) -> str: return "<undefined>"
    def __bool__(self) -> bool: return False


UNDEFINED: Any = _Undefined()


def _strict_equals(a: Any, b: Any) -> bool:
    # Numbers and strings compare by value; bool never equals a number;
    # anything else only matches itself.
    if a is b:
        return True
    if isinstance(a, bool) or isinstance(b, bool):
        return False
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a == b
    if isinstance(a, (str, bytes)) and type(a) is type(b):
        return a == b
    return False


@dataclass(frozen=True)
class Optional(Generic[T]):
    """Holds zero or one value.

    The slot is in one of three states: ``UNDEFINED`` (nothing supplied),
    ``None`` (explicitly empty) or a present value. Only the last counts as
    present for the combinators below.
    """
    value: Any = UNDEFINED

    @staticmethod
    def empty() -> "Optional[Any]":
        return Optional()

    @staticmethod
    def of_nullable(value: Any) -> "Optional[Any]":
        return Optional(value)

    def get(self) -> Any:
        """Return the raw slot, which may be ``UNDEFINED`` or ``None``."""
        return self.value

    def is_defined(self) -> bool: return self.value is not UNDEFINED
    def is_not_null(self) -> bool: return self.value is not None
    def is_present(self) -> bool: return self.is_defined() and self.is_not_null()

    def get_or(self, default: Union[U, Callable[[], U]]) -> Union[T, U]:
        """Return the value if present, else ``default``.

        A callable ``default`` is treated as a producer and only called when
        the value is absent.
        """
        if self.is_present():
            return self.value
        if callable(default):
            return default()
        return default

    def if_present(self, f: Callable[[T], Any]) -> None:
        if self.is_present():
            f(self.value)

    def if_present_or_else(self, f: Callable[[T], Any], else_fn: Callable[[], Any]) -> None:
        if self.is_present():
            f(self.value)
        else:
            else_fn()

    def map(self, f: Callable[[T], U]) -> "Optional[U]":
        if self.is_present():
            return Optional.of_nullable(f(self.value))
        return Optional.empty()

    def flat_map(self, f: Callable[[T], U]) -> U:
        # Unlike map, neither branch is wrapped: absent yields the bare UNDEFINED.
        if self.is_present():
            return f(self.value)
        return UNDEFINED

    def filter(self, p: Union[Callable[[T], Any], T]) -> "Optional[T]":
        """Keep the value if ``p(value)`` is truthy, or if ``p`` is not callable
        and strictly equal to the value: numbers and strings by value, ``True``
        never equal to ``1``, containers and other objects only by identity."""
        if not self.is_present():
            return Optional.empty()
        matches = p(self.value) if callable(p) else _strict_equals(self.value, p)
        return Optional.of_nullable(self.value) if matches else Optional.empty()
