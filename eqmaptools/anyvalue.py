"""A container holding a single value of any type, with exact-type retrieval."""

from __future__ import annotations

import copy
from typing import Any, Optional, Type, TypeVar

T = TypeVar("T")

_EMPTY = object()


class BadAnyCast(TypeError):
    """Raised when a held value is asked for as a type it does not have."""

    def __init__(self, message: str = "bad_any_cast: failed conversion using any_cast") -> None:
        super().__init__(message)


class AnyValue:
    """Holds one value, or nothing."""

    __slots__ = ("_content",)

    def __init__(self, value: Any = _EMPTY) -> None:
        if isinstance(value, AnyValue):
            self._content = value._cloned_content()
        else:
            self._content = value

    def _cloned_content(self) -> Any:
        if self._content is _EMPTY:
            return _EMPTY
        return copy.copy(self._content)

    def empty(self) -> bool:
        """Whether nothing is held."""
        return self._content is _EMPTY

    def type(self) -> type:
        """The exact type of the held value; ``NoneType`` when empty."""
        if self._content is _EMPTY:
            return type(None)
        return type(self._content)

    def swap(self, other: "AnyValue") -> "AnyValue":
        """Exchange contents with another container."""
        self._content, other._content = other._content, self._content
        return self

    def assign(self, value: Any) -> "AnyValue":
        """Replace the content with a value, or with a copy of another container's content."""
        if isinstance(value, AnyValue):
            self._content = value._cloned_content()
        else:
            self._content = value
        return self

    def copy(self) -> "AnyValue":
        """A new container holding a copy of this one's content."""
        duplicate = AnyValue()
        duplicate._content = self._cloned_content()
        return duplicate

    def _held(self) -> Any:
        return self._content

    def __repr__(self) -> str:
        if self.empty():
            return "AnyValue()"
        return f"AnyValue({self._content!r})"


def try_any_cast(operand: Optional[AnyValue], value_type: Type[T]) -> Optional[T]:
    """The held value if it is exactly of ``value_type``, otherwise None."""
    if operand is None or operand.empty():
        return None
    if operand.type() is not value_type:
        return None
    return operand._held()


def any_cast(operand: AnyValue, value_type: Type[T]) -> T:
    """The held value if it is exactly of ``value_type``; raises BadAnyCast otherwise."""
    if operand is None or operand.empty() or operand.type() is not value_type:
        raise BadAnyCast()
    return operand._held()