"""Log Object Notation: a small tree of strings, arrays and objects with a text renderer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Iterable, Iterator

__all__ = [
    "LonKind",
    "LonValue",
    "LonString",
    "LonArray",
    "LonObject",
    "Stringifier",
    "lonify",
]


class LonKind(Enum):
    """The kind of a LON node."""

    ARRAY = "array"
    OBJECT = "object"
    STRING = "string"


class LonValue(ABC):
    """Base class of every LON node."""

    @property
    @abstractmethod
    def kind(self) -> LonKind:
        """The kind of this node."""


class LonString(LonValue):
    """A leaf holding text."""

    __slots__ = ("value",)

    def __init__(self, value: str) -> None:
        self.value = str(value)

    @property
    def kind(self) -> LonKind:
        return LonKind.STRING

    def __add__(self, other: Any) -> LonString:
        if isinstance(other, LonString):
            return LonString(self.value + other.value)
        if isinstance(other, str):
            return LonString(self.value + other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LonString):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"LonString({self.value!r})"


class LonArray(LonValue):
    """An ordered sequence of LON nodes."""

    def __init__(self, values: Iterable[LonValue] = ()) -> None:
        self._values: list[LonValue] = list(values)

    @property
    def kind(self) -> LonKind:
        return LonKind.ARRAY

    def push(self, value: LonValue) -> None:
        """Append a node at the end."""
        self._values.append(value)

    def pop(self) -> LonValue:
        """Remove and return the last node; IndexError when empty."""
        if not self._values:
            raise IndexError("pop from empty LonArray")
        return self._values.pop()

    @property
    def values(self) -> tuple[LonValue, ...]:
        return tuple(self._values)

    def __iter__(self) -> Iterator[LonValue]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"LonArray({self._values!r})"


class LonObject(LonValue):
    """A mapping of keys to LON nodes, kept in key order."""

    def __init__(self) -> None:
        self._data: dict[str, LonValue] = {}

    @property
    def kind(self) -> LonKind:
        return LonKind.OBJECT

    def get_key(self, key: str) -> LonValue:
        """Return the node stored under key; KeyError when absent."""
        return self._data[key]

    def set_key(self, key: str, value: LonValue) -> None:
        """Store value under key unless the key is already present."""
        self._data.setdefault(key, value)

    def items(self) -> list[tuple[str, LonValue]]:
        """Key/value pairs sorted by key."""
        return sorted(self._data.items(), key=lambda pair: pair[0])

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"LonObject({dict(self.items())!r})"


def lonify(value: Any) -> LonValue:
    """Turn a plain value, or an object with ``to_lon``, into a LON node."""
    if isinstance(value, LonValue):
        return value
    if isinstance(value, str):
        return LonString(value)
    if isinstance(value, bool):
        return LonString(str(int(value)))
    if isinstance(value, int):
        return LonString(str(value))
    if isinstance(value, float):
        return LonString(f"{value:f}")
    to_lon = getattr(value, "to_lon", None)
    if callable(to_lon):
        return to_lon()
    raise TypeError(f"cannot lonify value of type {type(value).__name__}")


class Stringifier:
    """Renders LON trees as indented text."""

    def __init__(self, indent_width: int = 4) -> None:
        if not 1 <= indent_width <= 0xFFFF:
            raise ValueError("invalid lon_indent_width supplied")
        self.indent_width = indent_width

    def stringify(self, value: LonValue) -> str:
        """Render a LON node."""
        return self._render(value, 0)

    def _indent(self, depth: int) -> str:
        return ("|" + " " * (self.indent_width - 1)) * depth

    def _render(self, value: LonValue, depth: int) -> str:
        if isinstance(value, LonString):
            return value.value
        if isinstance(value, LonArray):
            lines = ["["]
            lines.extend(
                self._indent(depth + 1) + self._render(item, depth + 1) for item in value
            )
            lines.append(self._indent(depth) + "]")
            return "\n".join(lines)
        if isinstance(value, LonObject):
            lines = ["{"]
            lines.extend(
                f"{self._indent(depth + 1)}{key}: {self._render(item, depth + 1)}"
                for key, item in value.items()
            )
            lines.append(self._indent(depth) + "}")
            return "\n".join(lines)
        raise TypeError(f"cannot stringify value of type {type(value).__name__}")