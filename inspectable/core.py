"""Visitor protocol and struct-like value inspection."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from inspectable.fields import Fields, NamedField


class Visit(ABC):
    """Receives the parts of a value while it is being inspected."""

    @abstractmethod
    def visit_value(self, value: Any) -> None:
        """Visit a single value."""

    def visit_named_fields(self, named_values: NamedValues) -> None:
        """Visit the named fields of a struct or variant; each value is forwarded."""
        for _, value in named_values:
            self.visit_value(value)

    def visit_unnamed_fields(self, values: Sequence[Any]) -> None:
        """Visit positional fields; each value is forwarded."""
        for value in values:
            self.visit_value(value)

    def visit_entry(self, key: Any, value: Any) -> None:
        """Visit a key/value pair of a map; ignored unless overridden."""


class Valuable(ABC):
    """A value that can be inspected through a :class:`Visit`."""

    def as_value(self) -> Any:
        """Return the value handed to visitors; the object itself by default."""
        return self

    @abstractmethod
    def visit(self, visitor: Visit) -> None:
        """Pass the contents of this value to ``visitor``."""


@dataclass(frozen=True)
class StructDef:
    """A struct's name and fields, known ahead of time or built at run time."""

    name: str
    fields: Fields
    dynamic: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.fields, Fields):
            raise TypeError("fields must be a Fields instance")

    @classmethod
    def new_static(cls, name: str, fields: Fields) -> StructDef:
        """A definition whose fields are all known ahead of time."""
        return cls(name, fields, dynamic=False)

    @classmethod
    def new_dynamic(cls, name: str, fields: Fields) -> StructDef:
        """A definition whose fields may vary at run time."""
        return cls(name, fields, dynamic=True)

    def is_static(self) -> bool:
        """Return True if the struct is statically defined."""
        return not self.dynamic

    def is_dynamic(self) -> bool:
        """Return True if the struct is dynamically defined."""
        return self.dynamic


class Structable(Valuable):
    """A struct-like value with named or positional fields."""

    @abstractmethod
    def definition(self) -> StructDef:
        """Return the struct's definition."""


class NamedValues:
    """Named fields paired with their values."""

    __slots__ = ("_fields", "_values")

    def __init__(self, fields: Iterable[NamedField], values: Iterable[Any]) -> None:
        self._fields = tuple(fields)
        self._values = tuple(values)
        if len(self._fields) != len(self._values):
            raise ValueError(
                f"{len(self._fields)} fields but {len(self._values)} values"
            )

    @property
    def fields(self) -> tuple[NamedField, ...]:
        return self._fields

    @property
    def values(self) -> tuple[Any, ...]:
        return self._values

    def get(self, field: NamedField) -> Any:
        """Return the value of this very field object, or None if it is not present."""
        for candidate, value in zip(self._fields, self._values):
            if candidate is field:
                return value
        return None

    def get_by_name(self, name: str) -> Any:
        """Return the value of the first field called ``name``, or None."""
        for candidate, value in zip(self._fields, self._values):
            if candidate.name == name:
                return value
        return None

    def __iter__(self) -> Iterator[tuple[NamedField, Any]]:
        return zip(self._fields, self._values)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        inner = ", ".join(f"{f.name}={v!r}" for f, v in self)
        return f"NamedValues({inner})"


def visit(value: Any, visitor: Visit) -> None:
    """Hand ``value`` to ``visitor.visit_value``."""
    visitor.visit_value(value.as_value() if isinstance(value, Valuable) else value)