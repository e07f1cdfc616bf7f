"""Field descriptions shared by struct-like and enum-like values."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class NamedField:
    """A named field."""

    name: str


@dataclass(frozen=True)
class Fields:
    """The fields of a struct or variant: named ones, or a count of unnamed ones.

    Use :meth:`named` or :meth:`unnamed` to build an instance. ``names`` is
    ``None`` for unnamed (positional) fields and for unit shapes.
    """

    names: tuple[NamedField, ...] | None = None
    count: int = 0

    def __post_init__(self) -> None:
        if self.names is not None:
            names = tuple(self.names)
            for item in names:
                if not isinstance(item, NamedField):
                    raise TypeError(f"expected NamedField, got {type(item).__name__}")
            object.__setattr__(self, "names", names)
            object.__setattr__(self, "count", len(names))
            return
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise TypeError("the number of unnamed fields must be an integer")
        if self.count < 0:
            raise ValueError("the number of unnamed fields cannot be negative")

    @classmethod
    def named(cls, fields: Iterable[NamedField | str]) -> Fields:
        """Named fields; plain strings are turned into :class:`NamedField`."""
        return cls(
            names=tuple(f if isinstance(f, NamedField) else NamedField(f) for f in fields)
        )

    @classmethod
    def unnamed(cls, count: int) -> Fields:
        """``count`` positional fields; zero describes a unit shape."""
        return cls(count=count)

    def is_named(self) -> bool:
        """Return True if the fields are named."""
        return self.names is not None

    def is_unnamed(self) -> bool:
        """Return True if the fields are positional."""
        return self.names is None

    def __len__(self) -> int:
        return self.count

    def is_empty(self) -> bool:
        """Return True if no fields are defined."""
        return len(self) == 0