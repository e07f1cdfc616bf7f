"""List-like value inspection."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable, Mapping, Sized
from dataclasses import dataclass
from typing import Any

from inspectable.core import Valuable, Visit
from inspectable.enumerable import Enumerable, debug_enumerable


class Listable(Valuable):
    """A list-like value whose items are passed one by one to ``visit_value``."""

    @abstractmethod
    def size_hint(self) -> tuple[int, int | None]:
        """Return the lower bound and the optional upper bound of the length."""

    def __repr__(self) -> str:
        return debug_list(self)


def _as_value(value: Any) -> Any:
    return value.as_value() if isinstance(value, Valuable) else value


def visit_items(items: Iterable[Any], visitor: Visit) -> None:
    """Pass every item of ``items`` to ``visitor.visit_value`` in order."""
    for item in items:
        visitor.visit_value(_as_value(item))


@dataclass(frozen=True, repr=False)
class ListValue(Listable):
    """A listable holding the items of any iterable collection."""

    items: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def size_hint(self) -> tuple[int, int | None]:
        return (len(self.items), len(self.items))

    def visit(self, visitor: Visit) -> None:
        visit_items(self.items, visitor)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


def _is_plain_collection(value: Any) -> bool:
    return (
        isinstance(value, Sized)
        and isinstance(value, Iterable)
        and not isinstance(value, (str, bytes, bytearray, Mapping))
    )


def size_hint(value: Any) -> tuple[int, int | None]:
    """Return the length bounds of a listable or of a plain collection."""
    if isinstance(value, Listable):
        return value.size_hint()
    if _is_plain_collection(value):
        length = len(value)
        return (length, length)
    raise TypeError(f"{type(value).__name__} is not list-like")


class _CollectItems(Visit):
    def __init__(self) -> None:
        self.items: list[Any] = []

    def visit_value(self, value: Any) -> None:
        self.items.append(value)


def _debug(value: Any) -> str:
    if isinstance(value, Enumerable):
        return debug_enumerable(value)
    if isinstance(value, Listable) or (
        isinstance(value, (list, tuple)) and not hasattr(value, "_fields")
    ):
        return debug_list(value)
    return repr(value)


def debug_list(value: Any) -> str:
    """Render a listable or plain collection as ``[a, b, c]``."""
    collector = _CollectItems()
    if isinstance(value, Listable):
        value.visit(collector)
    elif _is_plain_collection(value):
        visit_items(value, collector)
    else:
        raise TypeError(f"{type(value).__name__} is not list-like")
    return "[" + ", ".join(_debug(item) for item in collector.items) + "]"