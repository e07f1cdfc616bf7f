"""Checking and collecting the options given to the derive decorator."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from inspectable.fields import Fields

ATTR_NAME = "valuable"


class DeriveError(Exception):
    """One or more problems found in derive options."""

    def __init__(self, messages: Iterable[str]) -> None:
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))


class Position(enum.Enum):
    """Where an option is placed."""

    STRUCT = "struct"
    ENUM = "enum"
    VARIANT = "variant"
    NAMED_FIELD = "named field"
    UNNAMED_FIELD = "unnamed field"

    def as_str(self) -> str:
        return self.value

    def is_field(self) -> bool:
        return self in (Position.NAMED_FIELD, Position.UNNAMED_FIELD)

    @classmethod
    def from_fields(cls, fields: Fields) -> Position:
        """The position of a field inside a shape with these fields."""
        return cls.NAMED_FIELD if fields.is_named() else cls.UNNAMED_FIELD


class MetaStyle(enum.Enum):
    """How an option is written."""

    IDENT = "ident"
    NAME_VALUE = "name_value"
    LIST = "list"

    def format(self, name: str) -> str:
        if self is MetaStyle.IDENT:
            return name
        if self is MetaStyle.LIST:
            return f"{name}(...)"
        return f"{name} = ..."


@dataclass(frozen=True)
class Meta:
    """A single option: its name, how it is written and its value if any."""

    name: str
    style: MetaStyle = MetaStyle.IDENT
    value: Any = None


@dataclass(frozen=True)
class AttrDef:
    """An option that is understood, where it may appear and how it is written."""

    name: str
    conflicts_with: tuple[str, ...]
    positions: tuple[Position, ...]
    styles: tuple[MetaStyle, ...]

    def early_check(self, cx: Context, position: Position, meta: Meta) -> bool:
        """Report position and style errors; return True if any occurred."""
        has_error = False
        message = self.check_position(position)
        if message is not None:
            cx.error(message)
            has_error = True
        message = self.check_style(meta)
        if message is not None:
            cx.error(message)
            has_error = True
        return has_error

    def check_position(self, position: Position) -> str | None:
        if position in self.positions:
            return None
        if (
            Position.NAMED_FIELD in self.positions
            and Position.UNNAMED_FIELD in self.positions
        ):
            names = [p.as_str() for p in self.positions if not p.is_field()]
            names.append("field")
        else:
            names = [p.as_str() for p in self.positions]
        plural = [f"{n}s" for n in names]
        if len(plural) <= 1:
            joined = "".join(plural)
        elif len(plural) == 2:
            joined = " and ".join(plural)
        else:
            joined = ", ".join(plural[:-1]) + ", and " + plural[-1]
        return f"#[{ATTR_NAME}({self.name})] may only be used on {joined}"

    def check_style(self, meta: Meta) -> str | None:
        if meta.style in self.styles:
            return None
        expected = " or ".join(
            f"`#[{ATTR_NAME}({style.format(self.name)})]`" for style in self.styles
        )
        found = f"`#[{ATTR_NAME}({meta.style.format(self.name)})]`"
        return f"expected {expected}, found {found}"

    def late_check(self, cx: Context, attrs: list[tuple[AttrDef, Meta]]) -> bool:
        """Report conflicts with other options; return True if any occurred."""
        has_error = False
        for other, _ in attrs:
            if other.name != self.name and other.name in self.conflicts_with:
                cx.error(
                    f"#[{ATTR_NAME}({self.name})] may not be used together with "
                    f"#[{ATTR_NAME}({other.name})]"
                )
                has_error = True
        return has_error


ATTRS: tuple[AttrDef, ...] = (
    AttrDef(
        "rename",
        (),
        (Position.STRUCT, Position.ENUM, Position.VARIANT, Position.NAMED_FIELD),
        (MetaStyle.NAME_VALUE,),
    ),
    AttrDef("transparent", ("rename",), (Position.STRUCT,), (MetaStyle.IDENT,)),
    AttrDef(
        "skip",
        ("rename",),
        (Position.NAMED_FIELD, Position.UNNAMED_FIELD),
        (MetaStyle.IDENT,),
    ),
)


@dataclass(frozen=True)
class Attrs:
    """The options collected for one struct, enum, variant or field."""

    renamed_to: str | None = None
    is_transparent: bool = False
    is_skipped: bool = False

    def rename(self, original: str) -> str:
        """The name to report: the renamed one if given, else ``original``."""
        return original if self.renamed_to is None else self.renamed_to

    def transparent(self) -> bool:
        return self.is_transparent

    def skip(self) -> bool:
        return self.is_skipped


@dataclass
class Context:
    """Collects errors; must be checked exactly once.

    Used as a context manager, leaving the block without calling
    :meth:`check` raises ``RuntimeError``.
    """

    _errors: list[str] = field(default_factory=list)
    _checked: bool = False

    def error(self, message: str) -> None:
        if self._checked:
            raise RuntimeError("context has already been checked")
        self._errors.append(str(message))

    def check(self) -> None:
        """Raise :class:`DeriveError` holding every reported error, if any."""
        if self._checked:
            raise RuntimeError("context has already been checked")
        self._checked = True
        if self._errors:
            raise DeriveError(self._errors)

    def __enter__(self) -> Context:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None and not self._checked:
            raise RuntimeError("context need to be checked")


def _filter_attrs(
    cx: Context, attrs: Iterable[Meta], position: Position
) -> list[tuple[AttrDef, Meta]]:
    by_name = {d.name: d for d in ATTRS}
    seen: set[str] = set()
    accepted: list[tuple[AttrDef, Meta]] = []
    for meta in attrs:
        if not meta.name.isidentifier():
            cx.error("expected identifier, found path")
            continue
        definition = by_name.get(meta.name)
        if definition is None:
            cx.error(f"unknown {ATTR_NAME} attribute `{meta.name}`")
            continue
        if meta.name in seen:
            cx.error(f"duplicate #[{ATTR_NAME}({meta.name})] attribute")
            continue
        seen.add(meta.name)
        if not definition.early_check(cx, position, meta):
            accepted.append((definition, meta))
    return accepted


def parse_attrs(cx: Context, attrs: Iterable[Meta], position: Position) -> Attrs:
    """Check the options at ``position``, reporting problems to ``cx``."""
    renamed_to: str | None = None
    transparent = False
    skip = False
    accepted = _filter_attrs(cx, attrs, position)
    for definition, meta in accepted:
        if definition.late_check(cx, accepted):
            continue
        if definition.name == "rename":
            if not isinstance(meta.value, str):
                cx.error("expected string literal")
                continue
            renamed_to = meta.value
        elif definition.name == "transparent":
            transparent = True
        elif definition.name == "skip":
            skip = True
    return Attrs(renamed_to, transparent, skip)