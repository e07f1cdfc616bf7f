"""Enum-like value inspection: definitions, variants and result values."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from inspectable.core import NamedValues, Valuable, Visit
from inspectable.fields import Fields


@dataclass(frozen=True)
class VariantDef:
    """The name and fields of one enum variant."""

    name: str
    fields: Fields

    def __post_init__(self) -> None:
        if not isinstance(self.fields, Fields):
            raise TypeError("fields must be a Fields instance")


@dataclass(frozen=True)
class Variant:
    """An enum's current variant.

    A static variant is one of the variants listed by the enum's definition;
    a dynamic one is built at run time and need not be listed there.
    """

    definition: VariantDef
    dynamic: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.definition, VariantDef):
            raise TypeError("definition must be a VariantDef instance")

    @property
    def name(self) -> str:
        """The variant's name."""
        return self.definition.name

    @property
    def fields(self) -> Fields:
        """The variant's fields."""
        return self.definition.fields

    def is_named_fields(self) -> bool:
        """Return True if the variant has named fields."""
        return self.fields.is_named()

    def is_unnamed_fields(self) -> bool:
        """Return True if the variant has positional fields or none."""
        return not self.is_named_fields()


@dataclass(frozen=True)
class EnumDef:
    """An enum's name and variants, known ahead of time or built at run time."""

    name: str
    variants: tuple[VariantDef, ...]
    dynamic: bool = False

    def __post_init__(self) -> None:
        variants = tuple(self.variants)
        for item in variants:
            if not isinstance(item, VariantDef):
                raise TypeError(f"expected VariantDef, got {type(item).__name__}")
        object.__setattr__(self, "variants", variants)

    @classmethod
    def new_static(cls, name: str, variants: Iterable[VariantDef]) -> EnumDef:
        """A definition whose variants are fixed and known ahead of time."""
        return cls(name, tuple(variants), dynamic=False)

    @classmethod
    def new_dynamic(cls, name: str, variants: Iterable[VariantDef]) -> EnumDef:
        """A definition whose variants may vary at run time."""
        return cls(name, tuple(variants), dynamic=True)

    def is_static(self) -> bool:
        """Return True if the enum is statically defined."""
        return not self.dynamic

    def is_dynamic(self) -> bool:
        """Return True if the enum is dynamically defined."""
        return self.dynamic


class Enumerable(Valuable):
    """An enum-like value: a definition, a current variant and its fields."""

    @abstractmethod
    def definition(self) -> EnumDef:
        """Return the enum's definition."""

    @abstractmethod
    def variant(self) -> Variant:
        """Return the enum's current variant."""

    def __repr__(self) -> str:
        return debug_enumerable(self)


def _as_value(value: Any) -> Any:
    return value.as_value() if isinstance(value, Valuable) else value


def _debug(value: Any) -> str:
    if isinstance(value, Enumerable):
        return debug_enumerable(value)
    return repr(value)


class _CollectFields(Visit):
    def __init__(self) -> None:
        self.named: list[tuple[str, Any]] = []
        self.unnamed: list[Any] = []

    def visit_named_fields(self, named_values: NamedValues) -> None:
        self.named.extend((field.name, value) for field, value in named_values)

    def visit_unnamed_fields(self, values: Sequence[Any]) -> None:
        self.unnamed.extend(values)

    def visit_value(self, value: Any) -> None:
        raise TypeError("an enum passed a bare value instead of its fields")


def debug_enumerable(value: Enumerable) -> str:
    """Render an enumerable as ``Enum::Variant { a: .. }`` or ``Enum::Variant(..)``."""
    variant = value.variant()
    name = f"{value.definition().name}::{variant.name}"
    collected = _CollectFields()
    value.visit(collected)
    if variant.is_named_fields():
        if not collected.named:
            return name
        inner = ", ".join(f"{key}: {_debug(item)}" for key, item in collected.named)
        return f"{name} {{ {inner} }}"
    if not collected.unnamed:
        return name
    return f"{name}({', '.join(_debug(item) for item in collected.unnamed)})"


RESULT_VARIANTS: tuple[VariantDef, ...] = (
    VariantDef("Ok", Fields.unnamed(1)),
    VariantDef("Err", Fields.unnamed(1)),
)

_RESULT_DEF = EnumDef.new_static("Result", RESULT_VARIANTS)


@dataclass(frozen=True, repr=False)
class Ok(Enumerable):
    """The success side of a result, holding one value."""

    value: Any

    def definition(self) -> EnumDef:
        return _RESULT_DEF

    def variant(self) -> Variant:
        return Variant(RESULT_VARIANTS[0])

    def visit(self, visitor: Visit) -> None:
        visitor.visit_unnamed_fields([_as_value(self.value)])


@dataclass(frozen=True, repr=False)
class Err(Enumerable):
    """The failure side of a result, holding one value."""

    value: Any

    def definition(self) -> EnumDef:
        return _RESULT_DEF

    def variant(self) -> Variant:
        return Variant(RESULT_VARIANTS[1])

    def visit(self, visitor: Visit) -> None:
        visitor.visit_unnamed_fields([_as_value(self.value)])