# inspectable

Describe the shape of your data once, then inspect it with visitors.

`inspectable` gives values a uniform, walkable description. A value can be
a struct with named or unnamed fields, an enum with a current variant, a
list, or a plain Python object. A visitor receives the parts of a value one
call at a time. This lets one collector or formatter work with any type that
takes part.

## Install

```
pip install inspectable
```

It has no runtime dependencies and needs Python 3.10 or later.

## Modules

| Module | Contents |
| --- | --- |
| `inspectable.fields` | `NamedField`, `Fields` |
| `inspectable.core` | `Visit`, `Valuable`, `Structable`, `StructDef`, `NamedValues`, `visit` |
| `inspectable.enumerable` | `Enumerable`, `EnumDef`, `VariantDef`, `Variant`, `Ok`, `Err`, `debug_enumerable` |
| `inspectable.listable` | `Listable`, `ListValue`, `size_hint`, `visit_items`, `debug_list` |
| `inspectable.attrs` | checks the `rename`, `transparent` and `skip` options |

## Fields

`Fields.named(["a", "b"])` describes named fields. Plain strings are turned
into `NamedField` objects. `Fields.unnamed(n)` describes `n` positional
fields, and `Fields.unnamed(0)` describes a unit shape.

Each `Fields` object has these members:

- `len()` gives the number of fields.
- `is_named()`, `is_unnamed()` and `is_empty()` describe the shape.

A negative count raises `ValueError`.

## Structs

```python
from inspectable.core import NamedValues, StructDef, Structable, Visit, visit
from inspectable.fields import Fields, NamedField

WORLD_FIELDS = (NamedField("answer"),)


class World(Structable):
    def __init__(self, answer):
        self.answer = answer

    def definition(self):
        return StructDef.new_static("World", Fields.named(WORLD_FIELDS))

    def visit(self, visitor):
        visitor.visit_named_fields(NamedValues(WORLD_FIELDS, [self.answer]))


class Collect(Visit):
    def __init__(self):
        self.seen = []

    def visit_value(self, value):
        if isinstance(value, Structable):
            value.visit(self)
        else:
            self.seen.append(value)


collector = Collect()
visit(World(42), collector)
collector.seen  # [42]
```

`StructDef.new_static` and `StructDef.new_dynamic` build definitions. The
difference is reported by `is_static()` and `is_dynamic()`.

`NamedValues` pairs fields with values, and the two must have the same
length. It offers the following:

- Iterating it yields `(field, value)` pairs.
- `get(field)` looks a value up by the identical field object.
- `get_by_name(name)` looks a value up by name.

Both lookups return `None` when nothing matches.

### Visiting

A `Visit` subclass must implement `visit_value`. The other callbacks have
these defaults:

- `visit_named_fields` forwards each value to `visit_value`.
- `visit_unnamed_fields` forwards each value to `visit_value`.
- `visit_entry` does nothing.

`visit(value, visitor)` hands a value to `visitor.visit_value`, and uses
`as_value()` for `Valuable` objects.

## Enums and results

`Enumerable` values provide a `definition()` (an `EnumDef` of `VariantDef`s)
and a current `variant()`.

`Ok` and `Err` are a ready-made result type with one positional field each.
Enumerables format through `debug_enumerable`:

```python
from inspectable.enumerable import Err, Ok

repr(Ok(5))        # 'Result::Ok(5)'
repr(Err("boom"))  # "Result::Err('boom')"
```

`debug_enumerable` formats a variant in one of three ways:

- `Name::Variant { a: 1 }` when it has named fields.
- `Name::Variant(1, 2)` when it has positional fields.
- `Name::Variant` when it has no fields.

## Lists

`ListValue` wraps the items of any iterable. The module also has these
functions:

- `size_hint` returns `(lower, upper)` bounds for a listable or for a plain
  sized collection.
- `visit_items` passes items one by one to `visit_value`.
- `debug_list` renders `[a, b, c]`, nesting lists and enums.

```python
from inspectable.listable import ListValue, debug_list, size_hint

size_hint(ListValue([1, 2, 3]))      # (3, 3)
debug_list([1, ListValue((2, 3))])   # '[1, [2, 3]]'
```

Strings, bytes and mappings are not treated as lists, and passing them
raises `TypeError`.

## Option checking

`inspectable.attrs` validates three options:

- `rename = "..."` is allowed on structs, enums, variants and named fields.
- `transparent` is allowed on structs.
- `skip` is allowed on fields.

```python
from inspectable.attrs import Context, Meta, MetaStyle, Position, parse_attrs

with Context() as cx:
    attrs = parse_attrs(cx, [Meta("rename", MetaStyle.NAME_VALUE, "Human")], Position.STRUCT)
    cx.check()

attrs.rename("Person")  # 'Human'
```

Problems are collected on the `Context`. Then `check()` raises `DeriveError`,
whose `messages` lists every problem found. These include:

- unknown or duplicate options
- an option in the wrong position or written in the wrong style
- `transparent` or `skip` together with `rename`
- a `rename` value that is not a string

Leaving a `with Context()` block without calling `check()` raises
`RuntimeError`.

## What is not included

This package only describes and walks values. It does not include any of
the following:

- a decorator that adds these descriptions to classes automatically
- a map-like value type
- serialization to JSON or other formats
- a ready-made printer

These are written by hand on top of `Visit`, `Structable`, `Enumerable` and
`Listable`.

## Tests

```
pip install -e ".[test]"
pytest
```