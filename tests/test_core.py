import pytest

from inspectable.core import (
    NamedValues,
    StructDef,
    Structable,
    Valuable,
    Visit,
    visit,
)
from inspectable.fields import Fields, NamedField

HELLO_WORLD_FIELDS = (NamedField("hello"), NamedField("world"))
WORLD_FIELDS = (NamedField("answer"),)


class World(Structable):
    def __init__(self, answer):
        self.answer = answer

    def definition(self):
        return StructDef.new_static("World", Fields.named(WORLD_FIELDS))

    def visit(self, visitor):
        visitor.visit_named_fields(NamedValues(WORLD_FIELDS, [self.answer]))


class HelloWorld(Structable):
    def __init__(self, hello, world):
        self.hello = hello
        self.world = world

    def definition(self):
        return StructDef.new_static("HelloWorld", Fields.named(HELLO_WORLD_FIELDS))

    def visit(self, visitor):
        visitor.visit_named_fields(
            NamedValues(HELLO_WORLD_FIELDS, [self.hello, self.world])
        )


class ToDict(Visit):
    def __init__(self):
        self.result = None

    def visit_value(self, value):
        if isinstance(value, Structable):
            inner = ToDict()
            value.visit(inner)
            self.result = {value.definition().name: inner.result}
        else:
            self.result = value

    def visit_named_fields(self, named_values):
        out = {}
        for field, value in named_values:
            child = ToDict()
            child.visit_value(value)
            out[field.name] = child.result
        self.result = out


class Recorder(Visit):
    def __init__(self):
        self.values = []

    def visit_value(self, value):
        self.values.append(value)


BENCH_FIELDS = tuple(
    NamedField(n) for n in ("one", "two", "three", "four", "five", "six")
)


class BenchHelloWorld(Structable):
    def __init__(self, one=0, two=0, three=0, four=0, five=0, six=0):
        self.values = [one, two, three, four, five, six]

    def definition(self):
        return StructDef.new_static("HelloWorld", Fields.named(BENCH_FIELDS))

    def visit(self, visitor):
        visitor.visit_named_fields(NamedValues(BENCH_FIELDS, self.values))


class Sum(Visit):
    def __init__(self, field):
        self.total = 0
        self.field = field

    def visit_named_fields(self, record):
        value = record.get(self.field)
        if isinstance(value, int):
            self.total += value

    def visit_value(self, value):
        raise NotImplementedError


def test_hello_world_example():
    hello_world = HelloWorld("wut", World(42))
    collector = ToDict()
    visit(hello_world, collector)
    assert collector.result == {
        "HelloWorld": {"hello": "wut", "world": {"World": {"answer": 42}}}
    }


def test_definition_name_and_fields():
    definition = StructDef.new_static("HelloWorld", Fields.named(HELLO_WORLD_FIELDS))
    assert definition.name == "HelloWorld"
    assert [f.name for f in definition.fields.names] == ["hello", "world"]
    assert definition.is_static()
    assert not definition.is_dynamic()
    assert HelloWorld("wut", World(42)).definition().name == definition.name


def test_bench_sum_of_zeros():
    structable = BenchHelloWorld()
    field = structable.definition().fields.names[5]
    summer = Sum(field)
    for _ in range(50):
        summer.visit_named_fields(NamedValues(BENCH_FIELDS, [0, 0, 0, 0, 0, 0]))
    assert summer.total == 0


def test_bench_sum_picks_sixth_field():
    structable = BenchHelloWorld(six=6)
    field = BENCH_FIELDS[5]
    summer = Sum(field)
    structable.visit(summer)
    assert summer.total == 6
    assert NamedValues(BENCH_FIELDS, structable.values).get(field) == 6


def test_get_uses_field_identity():
    values = NamedValues(BENCH_FIELDS, [1, 2, 3, 4, 5, 6])
    assert values.get(BENCH_FIELDS[2]) == 3
    assert values.get(NamedField("three")) is None


def test_get_by_name():
    values = NamedValues(HELLO_WORLD_FIELDS, ["wut", 42])
    assert values.get_by_name("world") == 42
    assert values.get_by_name("missing") is None


def test_named_values_iter_and_len():
    values = NamedValues(HELLO_WORLD_FIELDS, ["wut", 42])
    assert len(values) == 2
    assert [(f.name, v) for f, v in values] == [("hello", "wut"), ("world", 42)]


def test_named_values_length_mismatch():
    with pytest.raises(ValueError):
        NamedValues(HELLO_WORLD_FIELDS, ["wut"])


def test_dynamic_struct_def():
    definition = StructDef.new_dynamic("Dyn", Fields.unnamed(2))
    assert definition.is_dynamic()
    assert not definition.is_static()
    assert definition.name == "Dyn"


def test_struct_def_requires_fields():
    with pytest.raises(TypeError):
        StructDef.new_static("Bad", 3)


def test_visit_primitive():
    recorder = Recorder()
    visit(5, recorder)
    assert recorder.values == [5]


def test_visit_passes_structable_itself():
    recorder = Recorder()
    world = World(42)
    visit(world, recorder)
    assert recorder.values == [world]


def test_default_named_fields_forward_values():
    recorder = Recorder()
    Visit.visit_named_fields(recorder, NamedValues(WORLD_FIELDS, [42]))
    assert recorder.values == [42]


def test_default_unnamed_fields_forward_values():
    recorder = Recorder()
    Visit.visit_unnamed_fields(recorder, [1, "a", None])
    assert recorder.values == [1, "a", None]


def test_default_visit_entry_ignored():
    recorder = Recorder()
    Visit.visit_entry(recorder, "key", "value")
    assert recorder.values == []


def test_visit_requires_visit_value():
    class Incomplete(Visit):
        pass

    with pytest.raises(TypeError):
        Visit()
    with pytest.raises(TypeError):
        Incomplete()


def test_structable_requires_definition():
    class NoDefinition(Structable):
        def visit(self, visitor):
            pass

    with pytest.raises(TypeError):
        Structable()
    with pytest.raises(TypeError):
        NoDefinition()


def test_as_value_returns_self():
    world = World(1)
    assert isinstance(world, Valuable)
    assert Structable.as_value(world) is world