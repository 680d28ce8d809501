import json
from dataclasses import dataclass
from enum import Enum

import pytest

from clust.serialization import (
    BoolEnumCodec,
    StringEnumCodec,
    StringOrArrayCodec,
    TaggedUnionCodec,
    to_pretty_json,
)


class Letter(Enum):
    A = 1
    B = 2
    C = 3


class Flag(Enum):
    A = "yes"
    B = "no"


@dataclass
class StructA:
    tag: str
    value: int


@dataclass
class StructB:
    tag: str
    value: int


@dataclass
class StructC:
    tag: str
    value: int
    other_value: int


@dataclass
class Item:
    value: int


def _dumps(data):
    return json.dumps(data, separators=(",", ":"))


@pytest.fixture
def letter_codec():
    return StringEnumCodec({Letter.A: "a", Letter.B: "b", Letter.C: "c"}, name="Letter")


@pytest.fixture
def union_codec():
    return TaggedUnionCodec("tag", {"a": StructA, "b": StructB, "c": StructC})


@pytest.mark.parametrize(
    "member,expected",
    [(Letter.A, '"a"'), (Letter.B, '"b"'), (Letter.C, '"c"')],
)
def test_string_enum_round_trip(letter_codec, member, expected):
    serialized = _dumps(letter_codec.encode(member))
    assert serialized == expected
    assert letter_codec.decode(json.loads(serialized)) is member


def test_string_enum_rejects_unknown_string(letter_codec):
    with pytest.raises(ValueError):
        letter_codec.decode("d")


def test_string_enum_rejects_non_string(letter_codec):
    with pytest.raises(ValueError):
        letter_codec.decode(1)


def test_string_enum_rejects_unknown_member(letter_codec):
    with pytest.raises(TypeError):
        letter_codec.encode(Flag.A)


def test_string_enum_requires_unique_strings():
    with pytest.raises(ValueError):
        StringEnumCodec({Letter.A: "a", Letter.B: "a"})


def test_tagged_union_round_trip(union_codec):
    value = StructA("a", 42)
    serialized = _dumps(union_codec.encode(value))
    assert serialized == '{"tag":"a","value":42}'
    assert union_codec.decode(json.loads(serialized)) == value


def test_tagged_union_selects_variant_by_tag(union_codec):
    value = StructC("c", 1, 2)
    decoded = union_codec.decode(union_codec.encode(value))
    assert isinstance(decoded, StructC)
    assert decoded == value


def test_tagged_union_missing_tag(union_codec):
    with pytest.raises(ValueError, match="missing field `tag`"):
        union_codec.decode({"value": 42})


def test_tagged_union_unknown_tag(union_codec):
    with pytest.raises(ValueError, match="unknown tag: z"):
        union_codec.decode({"tag": "z", "value": 42})


def test_tagged_union_bad_fields(union_codec):
    with pytest.raises(ValueError):
        union_codec.decode({"tag": "a", "value": 42, "extra": 1})


def test_tagged_union_rejects_unregistered_type(union_codec):
    with pytest.raises(TypeError):
        union_codec.encode(Item(1))


@pytest.mark.parametrize("member,expected", [(Flag.A, "true"), (Flag.B, "false")])
def test_bool_enum_round_trip(member, expected):
    codec = BoolEnumCodec(Flag.A, Flag.B)
    serialized = _dumps(codec.encode(member))
    assert serialized == expected
    assert codec.decode(json.loads(serialized)) is member


def test_bool_enum_rejects_non_bool():
    codec = BoolEnumCodec(Flag.A, Flag.B)
    with pytest.raises(ValueError):
        codec.decode(1)


def test_bool_enum_rejects_unknown_value():
    codec = BoolEnumCodec(Flag.A, Flag.B)
    with pytest.raises(TypeError):
        codec.encode(Letter.A)


def test_string_or_array_single():
    codec = StringOrArrayCodec(Item)
    serialized = _dumps(codec.encode("42"))
    assert serialized == '"42"'
    assert codec.decode(json.loads(serialized)) == "42"


def test_string_or_array_array():
    codec = StringOrArrayCodec(Item)
    value = [Item(42)]
    serialized = _dumps(codec.encode(value))
    assert serialized == '[{"value":42}]'
    assert codec.decode(json.loads(serialized)) == value


def test_string_or_array_without_item_type_passes_items_through():
    codec = StringOrArrayCodec()
    data = [{"value": 1}, {"value": 2}]
    assert codec.decode(codec.encode(data)) == data


def test_string_or_array_rejects_other_data():
    codec = StringOrArrayCodec(Item)
    with pytest.raises(ValueError):
        codec.decode(42)


def test_string_or_array_rejects_other_values():
    codec = StringOrArrayCodec(Item)
    with pytest.raises(TypeError):
        codec.encode(42)


def test_to_pretty_json_dataclass():
    assert to_pretty_json(Item(42)) == '{\n  "value": 42\n}'


def test_to_pretty_json_round_trips_nested_data():
    data = {"list": [1, 2], "nested": {"flag": True}, "text": "日本"}
    rendered = to_pretty_json(data)
    assert json.loads(rendered) == data
    assert "日本" in rendered


def test_to_pretty_json_enum_value():
    assert json.loads(to_pretty_json({"flag": Flag.A})) == {"flag": "yes"}


def test_to_pretty_json_rejects_unknown_object():
    with pytest.raises(TypeError):
        to_pretty_json(object())