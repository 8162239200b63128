"""Tests for sfsave.properties."""

import struct

import pytest

from sfsave.binary import BinaryReader, BinaryWriter, ObjectReference
from sfsave.errors import SaveFormatError
from sfsave.properties import (
    BoolProperty,
    FloatProperty,
    IntProperty,
    NameProperty,
    ObjectProperty,
    StrProperty,
)


def serialize(prop) -> bytes:
    w = BinaryWriter()
    prop.serialize(w)
    return w.get_bytes()


# ---------------------------------------------------------------------------
# BoolProperty
# ---------------------------------------------------------------------------

class TestBoolProperty:
    @pytest.mark.parametrize("value", [True, False])
    def test_round_trip(self, value):
        data = serialize(BoolProperty("mIsActive", 0, value=value))
        reader = BinaryReader(data)
        assert BoolProperty.parse(reader, "mIsActive", 0).value is value
        assert reader.remaining == 0

    def test_encode_is_two_bytes(self):
        assert serialize(BoolProperty("a", value=True)) == b"\x01\x00"
        assert serialize(BoolProperty("a", value=False)) == b"\x00\x00"

    def test_any_nonzero_byte_is_true(self):
        assert BoolProperty.parse(BinaryReader(b"\x7f\x00"), "a", 0).value is True

    def test_missing_sentinel(self):
        with pytest.raises(SaveFormatError):
            BoolProperty.parse(BinaryReader(b"\x01\x01"), "a", 0)

    def test_name_and_index(self):
        prop = BoolProperty.parse(BinaryReader(b"\x00\x00"), "mFlags", 3)
        assert prop.property_name == "mFlags"
        assert prop.index == 3
        assert prop.serialized_length == 0

    def test_str(self):
        assert str(BoolProperty("mIsActive", value=True)) == "Bool mIsActive: True"


# ---------------------------------------------------------------------------
# other scalar kinds
# ---------------------------------------------------------------------------

def test_int_property():
    prop = IntProperty.parse(BinaryReader(b"\x00" + struct.pack("<i", -42)), "mCount", 0)
    assert prop.value == -42
    assert prop.serialized_length == 4
    assert serialize(prop) == b"\x00" + struct.pack("<i", -42)

def test_int_property_requires_null():
    with pytest.raises(SaveFormatError):
        IntProperty.parse(BinaryReader(b"\x05" + struct.pack("<i", 1)), "mCount", 0)

def test_float_property():
    prop = FloatProperty.parse(BinaryReader(b"\x00" + struct.pack("<f", 0.75)), "mHealth", 0)
    assert prop.value == 0.75
    assert serialize(prop) == b"\x00" + struct.pack("<f", 0.75)

@pytest.mark.parametrize("cls", [StrProperty, NameProperty])
def test_string_properties(cls):
    prop = cls("mName", 0, value="Power Pole")
    data = serialize(prop)
    assert len(data) == 1 + prop.serialized_length
    assert cls.parse(BinaryReader(data), "mName", 0) == prop

def test_object_property():
    prop = ObjectProperty("mOwner", 0, reference=ObjectReference("Persistent_Level", "Char_Player_C_0"))
    data = serialize(prop)
    assert len(data) == 1 + prop.serialized_length
    assert ObjectProperty.parse(BinaryReader(data), "mOwner", 0) == prop

def test_object_property_default_reference():
    assert ObjectProperty("mOwner").reference == ObjectReference()


# ---------------------------------------------------------------------------
# to_dict / equality
# ---------------------------------------------------------------------------

def test_to_dict():
    assert IntProperty("mCount", 1, value=5).to_dict() == {
        "name": "mCount", "type": "IntProperty", "index": 1, "value": 5,
    }

def test_to_dict_object_reference():
    d = ObjectProperty("mOwner", reference=ObjectReference("L", "P")).to_dict()
    assert d["value"] == {"level_name": "L", "path_name": "P"}

def test_equality_depends_on_type():
    assert StrProperty("a", value="x") != NameProperty("a", value="x")
    assert IntProperty("a", value=1) == IntProperty("a", value=1)
