"""Tests for sfsave.records."""

import struct

import pytest

from sfsave.arrays import ArrayProperty, IntArrayValue
from sfsave.binary import BinaryReader, BinaryWriter, ObjectReference
from sfsave.errors import SaveFormatError, UnsupportedPropertyTypeError, WriteNotSupportedError
from sfsave.properties import (
    BoolProperty,
    FloatProperty,
    IntProperty,
    NameProperty,
    ObjectProperty,
    StrProperty,
)
from sfsave.records import read_properties, read_property, write_properties, write_property


def tag(w: BinaryWriter, name: str, type_name: str, size: int, index: int = 0):
    w.write_length_prefixed_string(name)
    w.write_length_prefixed_string(type_name)
    w.write_i32(size)
    w.write_i32(index)


def int_array_record(name: str, values) -> bytes:
    w = BinaryWriter()
    tag(w, name, "ArrayProperty", 4 + 4 * len(values))
    w.write_length_prefixed_string("IntProperty")
    w.write_u8(0)
    w.write_i32(len(values))
    for value in values:
        w.write_i32(value)
    return w.get_bytes()


# ---------------------------------------------------------------------------
# read_property
# ---------------------------------------------------------------------------

def test_none_ends_list():
    w = BinaryWriter()
    w.write_length_prefixed_string("None")
    assert read_property(BinaryReader(w.get_bytes())) is None

def test_bool_record():
    w = BinaryWriter()
    tag(w, "mIsActive", "BoolProperty", 0, index=2)
    w.write_bytes(b"\x01\x00")
    prop = read_property(BinaryReader(w.get_bytes()))
    assert prop == BoolProperty("mIsActive", 2, value=True)

def test_array_record():
    reader = BinaryReader(int_array_record("mInts", [1, 2, 3]))
    prop = read_property(reader)
    assert isinstance(prop, ArrayProperty)
    assert prop.elements == [IntArrayValue(1), IntArrayValue(2), IntArrayValue(3)]
    assert reader.remaining == 0

def test_size_mismatch():
    w = BinaryWriter()
    tag(w, "mCount", "IntProperty", 8)
    w.write_u8(0)
    w.write_i32(1)
    with pytest.raises(SaveFormatError, match="declared 8, read 4"):
        read_property(BinaryReader(w.get_bytes()))

def test_unsupported_property_type():
    w = BinaryWriter()
    tag(w, "mMap", "MapProperty", 0)
    with pytest.raises(UnsupportedPropertyTypeError) as excinfo:
        read_property(BinaryReader(w.get_bytes()))
    assert excinfo.value.type_name == "MapProperty"


# ---------------------------------------------------------------------------
# property lists
# ---------------------------------------------------------------------------

SCALARS = [
    BoolProperty("mIsActive", value=True),
    IntProperty("mCount", value=-3),
    FloatProperty("mHealth", value=0.5),
    StrProperty("mLabel", value="Hub Terminal"),
    NameProperty("mRecipe", value="Recipe_IronPlate_C"),
    ObjectProperty("mOwner", reference=ObjectReference("Persistent_Level", "Char_Player_C_0")),
    IntProperty("mSlots", 1, value=9),
]

def test_scalar_list_round_trip():
    w = BinaryWriter()
    write_properties(w, SCALARS)
    reader = BinaryReader(w.get_bytes())
    assert read_properties(reader) == SCALARS
    assert reader.remaining == 0

def test_mixed_list():
    w = BinaryWriter()
    write_property(w, IntProperty("mCount", value=1))
    w.write_bytes(int_array_record("mInts", [4, 5]))
    write_property(w, BoolProperty("mDone", value=False))
    w.write_length_prefixed_string("None")

    properties = read_properties(BinaryReader(w.get_bytes()))
    assert [p.property_name for p in properties] == ["mCount", "mInts", "mDone"]
    assert [e.value for e in properties[1].elements] == [4, 5]

def test_write_tag_layout():
    w = BinaryWriter()
    write_property(w, IntProperty("a", 0, value=1))
    expected = (struct.pack("<i", 2) + b"a\x00" + struct.pack("<i", 12) + b"IntProperty\x00"
                + struct.pack("<ii", 4, 0) + b"\x00" + struct.pack("<i", 1))
    assert w.get_bytes() == expected

def test_write_array_not_supported():
    prop = ArrayProperty("mInts", type="IntProperty")
    w = BinaryWriter()
    with pytest.raises(WriteNotSupportedError):
        write_property(w, prop)
    assert w.get_bytes() == b""

def test_missing_terminator():
    w = BinaryWriter()
    write_property(w, IntProperty("mCount", value=1))
    with pytest.raises(SaveFormatError):
        read_properties(BinaryReader(w.get_bytes()))
