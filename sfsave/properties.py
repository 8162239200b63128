"""
Serialized properties and the fixed-width scalar property kinds.

Every property is preceded by a tag (name, type, size, index) read in
records.py. The classes here decode what follows the tag. Scalar kinds put a
single null byte before their payload, except BoolProperty, which stores its
value in front of the null byte and declares a size of 0.

Copyright (C) 2026 wszqkzqk <wszqkzqk@qq.com>

This library is free software; you can redistribute it and/or
modify it under the terms of the GNU Lesser General Public
License as published by the Free Software Foundation; either
version 2.1 of the License, or (at your option) any later version.

This library is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
Lesser General Public License for more details.

You should have received a copy of the GNU Lesser General Public
License along with this library; if not, write to the Free Software
Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301  USA
"""

import logging
from typing import Any, Optional

from .binary import BinaryReader, BinaryWriter, ObjectReference, serialized_length

log = logging.getLogger(__name__)

# Property type tags as they appear in the file
ARRAY_PROPERTY = "ArrayProperty"
BOOL_PROPERTY = "BoolProperty"
BYTE_PROPERTY = "ByteProperty"
ENUM_PROPERTY = "EnumProperty"
FLOAT_PROPERTY = "FloatProperty"
INT_PROPERTY = "IntProperty"
INTERFACE_PROPERTY = "InterfaceProperty"
NAME_PROPERTY = "NameProperty"
OBJECT_PROPERTY = "ObjectProperty"
STR_PROPERTY = "StrProperty"
STRUCT_PROPERTY = "StructProperty"
TEXT_PROPERTY = "TextProperty"


def export_value(value: Any) -> Any:
    """Convert a decoded value into plain data for YAML export."""
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


class SerializedProperty:
    """Base class of every decoded property."""

    PROPERTY_TYPE = ""
    # Bytes after the tag that the declared size does not count
    OVERHEAD = 1

    def __init__(self, property_name: str, index: int = 0):
        self.property_name = property_name
        self.index = index

    @property
    def serialized_length(self) -> int:
        return 0

    @property
    def backing_value(self) -> Any:
        raise NotImplementedError

    def serialize(self, writer: BinaryWriter):
        raise NotImplementedError

    def assign_to(self, container, field):
        """Set this property's value on a scalar field of container."""
        if field.collection is not None:
            log.error(f"Attempted to assign {self.PROPERTY_TYPE} {self.property_name} "
                      f"to collection field {type(container).__name__}.{field.name}")
            container.add_unmapped_property(self)
            return
        if not isinstance(self.backing_value, field.element_type):
            log.error(f"Attempted to assign {type(self.backing_value).__name__} to "
                      f"{type(container).__name__}.{field.name} of "
                      f"{getattr(field.element_type, '__name__', field.element_type)}")
            container.add_unmapped_property(self)
            return
        setattr(container, field.name, self.backing_value)

    def to_dict(self) -> dict:
        return {
            "name": self.property_name,
            "type": self.PROPERTY_TYPE,
            "index": self.index,
            "value": export_value(self.backing_value),
        }

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.property_name!r}, index={self.index}, value={self.backing_value!r})"


class BoolProperty(SerializedProperty):
    PROPERTY_TYPE = BOOL_PROPERTY
    OVERHEAD = 2

    def __init__(self, property_name: str, index: int = 0, value: bool = False):
        super().__init__(property_name, index)
        self.value = value

    @property
    def backing_value(self) -> bool:
        return self.value

    def __str__(self) -> str:
        return f"Bool {self.property_name}: {self.value}"

    @classmethod
    def parse(cls, reader: BinaryReader, property_name: str, index: int) -> "BoolProperty":
        result = cls(property_name, index, value=reader.read_u8() != 0)
        reader.assert_null_byte()
        return result

    def serialize(self, writer: BinaryWriter):
        writer.write_bool(self.value)
        writer.write_u8(0)


class IntProperty(SerializedProperty):
    PROPERTY_TYPE = INT_PROPERTY

    def __init__(self, property_name: str, index: int = 0, value: int = 0):
        super().__init__(property_name, index)
        self.value = value

    @property
    def serialized_length(self) -> int:
        return 4

    @property
    def backing_value(self) -> int:
        return self.value

    @classmethod
    def parse(cls, reader: BinaryReader, property_name: str, index: int) -> "IntProperty":
        reader.assert_null_byte()
        return cls(property_name, index, value=reader.read_i32())

    def serialize(self, writer: BinaryWriter):
        writer.write_u8(0)
        writer.write_i32(self.value)


class FloatProperty(SerializedProperty):
    PROPERTY_TYPE = FLOAT_PROPERTY

    def __init__(self, property_name: str, index: int = 0, value: float = 0.0):
        super().__init__(property_name, index)
        self.value = value

    @property
    def serialized_length(self) -> int:
        return 4

    @property
    def backing_value(self) -> float:
        return self.value

    @classmethod
    def parse(cls, reader: BinaryReader, property_name: str, index: int) -> "FloatProperty":
        reader.assert_null_byte()
        return cls(property_name, index, value=reader.read_f32())

    def serialize(self, writer: BinaryWriter):
        writer.write_u8(0)
        writer.write_f32(self.value)


class StrProperty(SerializedProperty):
    PROPERTY_TYPE = STR_PROPERTY

    def __init__(self, property_name: str, index: int = 0, value: str = ""):
        super().__init__(property_name, index)
        self.value = value

    @property
    def serialized_length(self) -> int:
        return serialized_length(self.value)

    @property
    def backing_value(self) -> str:
        return self.value

    @classmethod
    def parse(cls, reader: BinaryReader, property_name: str, index: int):
        reader.assert_null_byte()
        return cls(property_name, index, value=reader.read_length_prefixed_string())

    def serialize(self, writer: BinaryWriter):
        writer.write_u8(0)
        writer.write_length_prefixed_string(self.value)


class NameProperty(StrProperty):
    PROPERTY_TYPE = NAME_PROPERTY


class ObjectProperty(SerializedProperty):
    PROPERTY_TYPE = OBJECT_PROPERTY

    def __init__(self, property_name: str, index: int = 0, reference: Optional[ObjectReference] = None):
        super().__init__(property_name, index)
        self.reference = reference if reference is not None else ObjectReference()

    @property
    def serialized_length(self) -> int:
        return self.reference.serialized_length

    @property
    def backing_value(self) -> ObjectReference:
        return self.reference

    @classmethod
    def parse(cls, reader: BinaryReader, property_name: str, index: int) -> "ObjectProperty":
        reader.assert_null_byte()
        return cls(property_name, index, reference=reader.read_object_reference())

    def serialize(self, writer: BinaryWriter):
        writer.write_u8(0)
        writer.write_object_reference(self.reference)
