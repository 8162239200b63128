"""
ArrayProperty and its element kinds.

An array property names its element type with a property type tag and then
stores `count` elements of that kind back to back. Struct arrays add a
second header between the count and the elements:

    name             length-prefixed string (descriptive only)
    property type    length-prefixed string, always "StructProperty"
    size             int32, byte size of all elements
    index            int32
    struct type      length-prefixed string, selects the struct decoder
    reserved         4 x int32 + 1 byte, kept verbatim

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

import base64
import logging
from dataclasses import dataclass, field
from typing import Optional

from .binary import BinaryReader, BinaryWriter, ObjectReference, serialized_length
from .binding import project_array
from .errors import SaveFormatError, UnsupportedArrayTypeError, WriteNotSupportedError
from .properties import (
    ARRAY_PROPERTY,
    BYTE_PROPERTY,
    ENUM_PROPERTY,
    FLOAT_PROPERTY,
    INT_PROPERTY,
    INTERFACE_PROPERTY,
    OBJECT_PROPERTY,
    STR_PROPERTY,
    STRUCT_PROPERTY,
    TEXT_PROPERTY,
    SerializedProperty,
    export_value,
)
from .structs import GameStruct, create_struct
from .text import TextEntry, parse_text_entry

log = logging.getLogger(__name__)

STRUCT_ARRAY_PROPERTY_TYPE = STRUCT_PROPERTY
STRUCT_ARRAY_RESERVED_SIZE = 17  # 4 x int32 + 1 byte


# ============================================================================
# Array Elements
# ============================================================================

class ArrayElement:
    """One decoded array element. Subclasses hold the payload of one tag."""

    ELEMENT_TYPE = ""

    @property
    def backing_value(self):
        raise NotImplementedError


@dataclass
class ByteArrayValue(ArrayElement):
    ELEMENT_TYPE = BYTE_PROPERTY
    byte_value: int = 0

    @property
    def backing_value(self) -> int:
        return self.byte_value


@dataclass
class EnumArrayValue(ArrayElement):
    ELEMENT_TYPE = ENUM_PROPERTY
    # "<enumType>:<value>"
    value: str = ""
    enum_type: str = ""

    @property
    def backing_value(self) -> str:
        return self.value


@dataclass
class FloatArrayValue(ArrayElement):
    ELEMENT_TYPE = FLOAT_PROPERTY
    value: float = 0.0

    @property
    def backing_value(self) -> float:
        return self.value


@dataclass
class IntArrayValue(ArrayElement):
    ELEMENT_TYPE = INT_PROPERTY
    value: int = 0

    @property
    def backing_value(self) -> int:
        return self.value


@dataclass
class InterfaceArrayValue(ArrayElement):
    ELEMENT_TYPE = INTERFACE_PROPERTY
    reference: ObjectReference = field(default_factory=ObjectReference)

    @property
    def backing_value(self) -> ObjectReference:
        return self.reference


@dataclass
class ObjectArrayValue(ArrayElement):
    ELEMENT_TYPE = OBJECT_PROPERTY
    reference: ObjectReference = field(default_factory=ObjectReference)

    @property
    def backing_value(self) -> ObjectReference:
        return self.reference


@dataclass
class StrArrayValue(ArrayElement):
    ELEMENT_TYPE = STR_PROPERTY
    value: str = ""

    @property
    def backing_value(self) -> str:
        return self.value


@dataclass
class StructArrayValue(ArrayElement):
    ELEMENT_TYPE = STRUCT_PROPERTY
    data: Optional[GameStruct] = None

    @property
    def backing_value(self) -> GameStruct:
        return self.data


@dataclass
class TextArrayValue(ArrayElement):
    ELEMENT_TYPE = TEXT_PROPERTY
    text: TextEntry = field(default_factory=TextEntry)

    @property
    def backing_value(self) -> TextEntry:
        return self.text


def read_enum_element(reader: BinaryReader) -> EnumArrayValue:
    value = reader.read_length_prefixed_string()
    return EnumArrayValue(value=value, enum_type=value.split(":", 1)[0])


# Element tag -> reader for one element. Struct arrays are handled separately.
ELEMENT_READERS = {
    BYTE_PROPERTY: lambda reader: ByteArrayValue(byte_value=reader.read_u8()),
    ENUM_PROPERTY: read_enum_element,
    FLOAT_PROPERTY: lambda reader: FloatArrayValue(value=reader.read_f32()),
    INT_PROPERTY: lambda reader: IntArrayValue(value=reader.read_i32()),
    INTERFACE_PROPERTY: lambda reader: InterfaceArrayValue(reference=reader.read_object_reference()),
    OBJECT_PROPERTY: lambda reader: ObjectArrayValue(reference=reader.read_object_reference()),
    STR_PROPERTY: lambda reader: StrArrayValue(value=reader.read_length_prefixed_string()),
    TEXT_PROPERTY: lambda reader: TextArrayValue(text=parse_text_entry(reader)),
}


# ============================================================================
# Struct Arrays
# ============================================================================

@dataclass
class StructArrayHeader:
    name: str = ""
    property_type: str = STRUCT_ARRAY_PROPERTY_TYPE
    size: int = 0
    index: int = 0
    struct_type: str = ""
    reserved: bytes = bytes(STRUCT_ARRAY_RESERVED_SIZE)

    @classmethod
    def parse(cls, reader: BinaryReader) -> "StructArrayHeader":
        header = cls(name=reader.read_length_prefixed_string())

        offset = reader.pos
        header.property_type = reader.read_length_prefixed_string()
        if header.property_type != STRUCT_ARRAY_PROPERTY_TYPE:
            raise SaveFormatError(f"Struct array {header.name!r} at offset {offset} declares property type "
                                  f"{header.property_type!r}, expected {STRUCT_ARRAY_PROPERTY_TYPE!r}")

        header.size = reader.read_i32()
        header.index = reader.read_i32()
        header.struct_type = reader.read_length_prefixed_string()
        header.reserved = reader.read_bytes(STRUCT_ARRAY_RESERVED_SIZE)
        return header

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "property_type": self.property_type,
            "size": self.size,
            "index": self.index,
            "struct_type": self.struct_type,
            "reserved": base64.b64encode(self.reserved).decode("ascii"),
        }


def read_struct_elements(reader: BinaryReader, header: StructArrayHeader, count: int) -> list[StructArrayValue]:
    """Decode count structs of header.struct_type, one fresh instance each."""
    elements = []
    for _ in range(count):
        data = create_struct(header.struct_type)
        data.deserialize(reader)
        elements.append(StructArrayValue(data=data))
    return elements


# ============================================================================
# ArrayProperty
# ============================================================================

class ArrayProperty(SerializedProperty):
    PROPERTY_TYPE = ARRAY_PROPERTY

    def __init__(self, property_name: str, index: int = 0, type: str = ""):
        super().__init__(property_name, index)
        self.type = type
        self.elements: list[ArrayElement] = []
        self.struct_header: Optional[StructArrayHeader] = None

    @property
    def backing_value(self) -> list[ArrayElement]:
        return self.elements

    def __str__(self) -> str:
        return f"Array {self.property_name}: {len(self.elements)} x {self.type}"

    @classmethod
    def parse(cls, reader: BinaryReader, property_name: str, index: int) -> tuple["ArrayProperty", int]:
        """Decode an array property payload.

        Returns the property and the number of bytes used by the element
        type tag, which the declared property size does not count.
        """
        result = cls(property_name, index, type=reader.read_length_prefixed_string())
        reader.assert_null_byte()
        overhead = serialized_length(result.type) + 1

        count = reader.read_i32()
        if count < 0:
            raise SaveFormatError(f"Array {property_name} has negative element count {count}")

        if result.type == STRUCT_PROPERTY:
            result.struct_header = StructArrayHeader.parse(reader)
            result.elements.extend(read_struct_elements(reader, result.struct_header, count))
        else:
            read_element = ELEMENT_READERS.get(result.type)
            if read_element is None:
                raise UnsupportedArrayTypeError(result.type)
            for _ in range(count):
                result.elements.append(read_element(reader))

        log.debug(f"Parsed array {property_name}[{index}]: {count} x {result.type}")
        return result, overhead

    def serialize(self, writer: BinaryWriter):
        raise WriteNotSupportedError(f"Writing {self.type} arrays is not supported ({self.property_name})")

    def assign_to(self, container, field) -> bool:
        return project_array(self, container, field)

    def to_dict(self) -> dict:
        result = {
            "name": self.property_name,
            "type": self.PROPERTY_TYPE,
            "index": self.index,
            "element_type": self.type,
        }
        if self.struct_header is not None:
            result["struct_header"] = self.struct_header.to_dict()
        result["elements"] = [export_value(e.backing_value) for e in self.elements]
        return result
