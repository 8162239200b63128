"""
Property tags and property lists.

A property list is a run of tagged properties ended by a property named
"None":

    name     length-prefixed string
    type     length-prefixed string
    size     int32, payload bytes not counting the per-type overhead
    index    int32
    payload  type specific

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
from typing import Optional

from .arrays import ArrayProperty
from .binary import BinaryReader, BinaryWriter
from .errors import SaveFormatError, UnsupportedPropertyTypeError
from .properties import (
    BoolProperty,
    FloatProperty,
    IntProperty,
    NameProperty,
    ObjectProperty,
    SerializedProperty,
    StrProperty,
)

log = logging.getLogger(__name__)

NONE_PROPERTY_NAME = "None"

# Property type tag -> class with a parse(reader, name, index) classmethod
PROPERTY_PARSERS = {
    cls.PROPERTY_TYPE: cls
    for cls in (BoolProperty, FloatProperty, IntProperty, NameProperty, ObjectProperty, StrProperty)
}


def read_property(reader: BinaryReader) -> Optional[SerializedProperty]:
    """Read one tagged property. Returns None at the end of a property list."""
    offset = reader.pos
    name = reader.read_length_prefixed_string()
    if name == NONE_PROPERTY_NAME:
        return None

    type_name = reader.read_length_prefixed_string()
    size = reader.read_i32()
    index = reader.read_i32()

    start = reader.pos
    if type_name == ArrayProperty.PROPERTY_TYPE:
        prop, overhead = ArrayProperty.parse(reader, name, index)
    else:
        parser = PROPERTY_PARSERS.get(type_name)
        if parser is None:
            raise UnsupportedPropertyTypeError(type_name)
        prop = parser.parse(reader, name, index)
        overhead = parser.OVERHEAD

    consumed = reader.pos - start - overhead
    if consumed != size:
        raise SaveFormatError(f"Unexpected size for {type_name} {name} at offset {offset}: "
                              f"declared {size}, read {consumed}")

    log.debug(f"Read {type_name} {name}[{index}] ({size} bytes) at offset {offset}")
    return prop


def read_properties(reader: BinaryReader) -> list[SerializedProperty]:
    """Read properties until the "None" terminator."""
    properties = []
    while True:
        prop = read_property(reader)
        if prop is None:
            return properties
        properties.append(prop)


def write_property(writer: BinaryWriter, prop: SerializedProperty):
    """Write a tagged property. Array properties raise WriteNotSupportedError."""
    payload = BinaryWriter()
    prop.serialize(payload)

    writer.write_length_prefixed_string(prop.property_name)
    writer.write_length_prefixed_string(prop.PROPERTY_TYPE)
    writer.write_i32(prop.serialized_length)
    writer.write_i32(prop.index)
    writer.write_bytes(payload.get_bytes())


def write_properties(writer: BinaryWriter, properties: list[SerializedProperty]):
    for prop in properties:
        write_property(writer, prop)
    writer.write_length_prefixed_string(NONE_PROPERTY_NAME)
