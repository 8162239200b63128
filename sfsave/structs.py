"""
Struct-type registry and the built-in struct decoders.

Struct arrays name their element type with a string. The registry maps that
string to a class; every element gets its own fresh instance, which then
reads exactly its own bytes from the stream.

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
from dataclasses import asdict, dataclass, field
from typing import Type

from .binary import BinaryReader, BinaryWriter
from .errors import UnknownStructTypeError


class GameStruct:
    """Base class for struct values decoded from struct arrays."""

    STRUCT_TYPE = ""

    def deserialize(self, reader: BinaryReader):
        raise NotImplementedError

    def serialize(self, writer: BinaryWriter):
        raise NotImplementedError

    def to_dict(self) -> dict:
        return asdict(self)


# Struct type name -> struct class, filled at import time
STRUCT_TYPES: dict[str, Type[GameStruct]] = {}


def register_struct(type_name: str):
    """Class decorator adding a GameStruct subclass to STRUCT_TYPES."""
    def decorator(cls: Type[GameStruct]) -> Type[GameStruct]:
        cls.STRUCT_TYPE = type_name
        STRUCT_TYPES[type_name] = cls
        return cls
    return decorator


def create_struct(type_name: str) -> GameStruct:
    try:
        cls = STRUCT_TYPES[type_name]
    except KeyError:
        raise UnknownStructTypeError(type_name) from None
    return cls()


# ============================================================================
# Built-in Structs
# ============================================================================

@register_struct("Vector")
@dataclass
class Vector(GameStruct):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def deserialize(self, reader: BinaryReader):
        self.x = reader.read_f32()
        self.y = reader.read_f32()
        self.z = reader.read_f32()

    def serialize(self, writer: BinaryWriter):
        writer.write_f32(self.x)
        writer.write_f32(self.y)
        writer.write_f32(self.z)


@register_struct("Rotator")
@dataclass
class Rotator(GameStruct):
    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0

    def deserialize(self, reader: BinaryReader):
        self.pitch = reader.read_f32()
        self.yaw = reader.read_f32()
        self.roll = reader.read_f32()

    def serialize(self, writer: BinaryWriter):
        writer.write_f32(self.pitch)
        writer.write_f32(self.yaw)
        writer.write_f32(self.roll)


@register_struct("Quat")
@dataclass
class Quat(GameStruct):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def deserialize(self, reader: BinaryReader):
        self.x = reader.read_f32()
        self.y = reader.read_f32()
        self.z = reader.read_f32()
        self.w = reader.read_f32()

    def serialize(self, writer: BinaryWriter):
        writer.write_f32(self.x)
        writer.write_f32(self.y)
        writer.write_f32(self.z)
        writer.write_f32(self.w)


@register_struct("LinearColor")
@dataclass
class LinearColor(GameStruct):
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    def deserialize(self, reader: BinaryReader):
        self.r = reader.read_f32()
        self.g = reader.read_f32()
        self.b = reader.read_f32()
        self.a = reader.read_f32()

    def serialize(self, writer: BinaryWriter):
        writer.write_f32(self.r)
        writer.write_f32(self.g)
        writer.write_f32(self.b)
        writer.write_f32(self.a)


@register_struct("Color")
@dataclass
class Color(GameStruct):
    # Stored BGRA
    b: int = 0
    g: int = 0
    r: int = 0
    a: int = 0

    def deserialize(self, reader: BinaryReader):
        self.b = reader.read_u8()
        self.g = reader.read_u8()
        self.r = reader.read_u8()
        self.a = reader.read_u8()

    def serialize(self, writer: BinaryWriter):
        writer.write_u8(self.b)
        writer.write_u8(self.g)
        writer.write_u8(self.r)
        writer.write_u8(self.a)


@register_struct("Box")
@dataclass
class Box(GameStruct):
    min: Vector = field(default_factory=Vector)
    max: Vector = field(default_factory=Vector)
    is_valid: bool = False

    def deserialize(self, reader: BinaryReader):
        self.min = Vector()
        self.min.deserialize(reader)
        self.max = Vector()
        self.max.deserialize(reader)
        self.is_valid = reader.read_bool()

    def serialize(self, writer: BinaryWriter):
        self.min.serialize(writer)
        self.max.serialize(writer)
        writer.write_bool(self.is_valid)


@register_struct("Guid")
@dataclass
class Guid(GameStruct):
    data: bytes = bytes(16)

    def deserialize(self, reader: BinaryReader):
        self.data = reader.read_bytes(16)

    def serialize(self, writer: BinaryWriter):
        writer.write_bytes(self.data)

    def to_dict(self) -> dict:
        return {"data": base64.b64encode(self.data).decode("ascii")}


@register_struct("IntPoint")
@dataclass
class IntPoint(GameStruct):
    x: int = 0
    y: int = 0

    def deserialize(self, reader: BinaryReader):
        self.x = reader.read_i32()
        self.y = reader.read_i32()

    def serialize(self, writer: BinaryWriter):
        writer.write_i32(self.x)
        writer.write_i32(self.y)
