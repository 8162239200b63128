"""
Little-endian stream primitives for save file properties.

Strings are stored with an int32 length prefix that counts the trailing NUL.
A positive length means 8-bit text, a negative length means UTF-16LE code
units, and zero means the empty string with no terminator at all.

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

import struct
from dataclasses import dataclass

from .errors import SaveFormatError


def serialized_length(value: str) -> int:
    """Number of bytes write_length_prefixed_string emits for value."""
    if not value:
        return 4
    if value.isascii():
        return len(value) + 5
    return len(value.encode("utf-16-le")) + 6


@dataclass
class ObjectReference:
    """Handle to a game object, resolved elsewhere by level and path name."""
    level_name: str = ""
    path_name: str = ""

    @property
    def serialized_length(self) -> int:
        return serialized_length(self.level_name) + serialized_length(self.path_name)

    def to_dict(self) -> dict:
        return {"level_name": self.level_name, "path_name": self.path_name}

    def __str__(self) -> str:
        if not self.level_name and not self.path_name:
            return "<ObjectReference/>"
        return f"<ObjectReference: {self.level_name}:{self.path_name}>"


class BinaryReader:
    """Helper class for reading binary data in little-endian format."""

    def __init__(self, data: bytes):
        self.data = data
        self.pos = 0

    @property
    def remaining(self) -> int:
        return len(self.data) - self.pos

    def read_bytes(self, n: int) -> bytes:
        if n < 0 or self.pos + n > len(self.data):
            raise SaveFormatError(f"Not enough data at offset {self.pos}: need {n}, have {self.remaining}")
        result = self.data[self.pos:self.pos + n]
        self.pos += n
        return result

    def read_u8(self) -> int:
        return struct.unpack("<B", self.read_bytes(1))[0]

    def read_u32(self) -> int:
        return struct.unpack("<I", self.read_bytes(4))[0]

    def read_i32(self) -> int:
        return struct.unpack("<i", self.read_bytes(4))[0]

    def read_i64(self) -> int:
        return struct.unpack("<q", self.read_bytes(8))[0]

    def read_f32(self) -> float:
        return struct.unpack("<f", self.read_bytes(4))[0]

    def read_bool(self) -> bool:
        return self.read_u8() != 0

    def assert_null_byte(self):
        offset = self.pos
        value = self.read_u8()
        if value != 0:
            raise SaveFormatError(f"Expected null byte at offset {offset}, found 0x{value:02x}")

    def read_length_prefixed_string(self) -> str:
        offset = self.pos
        length = self.read_i32()
        if length == 0:
            return ""
        if length > 0:
            raw = self.read_bytes(length)
            terminator = raw[-1:]
            text = raw[:-1]
            encoding = "utf-8"
        else:
            raw = self.read_bytes(-length * 2)
            terminator = raw[-2:]
            text = raw[:-2]
            encoding = "utf-16-le"
        if any(terminator):
            raise SaveFormatError(f"String at offset {offset} is not null terminated")
        try:
            return text.decode(encoding)
        except UnicodeDecodeError as e:
            raise SaveFormatError(f"String decode failure at offset {offset}: {e}") from e

    def read_object_reference(self) -> ObjectReference:
        return ObjectReference(
            level_name=self.read_length_prefixed_string(),
            path_name=self.read_length_prefixed_string(),
        )


class BinaryWriter:
    """Helper class for writing binary data in little-endian format."""

    def __init__(self):
        self.data = bytearray()

    def write_bytes(self, data: bytes):
        self.data.extend(data)

    def write_u8(self, value: int):
        self.data.extend(struct.pack("<B", value & 0xFF))

    def write_u32(self, value: int):
        self.data.extend(struct.pack("<I", value & 0xFFFFFFFF))

    def write_i32(self, value: int):
        self.data.extend(struct.pack("<i", value))

    def write_i64(self, value: int):
        self.data.extend(struct.pack("<q", value))

    def write_f32(self, value: float):
        self.data.extend(struct.pack("<f", value))

    def write_bool(self, value: bool):
        self.write_u8(1 if value else 0)

    def write_length_prefixed_string(self, value: str):
        if not value:
            self.write_i32(0)
        elif value.isascii():
            self.write_i32(len(value) + 1)
            self.write_bytes(value.encode("ascii") + b"\x00")
        else:
            encoded = value.encode("utf-16-le")
            self.write_i32(-(len(encoded) // 2 + 1))
            self.write_bytes(encoded + b"\x00\x00")

    def write_object_reference(self, reference: ObjectReference):
        self.write_length_prefixed_string(reference.level_name)
        self.write_length_prefixed_string(reference.path_name)

    def get_bytes(self) -> bytes:
        return bytes(self.data)
