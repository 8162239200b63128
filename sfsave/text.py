"""
Rich-text entries (FText) as stored by TextProperty and TextProperty arrays.

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

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from .binary import BinaryReader, BinaryWriter
from .errors import SaveFormatError


class HistoryType(IntEnum):
    BASE = 0
    STRING_TABLE_ENTRY = 11
    NONE = 255


@dataclass
class TextEntry:
    flags: int = 0
    history_type: int = HistoryType.NONE
    # NONE
    culture_invariant: Optional[str] = None
    # BASE
    namespace: str = ""
    key: str = ""
    value: str = ""
    # STRING_TABLE_ENTRY
    table_id: str = ""

    def serialize(self, writer: BinaryWriter):
        writer.write_i32(self.flags)
        writer.write_u8(self.history_type)
        if self.history_type == HistoryType.NONE:
            writer.write_i32(0 if self.culture_invariant is None else 1)
            if self.culture_invariant is not None:
                writer.write_length_prefixed_string(self.culture_invariant)
        elif self.history_type == HistoryType.BASE:
            writer.write_length_prefixed_string(self.namespace)
            writer.write_length_prefixed_string(self.key)
            writer.write_length_prefixed_string(self.value)
        elif self.history_type == HistoryType.STRING_TABLE_ENTRY:
            writer.write_length_prefixed_string(self.table_id)
            writer.write_length_prefixed_string(self.key)
        else:
            raise SaveFormatError(f"Unsupported text history type {self.history_type}")

    def to_dict(self) -> dict:
        result = {"flags": self.flags, "history_type": enum_name(self.history_type)}
        if self.history_type == HistoryType.NONE:
            result["culture_invariant"] = self.culture_invariant
        elif self.history_type == HistoryType.BASE:
            result.update(namespace=self.namespace, key=self.key, value=self.value)
        elif self.history_type == HistoryType.STRING_TABLE_ENTRY:
            result.update(table_id=self.table_id, key=self.key)
        return result

    def __str__(self) -> str:
        if self.history_type == HistoryType.BASE:
            return self.value
        if self.history_type == HistoryType.STRING_TABLE_ENTRY:
            return f"{self.table_id}/{self.key}"
        return self.culture_invariant or ""


def enum_name(value: int) -> str:
    try:
        return HistoryType(value).name
    except ValueError:
        return f"UNKNOWN_{value}"


def parse_text_entry(reader: BinaryReader) -> TextEntry:
    """Read one FText entry from the stream."""
    entry = TextEntry(flags=reader.read_i32(), history_type=reader.read_u8())
    if entry.history_type == HistoryType.NONE:
        if reader.read_i32() != 0:
            entry.culture_invariant = reader.read_length_prefixed_string()
    elif entry.history_type == HistoryType.BASE:
        entry.namespace = reader.read_length_prefixed_string()
        entry.key = reader.read_length_prefixed_string()
        entry.value = reader.read_length_prefixed_string()
    elif entry.history_type == HistoryType.STRING_TABLE_ENTRY:
        entry.table_id = reader.read_length_prefixed_string()
        entry.key = reader.read_length_prefixed_string()
    else:
        raise SaveFormatError(f"Unexpected text history type {entry.history_type} at offset {reader.pos - 1}")
    return entry
