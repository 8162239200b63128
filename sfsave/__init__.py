"""
Decoder for the tagged property records stored in Satisfactory save files.

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

from .arrays import ArrayProperty, StructArrayHeader
from .binary import BinaryReader, BinaryWriter, ObjectReference
from .binding import FieldDescriptor, PropertyContainer
from .errors import (
    SaveFormatError,
    UnknownStructTypeError,
    UnsupportedArrayTypeError,
    UnsupportedPropertyTypeError,
    WriteNotSupportedError,
)
from .properties import BoolProperty, FloatProperty, IntProperty, NameProperty, ObjectProperty, StrProperty
from .records import read_properties, read_property, write_properties, write_property
from .structs import create_struct, register_struct
from .text import TextEntry, parse_text_entry

__version__ = "0.1.0"
