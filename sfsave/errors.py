"""
Exceptions raised while decoding save file properties.

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


class SaveFormatError(ValueError):
    """The bytes are not in the shape the property format requires."""


class UnsupportedArrayTypeError(SaveFormatError):
    def __init__(self, type_name: str):
        super().__init__(f"Unimplemented array type: {type_name}")
        self.type_name = type_name


class UnknownStructTypeError(SaveFormatError):
    def __init__(self, type_name: str):
        super().__init__(f"Unknown struct type: {type_name}")
        self.type_name = type_name


class UnsupportedPropertyTypeError(SaveFormatError):
    def __init__(self, type_name: str):
        super().__init__(f"Unimplemented property type: {type_name}")
        self.type_name = type_name


class WriteNotSupportedError(NotImplementedError):
    """Serialization of this property kind is not implemented."""
