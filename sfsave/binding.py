"""
Assignment of decoded properties onto host objects.

A host class lists its bindable fields in a static FIELDS table of
FieldDescriptor entries. Properties that cannot be bound, because the field
is unknown, has the wrong shape or holds a different element type, are kept
unchanged in the container's unmapped property list so they can be written
back out later.

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
from dataclasses import dataclass
from operator import attrgetter
from typing import Optional

from .properties import (
    BYTE_PROPERTY,
    ENUM_PROPERTY,
    INT_PROPERTY,
    INTERFACE_PROPERTY,
    OBJECT_PROPERTY,
    STRUCT_PROPERTY,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldDescriptor:
    """A named field on a host object.

    collection is list for ordered, dynamically sized fields and None for
    scalar fields. element_type is the type (or tuple of types) each value
    must be an instance of.
    """
    name: str
    element_type: type
    collection: Optional[type] = list

    def values(self, container) -> list:
        return getattr(container, self.name)


# Array element tag -> accessor for the value appended to a list field
ARRAY_PROJECTIONS = {
    BYTE_PROPERTY: attrgetter("byte_value"),
    INT_PROPERTY: attrgetter("value"),
    OBJECT_PROPERTY: attrgetter("reference"),
    STRUCT_PROPERTY: attrgetter("data"),
    INTERFACE_PROPERTY: attrgetter("reference"),
}

# Known element tags that are not bound yet
DEFERRED_ARRAY_TYPES = {ENUM_PROPERTY}


def project_array(prop, container, field: FieldDescriptor) -> bool:
    """Append every element of an array property to a list field.

    Returns True when the elements were appended. Otherwise the whole
    property is added to the container's unmapped properties and nothing
    is appended.
    """
    owner = f"{type(container).__name__}.{field.name}"

    if field.collection is not list:
        log.error(f"Attempted to assign array {prop.property_name} to non list field {owner}")
        container.add_unmapped_property(prop)
        return False

    mismatched = next((e for e in prop.elements if not isinstance(e.backing_value, field.element_type)), None)
    if mismatched is not None:
        log.error(f"Attempted to insert {type(mismatched.backing_value).__name__} into {owner} "
                  f"of {getattr(field.element_type, '__name__', field.element_type)}")
        container.add_unmapped_property(prop)
        return False

    projection = ARRAY_PROJECTIONS.get(prop.type)
    if projection is None:
        if prop.type in DEFERRED_ARRAY_TYPES:
            log.warning(f"Assigning {prop.type} arrays is not supported yet, keeping {prop.property_name} unmapped")
        else:
            log.warning(f"Attempted to assign array {prop.property_name} of unknown type {prop.type}")
        container.add_unmapped_property(prop)
        return False

    values = field.values(container)
    for element in prop.elements:
        values.append(projection(element))
    return True


class PropertyContainer:
    """Base class for host objects that receive decoded properties."""

    # Property name -> field descriptor
    FIELDS: dict[str, FieldDescriptor] = {}

    def __init__(self):
        self.unmapped_properties = []
        for descriptor in self.FIELDS.values():
            if descriptor.collection is not None and not hasattr(self, descriptor.name):
                setattr(self, descriptor.name, descriptor.collection())

    def add_unmapped_property(self, prop):
        self.unmapped_properties.append(prop)

    def assign_properties(self, properties):
        for prop in properties:
            field = self.FIELDS.get(prop.property_name)
            if field is None:
                log.debug(f"No field for {prop.PROPERTY_TYPE} {prop.property_name} on {type(self).__name__}")
                self.add_unmapped_property(prop)
                continue
            prop.assign_to(self, field)
