"""
YAML and text views of decoded property lists.

The YAML form is lossless for everything the decoder reads: opaque bytes
(struct array reserved fields, GUIDs) are kept as base64.

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

import yaml

from .arrays import ArrayProperty
from .properties import SerializedProperty

EXPORT_FORMAT = "Satisfactory Property List"


def export_to_yaml(properties: list[SerializedProperty]) -> str:
    """Export decoded properties to YAML."""
    output = {
        "_format": EXPORT_FORMAT,
        "properties": [prop.to_dict() for prop in properties],
    }
    return yaml.dump(output, allow_unicode=True, sort_keys=False, default_flow_style=False, width=120)


def export_to_text(properties: list[SerializedProperty]) -> str:
    """Summarize decoded properties, one line each."""
    lines = []
    lines.append("=" * 60)
    lines.append(f"{EXPORT_FORMAT} ({len(properties)} properties)")
    lines.append("=" * 60)

    for prop in properties:
        index = f"[{prop.index}]" if prop.index else ""
        if isinstance(prop, ArrayProperty):
            detail = f"{len(prop.elements)} x {prop.type}"
            if prop.struct_header is not None:
                detail += f" ({prop.struct_header.struct_type})"
        else:
            detail = str(prop.backing_value)
        lines.append(f"  {prop.property_name}{index} <{prop.PROPERTY_TYPE}>: {detail}")

    if not properties:
        lines.append("  (None)")
    return "\n".join(lines)
