"""
Command line front end: inspect or export a serialized property list.

Usage:
    sfsave info <input.bin>
    sfsave export <input.bin> <output.yaml>

The input holds one property list (as found in a save object body), ending
with the "None" property. Use --offset to skip leading bytes.

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

import argparse
import logging
import sys
from pathlib import Path

from .binary import BinaryReader
from .export import export_to_text, export_to_yaml
from .records import read_properties

log = logging.getLogger(__name__)


def load_properties(path: Path, offset: int = 0):
    reader = BinaryReader(path.read_bytes())
    reader.pos = offset
    properties = read_properties(reader)
    if reader.remaining:
        log.warning(f"{reader.remaining} trailing bytes after property list in {path}")
    return properties


def cmd_info(args):
    """Show property list summary."""
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    try:
        properties = load_properties(input_path, args.offset)
        print(export_to_text(properties))
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_export(args):
    """Export property list to YAML."""
    input_path = Path(args.input)
    output_path = Path(args.output)

    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    try:
        properties = load_properties(input_path, args.offset)
        output_path.write_text(export_to_yaml(properties), encoding="utf-8")
        print(f"Exported to: {output_path}")
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="sfsave",
        description="Satisfactory save property decoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s info object.bin                  Show the properties in a record
  %(prog)s export object.bin object.yaml    Export the properties to YAML
  %(prog)s -v export --offset 12 object.bin object.yaml
"""
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every decoded property")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # info command
    info_parser = subparsers.add_parser("info", help="Show property list summary")
    info_parser.add_argument("input", help="Input property list file")
    info_parser.add_argument("--offset", type=int, default=0, help="Bytes to skip before the first property")
    info_parser.set_defaults(func=cmd_info)

    # export command
    export_parser = subparsers.add_parser("export", help="Export property list to YAML")
    export_parser.add_argument("input", help="Input property list file")
    export_parser.add_argument("output", help="Output YAML file")
    export_parser.add_argument("--offset", type=int, default=0, help="Bytes to skip before the first property")
    export_parser.set_defaults(func=cmd_export)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
