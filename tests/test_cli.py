"""Tests for the sfsave command line and YAML export."""

import struct

import yaml

from sfsave.binary import BinaryReader, BinaryWriter
from sfsave.cli import main
from sfsave.export import export_to_text, export_to_yaml
from sfsave.properties import BoolProperty, IntProperty
from sfsave.records import read_properties, write_property


def sample_bytes() -> bytes:
    w = BinaryWriter()
    write_property(w, BoolProperty("mIsActive", value=True))
    write_property(w, IntProperty("mCount", value=12))

    # mColors: 1 x LinearColor
    body = struct.pack("<4f", 1.0, 0.5, 0.25, 1.0)
    header = BinaryWriter()
    header.write_length_prefixed_string("mColors")
    header.write_length_prefixed_string("StructProperty")
    header.write_i32(len(body))
    header.write_i32(0)
    header.write_length_prefixed_string("LinearColor")
    header.write_bytes(bytes(17))
    payload = struct.pack("<i", 1) + header.get_bytes() + body

    w.write_length_prefixed_string("mColors")
    w.write_length_prefixed_string("ArrayProperty")
    w.write_i32(len(payload))
    w.write_i32(0)
    w.write_length_prefixed_string("StructProperty")
    w.write_u8(0)
    w.write_bytes(payload)

    w.write_length_prefixed_string("None")
    return w.get_bytes()


# ---------------------------------------------------------------------------
# export
# ---------------------------------------------------------------------------

def test_export_to_yaml():
    properties = read_properties(BinaryReader(sample_bytes()))
    data = yaml.safe_load(export_to_yaml(properties))
    assert data["_format"] == "Satisfactory Property List"
    assert [p["name"] for p in data["properties"]] == ["mIsActive", "mCount", "mColors"]
    colors = data["properties"][2]
    assert colors["struct_header"]["struct_type"] == "LinearColor"
    assert colors["elements"] == [{"r": 1.0, "g": 0.5, "b": 0.25, "a": 1.0}]

def test_export_to_text():
    properties = read_properties(BinaryReader(sample_bytes()))
    text = export_to_text(properties)
    assert "mCount <IntProperty>: 12" in text
    assert "mColors <ArrayProperty>: 1 x StructProperty (LinearColor)" in text

def test_export_to_text_empty():
    assert "(None)" in export_to_text([])


# ---------------------------------------------------------------------------
# commands
# ---------------------------------------------------------------------------

def test_info(tmp_path, capsys):
    path = tmp_path / "object.bin"
    path.write_bytes(sample_bytes())
    assert main(["info", str(path)]) == 0
    assert "mIsActive <BoolProperty>: True" in capsys.readouterr().out

def test_info_with_offset(tmp_path, capsys):
    path = tmp_path / "object.bin"
    path.write_bytes(b"\xde\xad\xbe\xef" + sample_bytes())
    assert main(["info", "--offset", "4", str(path)]) == 0
    assert "3 properties" in capsys.readouterr().out

def test_export(tmp_path):
    path = tmp_path / "object.bin"
    out = tmp_path / "object.yaml"
    path.write_bytes(sample_bytes())
    assert main(["export", str(path), str(out)]) == 0
    data = yaml.safe_load(out.read_text(encoding="utf-8"))
    assert data["properties"][1] == {"name": "mCount", "type": "IntProperty", "index": 0, "value": 12}

def test_missing_file(tmp_path, capsys):
    assert main(["info", str(tmp_path / "missing.bin")]) == 1
    assert "File not found" in capsys.readouterr().err

def test_malformed_file(tmp_path, capsys):
    path = tmp_path / "broken.bin"
    path.write_bytes(sample_bytes()[:30])
    assert main(["info", str(path)]) == 1
    assert capsys.readouterr().err.startswith("Error: ")
