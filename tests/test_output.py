import toml
import yaml

from smbdump        import ftoml, fyaml, report
from smbdump.report import title
from conftest import body, structure, end_of_table, decode_table

def sample_table(fault = False):
    formatted = body(0x1B, (0x04, "B", 1), (0x05, "B", 2), (0x18, "B", 6))
    data = structure(1, 0x0100, formatted, (b"Acme", b"Widget"))
    data += structure(11, 0x0B00, body(5, (0x04, "B", 2)), (b"one", b"two"))
    if fault:
        return decode_table(data + b"\x02\x10")
    return decode_table(data + end_of_table())

def test_title():
    assert title("contained_object_handles") == "Contained Object Handles"
    assert title("sku_number") == "SKU Number"
    assert title("l1_cache_handle") == "L1 Cache Handle"

def test_report():
    text = report.render(sample_table())
    lines = text.split("\n")
    assert lines[0] == "SMBIOS 3.8.0 present."
    assert lines[1] == "Table is %d bytes." % (sample_table().entry_point.table_length,)
    assert "Handle 0x0100, DMI type 1, 27 bytes" in lines
    assert "System Information" in lines
    assert "\tManufacturer: Acme" in lines
    assert "\tWake Up Type: Power Switch" in lines
    assert "\tVersion: None" not in lines
    assert "\tStrings:" in lines
    assert "\t\ttwo" in lines
    assert "Handle 0xFFFF, DMI type 127, 4 bytes" in lines
    assert not [l for l in lines if l.startswith("Truncated")]

def test_report_truncated():
    table = sample_table(fault=True)
    text = report.render(table)
    assert "Truncated: %s" % (table.fault.message,) in text

def test_toml():
    d = toml.loads(ftoml.dump(sample_table()).decode('utf8'))
    assert d["entry_point"]["version"] == "3.8.0"
    system = d["structure"][0]
    assert system["handle"] == "0x0100"
    assert system["type"] == 1
    assert system["name"] == "System Information"
    assert system["fields"]["manufacturer"] == "Acme"
    assert system["fields"]["wake_up_type"] == "Power Switch"
    assert "version" not in system["fields"]
    assert d["structure"][1]["fields"]["strings"] == ["one", "two"]

def test_yaml():
    d = yaml.safe_load(fyaml.dump(sample_table()))
    assert d["entry_point"]["table_length"] == sample_table().entry_point.table_length
    assert [s["type"] for s in d["structure"]] == [1, 11, 127]
    assert d["structure"][0]["fields"]["product_name"] == "Widget"
    assert d["structure"][1]["fields"]["strings"] == ["one", "two"]
    assert "fault" not in d

def test_yaml_keeps_field_order():
    d = yaml.safe_load(fyaml.dump(sample_table()))
    assert list(d["structure"][0]["fields"]) == ["manufacturer", "product_name", "uuid", "wake_up_type"]

def test_yaml_fault():
    d = yaml.safe_load(fyaml.dump(sample_table(fault=True)))
    assert len(d["structure"]) == 2
    assert d["fault"]

def test_toml_escapes_control_characters():
    table = sample_table()
    table[0].fields["manufacturer"] = u"\x03ab\x7f\"\\"
    d = toml.loads(ftoml.dump(table).decode('utf8'))
    assert d["structure"][0]["fields"]["manufacturer"] == u"\x03ab\x7f\"\\"

def test_yaml_escapes_control_characters():
    table = sample_table()
    table[0].fields["manufacturer"] = u"\x03ab"
    d = yaml.safe_load(fyaml.dump(table))
    assert d["structure"][0]["fields"]["manufacturer"] == u"\x03ab"

def test_dump_str():
    assert ftoml.dump_str(u"a\tb\x01") == u'"a\\tb\\u0001"'
    assert ftoml.dump_str(u"Grün") == u'"Grün"'
