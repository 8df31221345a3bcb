"""End-to-end report generation over module and data schemas."""

from __future__ import annotations

from pathlib import Path

from schema_docgen.report_generation import ROOT_STRUCT_NAME, generate
from schema_docgen.schema_access import ModuleSchema
from schema_docgen.schema_loading import load_schema_file
from schema_docgen.type_model import INTEGER, array, lazy, ref, union


def _samples_dir() -> Path:
    return Path(__file__).resolve().parents[3] / "samples"


class DemoSchema2(ModuleSchema):
    def roots(self):
        return [
            ("foo", array(ref("foo"))),
            ("kek", lazy(union("bar", "kak"))),
        ]

    def fields(self, name):
        if name == "foo":
            return [("int", INTEGER)]
        if name == "bar":
            return [("bint", INTEGER)]
        if name == "kak":
            return [("kint", INTEGER)]
        raise KeyError(name)


class DemoSchema3(DemoSchema2):
    def tags(self):
        return ["tag1", "another tag"]


def test_module_schema_without_tags() -> None:
    report = generate(DemoSchema2)

    assert [record["full_name"] for record in report] == [ROOT_STRUCT_NAME, "foo", "bar", "kak"]
    assert all(record["tags"] == [] for record in report)
    assert report[0]["fields"] == [
        {"name": "foo", "aliases": [], "type": "array(ref(foo))"},
        {"name": "kek", "aliases": [], "type": "ref(bar) | ref(kak)"},
    ]
    assert report[1]["paths"] == ["foo.$INDEX"]
    assert report[2]["paths"] == ["kek"]
    assert report[3]["paths"] == ["kek"]


def test_module_schema_tags_apply_to_every_struct_but_the_root() -> None:
    root, *structs = generate(DemoSchema3())

    assert root["tags"] == []
    assert structs
    for struct in structs:
        assert struct["tags"] == ["tag1", "another tag"]


def test_sample_data_schema_renders_full_reference() -> None:
    schema = load_schema_file(_samples_dir() / "demo-schema.yaml")

    report = generate(
        schema,
        {"desc_file": _samples_dir() / "descriptions.yaml", "lang": "en"},
    )
    by_name = {record["full_name"]: record for record in report}

    assert [record["full_name"] for record in report] == [
        f"broker:{ROOT_STRUCT_NAME}",
        "broker:listener",
        "broker:ssl",
        "broker:log",
        "broker:zone",
    ]

    root = report[0]
    assert [item["name"] for item in root["fields"]] == ["listeners", "log", "zones"]
    assert root["fields"][0]["type"] == "array(ref(broker:listener))"
    assert root["fields"][0]["desc"] == "Network listeners accepting client connections."
    assert root["fields"][2]["type"] == "map(zone_name, ref(broker:zone))"

    listener = by_name["broker:listener"]
    assert listener["paths"] == ["listeners.$INDEX"]
    assert listener["tags"] == ["broker"]
    assert listener["desc"] == "A network listener."
    bind, max_connections, ssl = listener["fields"]
    assert bind["default"] == {"oneliner": True, "text": '"0.0.0.0:1883"'}
    assert bind["examples"] == ["127.0.0.1:1883"]
    assert max_connections["type"] == "integer | enum(infinity)"
    assert max_connections["aliases"] == ["max_conn"]
    assert ssl["type"] == "ref(broker:ssl)"

    ssl_struct = by_name["broker:ssl"]
    assert ssl_struct["paths"] == ["listeners.$INDEX.ssl", "zones.$zone_name.ssl"]
    assert ssl_struct["tags"] == ["broker", "zones"]
    assert ssl_struct["fields"][1]["default"]["text"] == "[tlsv1.3, tlsv1.2]"

    log_level, log_file = by_name["broker:log"]["fields"]
    assert log_level["desc"] == "Minimum level of log records."
    assert log_file == {
        "name": "file",
        "aliases": [],
        "type": "string",
        "desc": "Deprecated since 5.1.0.",
    }

    zone = by_name["broker:zone"]
    assert zone["tags"] == ["broker", "zones"]
    assert zone["fields"][1]["extra"] == {"importance": "medium"}


def test_sample_data_schema_localizes_descriptions() -> None:
    schema = load_schema_file(_samples_dir() / "demo-schema.yaml")

    report = generate(schema, {"desc_file": _samples_dir() / "descriptions.yaml", "lang": "zh"})

    assert report[0]["fields"][0]["desc"] == "接受客户端连接的网络监听器。"
    assert report[1]["desc"] == "网络监听器。"
