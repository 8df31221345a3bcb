"""Default value pretty printer tests."""

from __future__ import annotations

from schema_docgen.field_rendering import format_default, pretty_print


def test_scalars_print_on_one_line() -> None:
    assert pretty_print(12) == ["12"]
    assert pretty_print(1.5) == ["1.5"]
    assert pretty_print(True) == ["true"]
    assert pretty_print(None) == ["null"]
    assert pretty_print("info") == ["info"]
    assert pretty_print("15s") == ['"15s"']
    assert pretty_print("true") == ['"true"']
    assert pretty_print("with space") == ['"with space"']


def test_flat_lists_stay_on_one_line() -> None:
    assert pretty_print([1, "a", False]) == ["[1, a, false]"]
    assert pretty_print([]) == ["[]"]
    assert pretty_print({}) == ["{}"]


def test_mappings_print_as_indented_blocks() -> None:
    value = {"enable": True, "ssl": {"verify": "verify_peer"}, "bind path": "/tmp"}

    assert pretty_print(value) == [
        "{",
        "  enable = true",
        "  ssl {",
        "    verify = verify_peer",
        "  }",
        '  "bind path" = "/tmp"',
        "}",
    ]


def test_lists_of_mappings_print_one_block_per_item() -> None:
    assert pretty_print([{"a": 1}, {"b": 2}]) == [
        "[",
        "  {",
        "    a = 1",
        "  },",
        "  {",
        "    b = 2",
        "  }",
        "]",
    ]


def test_format_default_wraps_single_and_multi_line_output() -> None:
    assert format_default(None) is None
    assert format_default("1MB") == {"oneliner": True, "text": '"1MB"'}
    assert format_default({"a": 1}) == {"oneliner": False, "text": "{\n  a = 1\n}"}
    assert format_default(False) == {"oneliner": True, "text": "false"}


def test_dotted_keys_are_quoted_so_they_stay_single_keys() -> None:
    assert format_default({"a.b": 1}) == {"oneliner": False, "text": '{\n  "a.b" = 1\n}'}
    assert pretty_print({"zone.ssl": {"enable": True}}) == [
        "{",
        '  "zone.ssl" {',
        "    enable = true",
        "  }",
        "}",
    ]
    assert pretty_print("log.level") == ["log.level"]
