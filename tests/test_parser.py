import io

import pytest

from sysconf.parser import (
    DEFAULT_DELIMITERS,
    LINE_BUFFER_SIZE,
    ConfigEntry,
    count_tokens,
    find_config_item,
    get_value,
    make_argv,
    parse_config,
    print_config_item,
)

EXAMPLE = """/**
 * This is a test header
 * with multiple lines.
 */
item1 = value2;                 # comment string returned.
item2  = value2 subvalue2;

/**
 * comment = noprint
 */
 config {
        item3=value3;
        item4=value4;
    item5.subitem5 = /bin/sh /etc/rc;
 }
"""


@pytest.fixture
def example_file(tmp_path):
    path = tmp_path / "example.conf"
    path.write_text(EXAMPLE)
    return path


def test_make_argv_splits_on_any_delimiter():
    assert make_argv('key = "a b";', DEFAULT_DELIMITERS) == ["key", "a", "b"]


def test_make_argv_leading_and_repeated_delimiters():
    assert make_argv("  ::x==y  ", DEFAULT_DELIMITERS) == ["x", "y"]


def test_make_argv_only_delimiters():
    assert make_argv(" =;\t\n", DEFAULT_DELIMITERS) == []


def test_make_argv_empty_delimiters_yields_whole_text():
    assert make_argv("a b", "") == ["a b"]
    assert make_argv("", "") == []


def test_count_tokens_matches_make_argv():
    for text in ["", "a", "a=b;", "  x y  z ", "'q':r"]:
        assert count_tokens(text, DEFAULT_DELIMITERS) == len(make_argv(text, DEFAULT_DELIMITERS))


def test_parse_example(example_file):
    entries = parse_config(example_file)
    assert [e.key for e in entries] == [
        "item1",
        "item2",
        "config",
        "item3",
        "item4",
        "item5.subitem5",
        "}",
    ]
    assert entries[0].values == ("item1", "value2", "#", "comment", "string", "returned.")
    assert entries[1].values == ("item2", "value2", "subvalue2")
    assert entries[5].values == ("item5.subitem5", "/bin/sh", "/etc/rc")


def test_parse_skips_comment_prefixes(tmp_path):
    path = tmp_path / "c.conf"
    path.write_text("# a\n; b\n// c\n* d\n[section]\n\n   \nkey=value\n")
    assert parse_config(path) == [ConfigEntry(("key", "value"))]


def test_parse_missing_file(tmp_path):
    with pytest.raises(OSError):
        parse_config(tmp_path / "missing.conf")


def test_parse_custom_delimiters(tmp_path):
    path = tmp_path / "c.conf"
    path.write_text("a,b,c\n")
    assert parse_config(path, ",\n")[0].values == ("a", "b", "c")


def test_long_lines_are_read_in_buffer_pieces(tmp_path):
    path = tmp_path / "long.conf"
    text = "a" * (LINE_BUFFER_SIZE + 100)
    path.write_text(text + "\n")
    entries = parse_config(path)
    assert len(entries) == 2
    assert "".join(e.key for e in entries) == text
    assert len(entries[0].key) == LINE_BUFFER_SIZE - 1


def test_find_config_item_exact(example_file):
    entries = parse_config(example_file)
    assert find_config_item(entries, "item3").values == ("item3", "value3")
    assert find_config_item(entries, "item") is None


def test_get_value_uses_key_as_prefix():
    entries = [ConfigEntry(("item", "x")), ConfigEntry(("item1", "y"))]
    assert get_value(entries, "item1") == ("item", "x")
    assert get_value(entries, "other") is None


def test_get_value_exact(example_file):
    entries = parse_config(example_file)
    assert get_value(entries, "item2") == ("item2", "value2", "subvalue2")


def test_print_config_item_prints_first_value(example_file):
    entries = parse_config(example_file)
    out = io.StringIO()
    print_config_item(entries, "item2", out)
    assert out.getvalue() == "value2\n"


def test_print_config_item_no_match():
    out = io.StringIO()
    print_config_item([ConfigEntry(("a", "b"))], "z", out)
    assert out.getvalue() == ""