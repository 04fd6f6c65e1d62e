import json

import pytest

from mediadebug.jsonescape import encode_utf16_units, escaped_string


def _units(text):
    data = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(data[i : i + 2], "little") for i in range(0, len(data), 2)]


@pytest.mark.parametrize("text", ["A", "hello", "é", "日本語", "😀", "mixé😀日"])
def test_encode_matches_utf8(text):
    assert encode_utf16_units(_units(text)) == text.encode("utf-8")


def test_encode_empty():
    assert encode_utf16_units([]) == b""


def test_encode_surrogate_pair_gives_four_bytes():
    assert len(encode_utf16_units([0xD83D, 0xDE00])) == 4


@pytest.mark.parametrize(
    "units",
    [[0xDC00], [0xD800], [0xD800, 0x41], [0x41, 0xDFFF, 0x42]],
)
def test_encode_unpaired_surrogate_raises(units):
    with pytest.raises(ValueError):
        encode_utf16_units(units)


@pytest.mark.parametrize("units", [[-1], [0x10000]])
def test_encode_rejects_non_units(units):
    with pytest.raises(ValueError):
        encode_utf16_units(units)


def test_simple_escapes():
    assert escaped_string('a"b') == b'a\\"b'
    assert escaped_string("a\\b") == b"a\\\\b"
    assert escaped_string("\n") == b"\\n"
    assert escaped_string("\t\r") == b"\\t\\r"


def test_other_control_chars_use_unicode_escape():
    assert escaped_string("\x1f") == b"\\u001f"


def test_delete_char_is_not_escaped():
    assert escaped_string("\x7f") == b"\x7f"


def test_non_ascii_is_utf8():
    assert escaped_string("é😀") == "é😀".encode("utf-8")


def test_lone_high_surrogate_followed_by_ascii():
    assert escaped_string("\ud800x") == b"\\ud800x"


def test_lone_low_surrogate():
    assert escaped_string("\udc01") == b"\\udc01"


@pytest.mark.parametrize(
    "text",
    ["", "plain", 'q"uo\\te', "\x00\x01\x08\x0c\x1f", "tab\tnl\n", "é日😀", "\x7f~"],
)
def test_round_trip_through_json(text):
    literal = '"' + escaped_string(text).decode("utf-8") + '"'
    assert json.loads(literal) == text