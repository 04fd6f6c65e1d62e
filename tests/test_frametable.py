import json

import pytest

from mediadebug.frametable import (
    COMMON_FIELDS,
    FrameTable,
    extract_side_data,
    parse_frame_table,
    value_to_string,
)


def _doc(**sections):
    return json.dumps(sections).encode("utf-8")


def test_invalid_json_raises():
    with pytest.raises(ValueError):
        parse_frame_table(b"{not json")


def test_non_object_raises():
    with pytest.raises(ValueError):
        parse_frame_table(b"[1, 2]")


def test_missing_section_raises():
    with pytest.raises(ValueError):
        parse_frame_table(_doc(streams=[]))


def test_section_not_array_raises():
    with pytest.raises(ValueError):
        parse_frame_table(_doc(frames={"a": 1}))


def test_empty_frames_gives_empty_table():
    table = parse_frame_table(_doc(frames=[]))
    assert table == FrameTable(section="frames", headers=[], rows=[])


def test_packets_preferred_when_both_present():
    table = parse_frame_table(_doc(frames=[{"a": 1}], packets=[{"b": "x"}]))
    assert table.section == "packets"
    assert table.headers == ["b"]
    assert table.rows == [["x"]]


def test_video_column_order():
    frame = {"zeta": "z", "width": 2, "alpha": "a", "key_frame": 1, "media_type": "video"}
    table = parse_frame_table(_doc(frames=[frame]))
    assert table.headers == ["media_type", "key_frame", "width", "alpha", "zeta"]
    assert table.rows == [["video", "1", "2", "a", "z"]]


def test_common_fields_come_first_in_source_order():
    frame = {name: "v" for name in reversed(COMMON_FIELDS)}
    frame["media_type"] = "audio"
    table = parse_frame_table(_doc(frames=[frame]))
    assert table.headers == list(COMMON_FIELDS)


def test_unknown_media_type_uses_default_order():
    frame = {"media_type": "data", "width": 4, "alpha": "a"}
    table = parse_frame_table(_doc(frames=[frame]))
    assert table.headers[0] == "media_type"
    assert table.headers[1:] == sorted(["width", "alpha"])


def test_missing_column_gives_empty_cell():
    frames = [{"media_type": "audio", "nb_samples": 1024}, {"media_type": "audio"}]
    table = parse_frame_table(_doc(frames=frames))
    assert len(table.rows) == 2
    assert table.rows[1][table.headers.index("nb_samples")] == ""


def test_non_object_entries_skipped():
    table = parse_frame_table(_doc(frames=[1, "x", {"a": True}]))
    assert table.rows == [["true"]]


def test_cell_rendering_of_structured_values():
    frame = {"a": None, "b": [1, 2], "c": {"x": 1}, "d": False}
    table = parse_frame_table(_doc(frames=[frame]))
    assert table.rows == [["null", "[2 items]", "{object}", "false"]]


def test_rows_match_header_width():
    frames = [{"media_type": "video", "width": 1}, {"media_type": "audio", "channels": 2}]
    table = parse_frame_table(_doc(frames=frames))
    assert all(len(row) == len(table.headers) for row in table.rows)


def test_accepts_text_input():
    table = parse_frame_table(json.dumps({"frames": [{"k": "v"}]}))
    assert table.rows == [["v"]]


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "null"),
        (True, "true"),
        (False, "false"),
        ("text", "text"),
        ([1, 2, 3], "[Array(3)]"),
        ({"a": 1}, "{Object}"),
        (1.5, "1.5"),
        (7, "7"),
    ],
)
def test_value_to_string(value, expected):
    assert value_to_string(value) == expected


def test_extract_side_data_joins_values():
    frame = {
        "side_data_list": [
            {"side_data_type": "first"},
            {"other": 1},
            {"side_data_type": "second"},
        ]
    }
    assert extract_side_data(frame, "side_data_type") == "first; second"


def test_extract_side_data_without_list():
    assert extract_side_data({"side_data_list": "nope"}, "k") == ""
    assert extract_side_data({}, "k") == ""