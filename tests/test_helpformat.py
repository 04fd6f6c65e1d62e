import pytest

from mediadebug.codecflags import CHECK_MARK
from mediadebug.helpformat import HELP_OPTION_FORMATS, HelpTable, format_help_output, help_query

CODECS = (
    "Codecs:\n"
    " D..... = Decoding supported\n"
    " .E.... = Encoding supported\n"
    " ..V... = Video codec\n"
    " -------\n"
    " DEV.L. h264 H.264 / AVC\n"
    " D.A... aac AAC (Advanced Audio Coding)\n"
)

FILTERS = (
    "Filters:\n"
    "  T.. = Timeline support\n"
    "  .S. = Slice threading\n"
    "  A = Audio input/output\n"
    " TS. adelay A->A Delay one or more audio channels.\n"
    " ..C scale V->V Scale the input video size.\n"
)


def test_codecs_headers_and_flags():
    table = format_help_output(CODECS, "codecs")
    assert table.headers == [
        "[D]Decoding supported",
        "[E]Encoding supported",
        "[V]Video codec",
        "name",
        "detail",
    ]
    assert table.rows == [
        [CHECK_MARK, CHECK_MARK, CHECK_MARK, "h264", "H.264 / AVC"],
        [CHECK_MARK, "", "", "aac", "AAC (Advanced Audio Coding)"],
    ]


def test_codecs_rows_match_header_width():
    table = format_help_output(CODECS, "CODECS")
    assert all(len(row) == len(table.headers) for row in table.rows)


def test_filters_split_on_legend():
    table = format_help_output(FILTERS, "filters")
    assert table.headers[-2:] == ["name", "direct"]
    assert table.rows[0] == [
        CHECK_MARK, CHECK_MARK, "", "adelay", "A->A Delay one or more audio channels."
    ]
    assert table.rows[1] == ["", "", "", "scale", "V->V Scale the input video size."]


def test_license_listing_is_one_column():
    table = format_help_output("first line\nsecond line\n", "l")
    assert table == HelpTable(["Info"], [["first line"], ["second line"]])


def test_first_line_with_colon_is_dropped():
    table = format_help_output("Header: x\nA\nB", "L")
    assert table.rows == [["A"], ["B"]]


def test_version_output():
    data = (
        "ffmpeg version 6.0 Copyright\n"
        "built with gcc 12\n"
        "configuration: --prefix=/usr --enable-gpl\n"
        "libavutil      58.  2.100 / 58.  2.100\n"
    )
    table = format_help_output(data, "version")
    assert table.headers == ["Config", "Value"]
    assert table.rows[:2] == [
        ["Version", "ffmpeg version 6.0 Copyright"],
        ["Build", "built with gcc 12"],
    ]
    assert table.rows[2] == ["prefix", "/usr"]
    assert table.rows[3] == ["", "enable-gpl"]
    assert table.rows[4][0] == "libavutil"
    assert table.rows[4][1] == " ".join("58.  2.100 / 58.  2.100".split())


def test_version_output_too_short():
    with pytest.raises(ValueError):
        format_help_output("ffmpeg version 6.0\n", "version")


def test_colors():
    data = "Color name              RGB\nAliceBlue               #f0f8ff\nAntiqueWhite            #faebd7\n"
    table = format_help_output(data, "colors")
    assert table.headers == ["Name", "Value"]
    assert table.rows == [["AliceBlue", "#f0f8ff"], ["AntiqueWhite", "#faebd7"]]


def test_layouts_skip_section_lines():
    data = (
        "Individual channels:\n"
        "NAME           DESCRIPTION\n"
        "FL             front left\n"
        "Standard channel layouts:\n"
        "NAME           DECOMPOSITION\n"
        "mono           FC\n"
    )
    table = format_help_output(data, "layouts")
    assert table.rows == [["FL", "front left"], ["mono", "FC"]]


def test_protocols_pad_shorter_column():
    data = (
        "Supported file protocols:\n"
        "Input:\n"
        "  file\n"
        "  http\n"
        "  https\n"
        "Output:\n"
        "  file\n"
    )
    table = format_help_output(data, "protocols")
    assert table.headers == ["Input", "Output"]
    assert table.rows == [["http", "file"], ["https", ""]]


def test_bsfs_listing():
    data = "Bitstream filters:\naac_adtstoasc\nh264_mp4toannexb\nnull\n"
    table = format_help_output(data, "bsfs")
    assert table.headers == ["Bitstream filters"]
    assert table.rows == [["h264_mp4toannexb"], ["null"]]


@pytest.mark.parametrize("key", ["unknown", ""])
def test_unknown_key_gives_empty_table(key):
    assert format_help_output("a\nb\n", key) == HelpTable()


def test_empty_data_gives_empty_table():
    assert format_help_output("\n\n", "codecs") == HelpTable()


def test_help_query_builds_argument():
    assert help_query("decoder", "h264") == "decoder=h264"


@pytest.mark.parametrize("category", HELP_OPTION_FORMATS)
def test_help_query_accepts_every_category(category):
    assert help_query(category, "x").split("=") == [category, "x"]


def test_help_query_rejects_unknown_category():
    with pytest.raises(ValueError):
        help_query("codecs", "h264")