"""Decoding of the eight-character capability column printed for codecs."""

from itertools import zip_longest

CHECK_MARK = "√"

_FLAG_CHARS = ("D", "E", "V", "A", "S", "I", "L", "S")

_MEANINGS = (
    "Decoding supported",
    "Encoding supported",
    "Video codec",
    "Audio codec",
    "Subtitle codec",
    "Intra frame-only codec",
    "Lossy compression",
    "Lossless compression",
)


def parse(codec_flags: str) -> list[str]:
    """Return eight cells, a check mark where the flag at that position is set."""
    return [
        CHECK_MARK if ch == expected else ""
        for ch, expected in zip_longest(codec_flags[: len(_FLAG_CHARS)], _FLAG_CHARS)
    ]


def position_meaning(index: int) -> str:
    """Describe the flag at ``index``, or return an empty string if out of range."""
    return _MEANINGS[index] if 0 <= index < len(_MEANINGS) else ""


def position_short_name(index: int) -> str:
    """Return the letter used for the flag at ``index``, or an empty string."""
    return _FLAG_CHARS[index] if 0 <= index < len(_FLAG_CHARS) else ""