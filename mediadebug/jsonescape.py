"""UTF-8 encoding of UTF-16 code units and JSON string escaping."""

import struct
from collections.abc import Iterable, Iterator

_SIMPLE_ESCAPES = {
    0x22: b'\\"',
    0x5C: b"\\\\",
    0x08: b"\\b",
    0x0C: b"\\f",
    0x0A: b"\\n",
    0x0D: b"\\r",
    0x09: b"\\t",
}


def _is_high(u: int) -> bool:
    return 0xD800 <= u <= 0xDBFF


def _is_low(u: int) -> bool:
    return 0xDC00 <= u <= 0xDFFF


def _scan(units: list[int]) -> Iterator[tuple[int, bytes | None]]:
    """Yield each leading code unit with its UTF-8 bytes, or None if it is an unpaired surrogate."""
    for u in units:
        if not 0 <= u <= 0xFFFF:
            raise ValueError(f"not a UTF-16 code unit: {u!r}")
    pos = 0
    count = len(units)
    while pos < count:
        u = units[pos]
        pos += 1
        if u < 0x80:
            yield u, bytes((u,))
        elif u < 0x800:
            yield u, bytes((0xC0 | (u >> 6), 0x80 | (u & 0x3F)))
        elif not 0xD800 <= u <= 0xDFFF:
            yield u, bytes((0xE0 | (u >> 12), 0x80 | ((u >> 6) & 0x3F), 0x80 | (u & 0x3F)))
        elif pos < count and _is_high(u) and _is_low(units[pos]):
            low = units[pos]
            pos += 1
            cp = 0x10000 + ((u - 0xD800) << 10) + (low - 0xDC00)
            yield u, bytes(
                (
                    0xF0 | ((cp >> 18) & 0x0F),
                    0x80 | ((cp >> 12) & 0x3F),
                    0x80 | ((cp >> 6) & 0x3F),
                    0x80 | (cp & 0x3F),
                )
            )
        else:
            yield u, None


def _utf16_units(text: str) -> list[int]:
    data = text.encode("utf-16-le", "surrogatepass")
    return [unit for (unit,) in struct.iter_unpack("<H", data)]


def encode_utf16_units(units: Iterable[int]) -> bytes:
    """Encode UTF-16 code units as UTF-8; unpaired surrogates raise ValueError."""
    out = bytearray()
    for u, encoded in _scan(list(units)):
        if encoded is None:
            raise ValueError(f"unpaired surrogate 0x{u:04x}")
        out += encoded
    return bytes(out)


def escaped_string(text: str) -> bytes:
    """Escape ``text`` for use inside a JSON string literal, as UTF-8 bytes.

    Control characters, quotes and backslashes are escaped; unpaired
    surrogates are written as ``\\uXXXX``.
    """
    out = bytearray()
    for u, encoded in _scan(_utf16_units(text)):
        if u < 0x20 or u in (0x22, 0x5C):
            out += _SIMPLE_ESCAPES.get(u) or f"\\u{u:04x}".encode("ascii")
        elif encoded is None:
            out += f"\\u{u:04x}".encode("ascii")
        else:
            out += encoded
    return bytes(out)