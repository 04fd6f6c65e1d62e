"""Flatten the ``frames`` or ``packets`` section of probe JSON output into a table."""

import json
from dataclasses import dataclass, field
from typing import Any

SECTION_KEYS = ("frames", "packets")

COMMON_FIELDS = (
    "media_type",
    "stream_index",
    "key_frame",
    "pkt_pts",
    "pkt_pts_time",
    "pkt_dts",
    "pkt_dts_time",
    "best_effort_timestamp",
    "best_effort_timestamp_time",
    "pkt_duration",
    "pkt_duration_time",
    "pkt_pos",
    "pkt_size",
)

VIDEO_FIELDS = (
    "width",
    "height",
    "pix_fmt",
    "sample_aspect_ratio",
    "pict_type",
    "coded_picture_number",
    "display_picture_number",
    "interlaced_frame",
    "top_field_first",
    "repeat_pict",
    "chroma_location",
)

AUDIO_FIELDS = ("sample_fmt", "nb_samples", "channels", "channel_layout")


@dataclass
class FrameTable:
    """Headers and rows built from one section of probe output."""

    section: str = ""
    headers: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)


def _number(value: int | float) -> str:
    return format(float(value), "g")


def _cell(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _number(value)
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return f"[{len(value)} items]"
    if isinstance(value, dict):
        return "{object}"
    return str(value)


def value_to_string(value: Any) -> str:
    """Render a decoded JSON value as short display text."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _number(value)
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return f"[Array({len(value)})]"
    if isinstance(value, dict):
        return "{Object}"
    return str(value)


def extract_side_data(frame: dict, key: str) -> str:
    """Join the values of ``key`` across the frame's side data entries with ``"; "``."""
    side_data = frame.get("side_data_list")
    if not isinstance(side_data, list):
        return ""
    return "; ".join(
        value_to_string(entry[key])
        for entry in side_data
        if isinstance(entry, dict) and key in entry
    )


def _build_header(all_fields: set[str], specific: tuple[str, ...]) -> list[str]:
    header = [name for name in COMMON_FIELDS if name in all_fields]
    header += [name for name in specific if name in all_fields]
    header += sorted(all_fields.difference(header))
    return header


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON number: {name}")


def parse_frame_table(data: bytes | bytearray | str) -> FrameTable:
    """Parse probe JSON and tabulate its ``frames`` or ``packets`` array.

    When both sections are present, ``packets`` is used. Columns start with
    the common fields, then fields specific to the media type, then the rest
    in sorted order. Raises ValueError when the data is not a JSON object or
    holds neither section as an array.
    """
    text = bytes(data).decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
    document = json.loads(text, parse_constant=_reject_constant)
    if not isinstance(document, dict):
        raise ValueError("JSON is not an object")

    section = ""
    for candidate in SECTION_KEYS:
        if isinstance(document.get(candidate), list):
            section = candidate
    if not section:
        raise ValueError("missing or invalid frames/packets array")

    table = FrameTable(section=section)
    entries = [entry for entry in document[section] if isinstance(entry, dict)]
    if not entries:
        return table

    all_fields = {name for entry in entries for name in entry}
    templates = {
        "video": _build_header(all_fields, VIDEO_FIELDS),
        "audio": _build_header(all_fields, AUDIO_FIELDS),
        "default": _build_header(all_fields, ()),
    }

    current_type = None
    for entry in entries:
        if "media_type" in entry:
            raw = entry["media_type"]
            media_type = raw if isinstance(raw, str) else ""
        else:
            media_type = "default"
        if not table.headers or media_type != current_type:
            table.headers = list(templates.get(media_type, templates["default"]))
            current_type = media_type
        table.rows.append(
            [_cell(entry[column]) if column in entry else "" for column in table.headers]
        )
    return table