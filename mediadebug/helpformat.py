"""Turn the text printed by ffprobe's listing options into a table."""

from dataclasses import dataclass, field
from itertools import zip_longest

from mediadebug.codecflags import CHECK_MARK

HELP_OPTION_FORMATS = (
    "long",
    "full",
    "decoder",
    "encoder",
    "demuxer",
    "muxer",
    "filter",
    "bsf",
    "protocol",
)

_FLAG_LISTINGS = (
    "formats",
    "muxers",
    "demuxers",
    "devices",
    "codecs",
    "decoders",
    "filters",
    "encoders",
    "pixfmts",
)


@dataclass
class HelpTable:
    """Column headers and rows of cells parsed from a listing."""

    headers: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)


def _non_empty(text: str, separator: str) -> list[str]:
    return [part for part in text.split(separator) if part]


def _key_is(format_key: str, *names: str) -> bool:
    folded = format_key.casefold()
    return any(folded == name.casefold() for name in names)


def _version_table(lines: list[str]) -> HelpTable:
    if len(lines) < 2:
        raise ValueError("version output needs a version line and a build line")
    table = HelpTable(["Config", "Value"], [["Version", lines[0]], ["Build", lines[1]]])
    for line in lines[2:]:
        tokens = _non_empty(line, " ")
        if tokens and "configuration" in tokens[0]:
            tokens = tokens[1:]
        if "=" in line:
            for token in tokens:
                key_parts = _non_empty(token, "=")
                if not key_parts:
                    continue
                name = key_parts[0].replace("--", "").strip()
                if len(key_parts) == 2:
                    table.rows.append([name, key_parts[1].strip()])
                else:
                    table.rows.append(["", name])
        elif tokens:
            table.rows.append([tokens[0].strip(), " ".join(tokens[1:])])
    return table


def _flag_table(data: str, lines: list[str], format_key: str) -> HelpTable:
    table = HelpTable()
    if "filters" in format_key:
        with_legend = "".join(line + "\n" for line in lines if "=" in line)
        without_legend = "".join(line + "\n" for line in lines if "=" not in line)
        parts = [with_legend, without_legend]
    else:
        parts = _non_empty(data, "--")
    if len(parts) < 2:
        return table

    head_code = ""
    for line in _non_empty(parts[0], "\n"):
        if ":" in line or "=" not in line:
            continue
        pieces = _non_empty(line, "=")
        if len(pieces) >= 2:
            code = pieces[0].replace(".", "").strip()
            table.headers.append(f"[{code}]{pieces[1].strip()}")
            head_code += code

    table.headers.append("name")
    is_pixfmts = "pixfmts" in format_key
    if is_pixfmts:
        table.headers += ["NB_COMPONENTS", "BITS_PER_PIXEL"]
    elif "filters" in format_key:
        table.headers.append("direct")
    else:
        table.headers.append("detail")

    for line in _non_empty(parts[1], "\n"):
        tokens = _non_empty(line, " ")
        if len(tokens) < 3:
            continue
        row = [""] * len(head_code)
        for ch in tokens[0].strip():
            index = head_code.rfind(ch)
            if index >= 0:
                row[index] = CHECK_MARK
        row.append(tokens[1].strip())
        rest = tokens[2:]
        if is_pixfmts:
            row.append(rest[0].strip())
            row.append(rest[1].strip() if len(rest) > 1 else "")
        else:
            row.append(" ".join(rest))
        table.rows.append(row)
    return table


def _name_value_table(lines: list[str]) -> HelpTable:
    table = HelpTable(["Name", "Value"])
    for line in lines[1:]:
        upper = line.upper()
        if ":" in line or "DECOMPOSITION" in upper or "DESCRIPTION" in upper:
            continue
        tokens = _non_empty(line, " ")
        if len(tokens) >= 2:
            table.rows.append([tokens[0].strip(), " ".join(tokens[1:])])
    return table


def _protocol_table(lines: list[str]) -> HelpTable:
    inputs: list[str] = []
    outputs: list[str] = []
    target = inputs
    for line in lines[2:]:
        if "output" in line.casefold():
            target = outputs
            continue
        target.append(line.strip())
    rows = [list(pair) for pair in zip_longest(inputs, outputs, fillvalue="")]
    return HelpTable(["Input", "Output"], rows)


def format_help_output(data: str, format_key: str) -> HelpTable:
    """Parse listing output such as ``-codecs`` or ``-protocols`` into a table.

    An unknown ``format_key`` or empty output gives an empty table.
    """
    lines = _non_empty(data, "\n")
    if not lines:
        return HelpTable()
    if ":" in lines[0]:
        lines = lines[1:]

    if _key_is(format_key, "L"):
        return HelpTable(["Info"], [[line] for line in lines])
    if _key_is(format_key, "version"):
        return _version_table(lines)
    if _key_is(format_key, *_FLAG_LISTINGS):
        return _flag_table(data, lines, format_key)
    if _key_is(format_key, "colors", "samplefmts", "layouts"):
        return _name_value_table(lines)
    if _key_is(format_key, "protocols"):
        return _protocol_table(lines)
    if _key_is(format_key, "bsfs", "buildconf"):
        return HelpTable(["Bitstream filters"], [[line.strip()] for line in lines[1:]])
    return HelpTable()


def help_query(category: str, value: str) -> str:
    """Build the ``category=value`` argument for a detailed help query."""
    if category not in HELP_OPTION_FORMATS:
        raise ValueError(f"unknown help category: {category!r}")
    return f"{category}={value}"