"""Build the probe command lines that export media information to files."""

import os
import posixpath
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from mediadebug.searchrange import CheckSelection

SAVE_NAME_FORMAT = "%Y-%m-%d_%H-%M-%S"
_PREFIX = "ffprobe -loglevel quiet"


def default_save_name(now: datetime | None = None) -> str:
    """Return the timestamp used as the save name before a file is chosen."""
    return (now or datetime.now()).strftime(SAVE_NAME_FORMAT)


def _flag(value: bool) -> str:
    return "1" if value else "0"


@dataclass
class ExportSettings:
    """Which output formats to write and the writer options for each."""

    default_enabled: bool = False
    default_nokey: bool = False
    default_noprint_wrappers: bool = False
    default_suffix: str = ".txt"

    json_enabled: bool = True
    json_compact: bool = False
    json_suffix: str = ".json"

    ini_enabled: bool = False
    ini_hierarchical: bool = True
    ini_suffix: str = ".ini"

    xml_enabled: bool = False
    xml_fully_qualified: bool = False
    xml_xsd_strict: bool = False
    xml_suffix: str = ".xml"

    flat_enabled: bool = False
    flat_sep_char: str = "."
    flat_hierarchical: bool = True
    flat_suffix: str = ".txt"

    compact_enabled: bool = False
    compact_item_sep: str = "|"
    compact_nokey: bool = False
    compact_escape: str = "c"
    compact_print_section: bool = True
    compact_suffix: str = ".csv"


def build_export_commands(
    settings: ExportSettings,
    fields: Iterable[str],
    input_file: str,
    save_dir: str,
    save_name: str,
) -> list[str]:
    """Return one shell command line per enabled format, redirecting into a file.

    Formats come in the order default, json, ini, xml, flat, compact.
    """
    selected = " ".join(fields)

    def target(tag: str, suffix: str) -> str:
        return posixpath.join(save_dir, f"{save_name}_{tag}_{suffix.strip()}")

    def command(writer: str, output: str) -> str:
        return f"{_PREFIX} {selected} -i {input_file} -of {writer} > {output}"

    s = settings
    commands = []
    if s.default_enabled:
        commands.append(
            command(
                f"default=nk={_flag(s.default_nokey)}:nw={_flag(s.default_noprint_wrappers)}",
                target("default", s.default_suffix),
            )
        )
    if s.json_enabled:
        commands.append(
            command(f"json=c={_flag(s.json_compact)}", target("json", s.json_suffix))
        )
    if s.ini_enabled:
        commands.append(
            command(f"ini=h={_flag(s.ini_hierarchical)}", target("ini", s.ini_suffix))
        )
    if s.xml_enabled:
        commands.append(
            command(
                f"xml=q={_flag(s.xml_fully_qualified)}:x={_flag(s.xml_xsd_strict)}",
                target("xml", s.xml_suffix),
            )
        )
    if s.flat_enabled:
        commands.append(
            command(
                f"flat=s={s.flat_sep_char.strip()}:h={_flag(s.flat_hierarchical)}",
                target("flat", s.flat_suffix),
            )
        )
    if s.compact_enabled:
        commands.append(
            command(
                f"compact=s={s.compact_item_sep.strip()}:nk={_flag(s.compact_nokey)}"
                f":e={s.compact_escape.strip()}:p={_flag(s.compact_print_section)}",
                target("csv", s.compact_suffix),
            )
        )
    return commands


@dataclass
class ExportJob:
    """An input file, the fields to export and where the results go."""

    settings: ExportSettings = field(default_factory=ExportSettings)
    fields: CheckSelection = field(default_factory=CheckSelection)
    save_name: str = field(default_factory=default_save_name)
    save_dir: str = ""
    input_file: str = ""

    def set_input_media_file(self, path: str | os.PathLike) -> None:
        """Use ``path`` as input and save next to it; raises FileNotFoundError if missing."""
        path = os.fspath(path)
        if not os.path.exists(path):
            raise FileNotFoundError(f"{path} not exists!")
        self.input_file = path
        self.save_name = os.path.basename(path) + "_media_info"
        self.save_dir = os.path.dirname(os.path.abspath(path))

    def commands(self) -> list[str]:
        return build_export_commands(
            self.settings,
            self.fields.selected(),
            self.input_file,
            self.save_dir,
            self.save_name,
        )