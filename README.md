# mediadebug

Plain-Python helpers for making sense of what a media probing tool prints.
The package has no runtime dependencies and starts no external programs:
you give it text or JSON you already have, and it gives back structured data.

## Install

```
pip install .
pip install ".[test]"
```

The `test` extra adds pytest, which runs the suite in `tests/`.

## Modules

- `mediadebug.codecflags`
  - `parse(codec_flags)` returns eight cells for a codec capability string
    such as `"DEV.LS"`: `"√"` where the character at that position is the
    expected flag letter (`D E V A S I L S`), `""` otherwise or where the
    string is too short.
  - `position_meaning(index)` and `position_short_name(index)` describe each
    position; an index out of range gives `""`.
- `mediadebug.helpformat`
  - `format_help_output(data, format_key)` splits listing text into a
    `HelpTable` (`headers`, `rows`). Known keys: `L`, `version`, `formats`,
    `muxers`, `demuxers`, `devices`, `codecs`, `decoders`, `encoders`,
    `filters`, `pixfmts`, `colors`, `samplefmts`, `layouts`, `protocols`,
    `bsfs`, `buildconf`. An unknown key or empty text gives an empty table;
    `version` output with fewer than two lines raises `ValueError`.
  - `help_query(category, value)` returns `"category=value"` for one of the
    categories in `HELP_OPTION_FORMATS`, and raises `ValueError` otherwise.
- `mediadebug.frametable`
  - `parse_frame_table(data)` reads JSON holding a `frames` or `packets`
    array (`packets` wins if both are present) and returns a `FrameTable`
    (`section`, `headers`, `rows`). Columns begin with the common fields,
    then the video or audio fields for the entry's `media_type`, then the
    rest in sorted order. Data that is not a JSON object, or that has
    neither array, raises `ValueError`.
  - `value_to_string(value)` and `extract_side_data(frame, key)` render
    single values and joined side-data entries.
- `mediadebug.jsontree`
  - `JsonModel` loads a JSON object or array with `load_json(data)` or
    `load_file(path)` into a tree of `JsonTreeItem` nodes (types in
    `JsonType`). Keys matching any fragment set with `add_exception(...)`
    (case-insensitive substring) are skipped. `is_editable`, `set_value`,
    `row_count` and `header` support editing and display, and
    `to_json(compact)` writes the tree back as bytes, with scalar values
    other than booleans written as strings.
  - `value_to_json(value, indent, compact)` serialises any JSON value with
    four-space indentation and sorted object keys.
- `mediadebug.jsonescape`
  - `escaped_string(text)` gives the UTF-8 bytes for text inside a JSON
    string literal; `encode_utf16_units(units)` encodes UTF-16 code units as
    UTF-8 and raises `ValueError` on unpaired surrogates.
- `mediadebug.progress`
  - `ProgressTracker` holds the state of a progress display in one of the
    `ProgressMode` values; `start`, `finish`, `cancel`, `reset`,
    `set_range`, `set_value`, `set_message` and `tick(elapsed_ms)` drive it.
  - `format_time(milliseconds)` renders `HH:MM:SS`.
- `mediadebug.searchrange`
  - `CheckSelection` keeps checkable options with select-all and
    select-none behaviour and an optional `on_change` callback.
  - `SearchPanel` and the `GroupBoxType` flags track which option groups are
    visible and expanded, along with the match settings.
- `mediadebug.export`
  - `build_export_commands(settings, fields, input_file, save_dir,
    save_name)` returns one shell command line per format enabled in
    `ExportSettings`, in the order default, json, ini, xml, flat, compact.
  - `ExportJob` combines settings, a `CheckSelection` of fields and an input
    file; `set_input_media_file(path)` raises `FileNotFoundError` for a
    missing file. `default_save_name(now)` gives a timestamped file stem.

## Example

```python
from mediadebug.codecflags import parse, position_meaning

marks = parse("DEV.LS")
print([position_meaning(i) for i, mark in enumerate(marks) if mark])
```

```python
from mediadebug.jsontree import JsonModel

model = JsonModel()
model.load_json(b'{"a": 1, "b": [true, "x"]}')
print(model.to_json(compact=True))
```

## What it does not do

There is no command-line program and no graphical interface. The package
does not run the probe tool, play media or write export files: the export
module only builds command strings, and the parsers work on output you
supply.