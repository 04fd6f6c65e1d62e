"""Tree model of a JSON document, shown as key and value columns."""

import json
import math
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from os import PathLike
from typing import Any, Iterable

from mediadebug.jsonescape import escaped_string

HEADERS = ("key", "value")


class JsonType(Enum):
    NULL = "null"
    BOOL = "bool"
    DOUBLE = "double"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def _type_of(value: Any) -> JsonType:
    if value is None:
        return JsonType.NULL
    if isinstance(value, bool):
        return JsonType.BOOL
    if isinstance(value, (int, float)):
        return JsonType.DOUBLE
    if isinstance(value, str):
        return JsonType.STRING
    if isinstance(value, (list, tuple)):
        return JsonType.ARRAY
    if isinstance(value, dict):
        return JsonType.OBJECT
    raise TypeError(f"not a JSON value: {value!r}")


def _matches_any(key: str, exceptions: Iterable[str]) -> bool:
    folded = key.casefold()
    return any(pattern.casefold() in folded for pattern in exceptions)


@dataclass(eq=False)
class JsonTreeItem:
    """One node of the tree: a key, a scalar value or children, and a type."""

    key: str = ""
    value: Any = None
    type: JsonType = JsonType.NULL
    parent: "JsonTreeItem | None" = field(default=None, repr=False)
    children: list["JsonTreeItem"] = field(default_factory=list, repr=False)

    def append_child(self, item: "JsonTreeItem") -> None:
        self.children.append(item)

    def child(self, row: int) -> "JsonTreeItem | None":
        """Return the child at ``row``, or None if there is none."""
        return self.children[row] if 0 <= row < len(self.children) else None

    def row(self) -> int:
        """Return this item's position among its parent's children, 0 for the root."""
        if self.parent is None:
            return 0
        return next(
            (index for index, sibling in enumerate(self.parent.children) if sibling is self),
            -1,
        )

    @classmethod
    def load(
        cls,
        value: Any,
        exceptions: Iterable[str] = (),
        parent: "JsonTreeItem | None" = None,
    ) -> "JsonTreeItem":
        """Build a subtree from a decoded JSON value.

        Object members whose key contains any of ``exceptions``
        (case-insensitively) are left out; members come in sorted key order.
        """
        exceptions = list(exceptions)
        item = cls(key="root", parent=parent, type=_type_of(value))
        if item.type is JsonType.OBJECT:
            for key in sorted(value):
                if _matches_any(key, exceptions):
                    continue
                child = cls.load(value[key], exceptions, item)
                child.key = key
                item.append_child(child)
        elif item.type is JsonType.ARRAY:
            for index, element in enumerate(value):
                child = cls.load(element, exceptions, item)
                child.key = str(index)
                item.append_child(child)
        else:
            item.value = value
        return item


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON number: {name}")


def _variant_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
            return str(int(value))
        return repr(value)
    return str(value)


def _generate(item: JsonTreeItem) -> Any:
    if item.type is JsonType.OBJECT:
        return {child.key: _generate(child) for child in item.children}
    if item.type is JsonType.ARRAY:
        return [_generate(child) for child in item.children]
    if isinstance(item.value, bool):
        return item.value
    return _variant_text(item.value)


def _number_text(value: int | float) -> bytes:
    try:
        number = float(value)
    except OverflowError:
        return b"null"
    if not math.isfinite(number):
        return b"null"
    return format(Decimal(repr(number)).normalize(), "f").encode("ascii")


def _array_content(items: Iterable[Any], indent: int, compact: bool) -> bytes:
    pad = b" " * (4 * indent)
    parts = [pad + value_to_json(element, indent, compact) for element in items]
    if not parts:
        return b""
    body = (b"," if compact else b",\n").join(parts)
    return body if compact else body + b"\n"


def _object_content(members: dict, indent: int, compact: bool) -> bytes:
    pad = b" " * (4 * indent)
    separator = b'":' if compact else b'": '
    parts = []
    for key in sorted(members):
        if not isinstance(key, str):
            raise TypeError(f"JSON object keys must be strings: {key!r}")
        parts.append(
            pad + b'"' + escaped_string(key) + separator
            + value_to_json(members[key], indent, compact)
        )
    if not parts:
        return b""
    body = (b"," if compact else b",\n").join(parts)
    return body if compact else body + b"\n"


def value_to_json(value: Any, indent: int = 0, compact: bool = False) -> bytes:
    """Serialise a JSON value as UTF-8 bytes with four-space indentation.

    Object members are written in sorted key order; non-finite numbers
    are written as ``null``.
    """
    if value is None:
        return b"null"
    if isinstance(value, bool):
        return b"true" if value else b"false"
    if isinstance(value, (int, float)):
        return _number_text(value)
    if isinstance(value, str):
        return b'"' + escaped_string(value) + b'"'
    inner = indent if compact else indent + 1
    closing_pad = b" " * (4 * indent)
    if isinstance(value, (list, tuple)):
        opening = b"[" if compact else b"[\n"
        return opening + _array_content(value, inner, compact) + closing_pad + b"]"
    if isinstance(value, dict):
        opening = b"{" if compact else b"{\n"
        return opening + _object_content(value, inner, compact) + closing_pad + b"}"
    raise TypeError(f"not a JSON value: {value!r}")


class JsonModel:
    """A JSON document held as a tree of items with key and value columns."""

    column_count = 2

    def __init__(self) -> None:
        self.root = JsonTreeItem()
        self.headers = list(HEADERS)
        self.exceptions: list[str] = []

    def load_file(self, path: str | PathLike) -> None:
        """Load the JSON document stored at ``path``."""
        with open(path, "rb") as handle:
            self.load_json(handle.read())

    def load_json(self, data: bytes | bytearray | str) -> None:
        """Replace the tree with the document in ``data``.

        Raises ValueError if the data is not a JSON object or array; the
        previous tree is kept in that case.
        """
        text = bytes(data).decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
        document = json.loads(text, parse_constant=_reject_constant)
        if not isinstance(document, (dict, list)):
            raise ValueError("JSON document must be an object or an array")
        self.root = JsonTreeItem.load(document, self.exceptions)

    def add_exception(self, exceptions: Iterable[str]) -> None:
        """Set the key fragments to skip when loading, replacing earlier ones."""
        self.exceptions = list(exceptions)

    def header(self, section: int) -> str:
        return self.headers[section] if 0 <= section < len(self.headers) else ""

    def row_count(self, parent: JsonTreeItem | None = None) -> int:
        return len((self.root if parent is None else parent).children)

    def is_editable(self, item: JsonTreeItem, column: int) -> bool:
        """Only the value column of a scalar item can be edited."""
        return column == 1 and item.type not in (JsonType.ARRAY, JsonType.OBJECT)

    def set_value(self, item: JsonTreeItem, value: Any) -> None:
        item.value = value

    def to_json(self, compact: bool = False) -> bytes:
        """Serialise the tree; scalar values other than booleans become strings."""
        generated = _generate(self.root)
        if not isinstance(generated, (dict, list)):
            generated = {}
        body = value_to_json(generated, 0, compact)
        return body if compact else body + b"\n"