"""Positions, ranges, locations and LSP enumerations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

CODE_ACTION_UNKNOWN_TRIGGER = 0


@dataclass(frozen=True)
class Position:
    """A zero-based line and character offset in a document."""

    line: int = 0
    character: int = 0

    def __str__(self) -> str:
        return f"{self.line}:{self.character}"


@dataclass(frozen=True)
class Range:
    """A half-open span between two positions."""

    start: Position = Position()
    end: Position = Position()

    def empty(self) -> bool:
        """Report whether the range is an empty selection."""
        return self.start == self.end

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


@dataclass(frozen=True)
class Location:
    """A range inside the document identified by a URI."""

    uri: str = ""
    range: Range = Range()

    def empty(self) -> bool:
        """Report whether the location is an empty selection."""
        return self.range.empty()


class _LspEnum(IntEnum):
    def __str__(self) -> str:
        return format_enum(type(self), int(self))


class TextDocumentSyncKind(_LspEnum):
    NONE = 0
    FULL = 1
    INCREMENTAL = 2


class MessageType(_LspEnum):
    ERROR = 1
    WARNING = 2
    INFO = 3
    LOG = 4


class FileChangeType(_LspEnum):
    CREATED = 1
    CHANGED = 2
    DELETED = 3


class WatchKind(_LspEnum):
    WATCH_CREATE = 1
    WATCH_CHANGE = 2
    WATCH_DELETE = 4


class CompletionTriggerKind(_LspEnum):
    INVOKED = 1
    TRIGGER_CHARACTER = 2
    TRIGGER_FOR_INCOMPLETE_COMPLETIONS = 3


class DiagnosticSeverity(_LspEnum):
    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    HINT = 4


class DiagnosticTag(_LspEnum):
    UNNECESSARY = 1
    DEPRECATED = 2


class CompletionItemKind(_LspEnum):
    TEXT = 1
    METHOD = 2
    FUNCTION = 3
    CONSTRUCTOR = 4
    FIELD = 5
    VARIABLE = 6
    CLASS = 7
    INTERFACE = 8
    MODULE = 9
    PROPERTY = 10
    UNIT = 11
    VALUE = 12
    ENUM = 13
    KEYWORD = 14
    SNIPPET = 15
    COLOR = 16
    FILE = 17
    REFERENCE = 18
    FOLDER = 19
    ENUM_MEMBER = 20
    CONSTANT = 21
    STRUCT = 22
    EVENT = 23
    OPERATOR = 24
    TYPE_PARAMETER = 25


class InsertTextFormat(_LspEnum):
    PLAIN_TEXT = 1
    SNIPPET = 2


class DocumentHighlightKind(_LspEnum):
    TEXT = 1
    READ = 2
    WRITE = 3


class SymbolKind(_LspEnum):
    FILE = 1
    MODULE = 2
    NAMESPACE = 3
    PACKAGE = 4
    CLASS = 5
    METHOD = 6
    PROPERTY = 7
    FIELD = 8
    CONSTRUCTOR = 9
    ENUM = 10
    INTERFACE = 11
    FUNCTION = 12
    VARIABLE = 13
    CONSTANT = 14
    STRING = 15
    NUMBER = 16
    BOOLEAN = 17
    ARRAY = 18
    OBJECT = 19
    KEY = 20
    NULL = 21
    ENUM_MEMBER = 22
    STRUCT = 23
    EVENT = 24
    OPERATOR = 25
    TYPE_PARAMETER = 26


class TextDocumentSaveReason(_LspEnum):
    MANUAL = 1
    AFTER_DELAY = 2
    FOCUS_OUT = 3


_NAMES: dict[type, dict[int, str]] = {
    TextDocumentSyncKind: {0: "None", 1: "Full", 2: "Incremental"},
    MessageType: {1: "Error", 2: "Warning", 3: "Info", 4: "Log"},
    FileChangeType: {1: "Created", 2: "Changed", 3: "Deleted"},
    WatchKind: {1: "WatchCreate", 2: "WatchChange", 4: "WatchDelete"},
    CompletionTriggerKind: {
        1: "Invoked",
        2: "TriggerCharacter",
        3: "TriggerForIncompleteCompletions",
    },
    DiagnosticSeverity: {1: "Error", 2: "Warning", 3: "Information", 4: "Hint"},
    DiagnosticTag: {1: "Unnecessary"},
    CompletionItemKind: dict(
        enumerate(
            [
                "text", "method", "func", "constructor", "field", "var", "type",
                "interface", "package", "property", "unit", "value", "enum",
                "keyword", "snippet", "color", "file", "reference", "folder",
                "enumMember", "const", "struct", "event", "operator", "typeParam",
            ],
            start=1,
        )
    ),
    InsertTextFormat: {1: "PlainText", 2: "Snippet"},
    DocumentHighlightKind: {1: "Text", 2: "Read", 3: "Write"},
    SymbolKind: dict(
        enumerate(
            [
                "File", "Module", "Namespace", "Package", "Class", "Method",
                "Property", "Field", "Constructor", "Enum", "Interface",
                "Function", "Variable", "Constant", "String", "Number",
                "Boolean", "Array", "Object", "Key", "Null", "EnumMember",
                "Struct", "Event", "Operator", "TypeParameter",
            ],
            start=1,
        )
    ),
    TextDocumentSaveReason: {1: "Manual", 2: "AfterDelay", 3: "FocusOut"},
}


def format_enum(enum_type: type, value: int) -> str:
    """Return the display name of an enumeration value, or Type(value) if unknown."""
    name = _NAMES.get(enum_type, {}).get(int(value), "")
    if name:
        return name
    return f"{enum_type.__name__}({int(value)})"


def _cmp(a, b) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


def compare_position(a: Position, b: Position) -> int:
    """Return -1, 0 or 1 as a is before, equal to or after b."""
    if a.line != b.line:
        return _cmp(a.line, b.line)
    return _cmp(a.character, b.character)


def compare_range(a: Range, b: Range) -> int:
    """Order ranges by start, then by end."""
    result = compare_position(a.start, b.start)
    if result != 0:
        return result
    return compare_position(a.end, b.end)


def compare_location(x: Location, y: Location) -> int:
    """Order locations lexicographically by (uri, range)."""
    if x.uri != y.uri:
        return _cmp(x.uri, y.uri)
    return compare_range(x.range, y.range)


def intersect(x: Range, y: Range) -> bool:
    """Report whether two ranges intersect; empty ranges may touch at the edges."""
    r1 = compare_position(x.start, y.end)
    r2 = compare_position(y.start, x.end)
    if r1 < 0 and r2 < 0:
        return True
    return (x.empty() or y.empty()) and r1 <= 0 and r2 <= 0


def utf16_len(data: bytes | str) -> int:
    """Return the number of UTF-16 code units needed for the given text."""
    if isinstance(data, (bytes, bytearray)):
        text = bytes(data).decode("utf-8", errors="surrogateescape")
    else:
        text = data
    return sum(2 if ord(ch) >= 0x10000 else 1 for ch in text)