"""In-memory text documents with line/offset conversion and a shared store."""

from __future__ import annotations

import re
import threading
from bisect import bisect_right
from dataclasses import dataclass
from pathlib import Path

from rockide.protocol import Position, Range
from rockide.uri import DocumentURI

LINE_FEED = 0x0A
CARRIAGE_RETURN = 0x0D

_LINE_BREAK = re.compile(rb"\r\n|\r|\n")
_EOL_BYTE = re.compile(rb"[\r\n]")


def is_eol(ch: int | str) -> bool:
    """Report whether a character (or byte value) ends a line."""
    if isinstance(ch, str):
        ch = ord(ch)
    return ch in (LINE_FEED, CARRIAGE_RETURN)


def _as_bytes(text: str | bytes) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8", errors="surrogateescape")
    return bytes(text)


def compute_line_offsets(
    text: str | bytes, is_at_line_start: bool = True, text_offset: int = 0
) -> list[int]:
    """Return the byte offsets at which lines begin."""
    result = [text_offset] if is_at_line_start else []
    result.extend(text_offset + m.end() for m in _LINE_BREAK.finditer(_as_bytes(text)))
    return result


@dataclass(frozen=True)
class ContentChange:
    """An incremental edit: replace range with text."""

    range: Range
    text: str


class TextDocument:
    """A document whose positions are measured in UTF-8 bytes."""

    def __init__(self, uri: DocumentURI | str, text: str | bytes = "") -> None:
        self.uri = DocumentURI(uri)
        self._content = _as_bytes(text)
        self._line_offsets: list[int] | None = None

    def __repr__(self) -> str:
        return f"TextDocument(uri={str(self.uri)!r}, text={self.text!r})"

    @property
    def text(self) -> str:
        """The document content."""
        return self._content.decode("utf-8", errors="surrogateescape")

    def _set_content(self, content: bytes) -> None:
        self._content = content
        self._line_offsets = None

    def _get_line_offsets(self) -> list[int]:
        if self._line_offsets is None:
            self._line_offsets = compute_line_offsets(self._content, True, 0)
        return self._line_offsets

    def _ensure_before_eol(self, offset: int, line_offset: int) -> int:
        while offset > line_offset and is_eol(self._content[offset - 1]):
            offset -= 1
        return offset

    def position_at(self, offset: int) -> Position:
        """Convert a byte offset into a line/character position."""
        offset = min(max(offset, 0), len(self._content))
        line_offsets = self._get_line_offsets()
        if not line_offsets:
            return Position(character=offset)
        line = max(bisect_right(line_offsets, offset) - 1, 0)
        offset = self._ensure_before_eol(offset, line_offsets[line])
        return Position(line=line, character=offset - line_offsets[line])

    def offset_at(self, position: Position) -> int:
        """Convert a line/character position into a byte offset."""
        if position.line < 0:
            raise ValueError(f"negative line in position {position}")
        line_offsets = self._get_line_offsets()
        max_line = len(line_offsets)
        content_length = len(self._content)
        if position.line >= max_line:
            return content_length
        line_offset = line_offsets[position.line]
        if position.character <= 0:
            return line_offset
        if position.line + 1 < max_line:
            next_line_offset = line_offsets[position.line + 1]
        else:
            next_line_offset = content_length
        offset = min(line_offset + position.character, next_line_offset)
        return self._ensure_before_eol(offset, line_offset)

    def create_virtual_document(self, *args: Range) -> TextDocument:
        """Return a copy that keeps only the given ranges and line breaks.

        Everything else is blanked with spaces, so offsets stay the same.
        """
        content = self._content
        result = bytearray(b" " * len(content))
        for rng in args:
            start, end = self.offset_at(rng.start), self.offset_at(rng.end)
            if end > start:
                result[start:end] = content[start:end]
        for match in _EOL_BYTE.finditer(content):
            result[match.start()] = content[match.start()]
        return TextDocument(self.uri, bytes(result))


def read_file(uri: DocumentURI | str) -> TextDocument:
    """Load the document at uri from disk."""
    uri = DocumentURI(uri)
    return TextDocument(uri, Path(uri.path()).read_bytes())


class TextDocumentStore:
    """Thread-safe registry of the documents the editor has open."""

    def __init__(self) -> None:
        self._documents: dict[str, TextDocument] = {}
        self._lock = threading.RLock()

    def __contains__(self, uri: object) -> bool:
        with self._lock:
            return uri in self._documents

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)

    def get(self, uri: DocumentURI | str) -> TextDocument | None:
        """Return the open document for uri, if any."""
        with self._lock:
            return self._documents.get(uri)

    def open(self, uri: DocumentURI | str, text: str) -> None:
        """Register a document with its full text."""
        with self._lock:
            self._documents[uri] = TextDocument(uri, text)

    def close(self, uri: DocumentURI | str) -> None:
        """Forget a document."""
        with self._lock:
            self._documents.pop(uri, None)

    def sync_incremental(self, uri: DocumentURI | str, changes) -> None:
        """Apply incremental edits in order to an open document."""
        changes = list(changes)
        if not changes:
            return
        with self._lock:
            document = self._documents.get(uri)
            if document is None:
                return
            for change in changes:
                start = document.offset_at(change.range.start)
                end = document.offset_at(change.range.end)
                content = document._content
                document._set_content(content[:start] + _as_bytes(change.text) + content[end:])

    def sync_full(self, uri: DocumentURI | str, text: str | None) -> None:
        """Replace the full text of an open document."""
        if text is None:
            return
        with self._lock:
            document = self._documents.get(uri)
            if document is None:
                return
            content = _as_bytes(text)
            if document._content != content:
                document._set_content(content)

    def get_or_read_file(self, uri: DocumentURI | str) -> TextDocument:
        """Return the open document, or read it from disk."""
        document = self.get(uri)
        if document is not None:
            return document
        return read_file(uri)