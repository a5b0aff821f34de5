import pytest

from rockide.protocol import Position, Range
from rockide.textdocument import (
    ContentChange,
    TextDocument,
    TextDocumentStore,
    compute_line_offsets,
    is_eol,
    read_file,
)
from rockide.uri import uri_from_path

URI = "file:///doc.json"


def test_is_eol():
    assert is_eol("\n") and is_eol("\r") and is_eol(10) and is_eol(13)
    assert not is_eol("a")
    assert not is_eol(32)


def test_compute_line_offsets_mixed_breaks():
    assert compute_line_offsets("a\nb\r\nc\rd") == [0, 2, 5, 7]


def test_compute_line_offsets_empty():
    assert compute_line_offsets("", True, 0) == [0]
    assert compute_line_offsets("", False, 0) == []


def test_compute_line_offsets_follow_line_breaks():
    text = "ab\ncd\r\nef\rg"
    data = text.encode()
    offsets = compute_line_offsets(text, False, 0)
    assert all(is_eol(data[o - 1]) for o in offsets)
    shifted = compute_line_offsets(text, False, 100)
    assert shifted == [o + 100 for o in offsets]


def test_offset_position_round_trip():
    text = "ab\ncd\r\nef"
    doc = TextDocument(URI, text)
    for offset in range(len(text) + 1):
        if offset > 0 and text[offset - 1] == "\r":
            continue
        assert doc.offset_at(doc.position_at(offset)) == offset


def test_position_at_clamps_to_length():
    text = "ab\ncd"
    doc = TextDocument(URI, text)
    assert doc.position_at(1000) == doc.position_at(len(text))
    assert doc.position_at(len(text)).line == 1


def test_position_at_inside_crlf_moves_before_eol():
    text = "ab\r\ncd"
    doc = TextDocument(URI, text)
    assert doc.position_at(text.index("\n")) == Position(0, text.index("\r"))


def test_offset_at_beyond_last_line():
    text = "ab\ncd"
    doc = TextDocument(URI, text)
    assert doc.offset_at(Position(5, 0)) == len(text)


def test_offset_at_clamps_to_line_end():
    text = "ab\ncd"
    doc = TextDocument(URI, text)
    assert doc.offset_at(Position(0, 99)) == text.index("\n")


def test_offset_at_rejects_negative_line():
    with pytest.raises(ValueError):
        TextDocument(URI, "x").offset_at(Position(-1, 0))


def test_offsets_are_bytes():
    text = "é\nx"
    doc = TextDocument(URI, text)
    assert doc.offset_at(Position(1, 0)) == len("é\n".encode())


def test_create_virtual_document():
    doc = TextDocument(URI, "abc\ndef")
    virtual = doc.create_virtual_document(Range(Position(0, 1), Position(1, 1)))
    assert virtual.text == " bc\nd  "
    assert virtual.uri == doc.uri


def test_create_virtual_document_no_ranges_keeps_breaks():
    text = "ab\r\ncd\n"
    virtual = TextDocument(URI, text).create_virtual_document()
    assert len(virtual.text) == len(text)
    assert [c for c in virtual.text if c in "\r\n"] == [c for c in text if c in "\r\n"]
    assert set(virtual.text) <= {" ", "\r", "\n"}


def test_store_open_get_close():
    store = TextDocumentStore()
    store.open(URI, "hello")
    assert store.get(URI).text == "hello"
    store.close(URI)
    assert store.get(URI) is None


def test_sync_incremental():
    store = TextDocumentStore()
    store.open(URI, "hello world")
    store.sync_incremental(URI, [ContentChange(Range(Position(0, 6), Position(0, 11)), "there")])
    assert store.get(URI).text == "hello there"


def test_sync_incremental_updates_lines():
    store = TextDocumentStore()
    store.open(URI, "ab")
    store.sync_incremental(URI, [ContentChange(Range(Position(0, 1), Position(0, 1)), "\n")])
    doc = store.get(URI)
    assert doc.text == "a\nb"
    assert doc.position_at(len(doc.text)) == Position(1, 1)


def test_sync_incremental_missing_document_is_ignored():
    store = TextDocumentStore()
    store.sync_incremental(URI, [ContentChange(Range(), "x")])
    assert store.get(URI) is None


def test_sync_full():
    store = TextDocumentStore()
    store.open(URI, "old")
    store.sync_full(URI, None)
    assert store.get(URI).text == "old"
    store.sync_full(URI, "new\ntext")
    assert store.get(URI).text == "new\ntext"
    assert store.get(URI).offset_at(Position(1, 0)) == len("new\n")


def test_get_or_read_file(tmp_path):
    target = tmp_path / "entity.json"
    target.write_text("{}\n")
    uri = uri_from_path(str(target))
    store = TextDocumentStore()
    assert store.get_or_read_file(uri).text == "{}\n"
    store.open(uri, "open")
    assert store.get_or_read_file(uri).text == "open"


def test_read_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(uri_from_path(str(tmp_path / "missing.json")))