# rockide

Building blocks for a language server for Minecraft Bedrock add-ons
(behavior packs and resource packs). Pure Python, no dependencies.

## Modules

- `rockide.protocol`: frozen dataclasses `Position`, `Range` and `Location`
  (`Range.empty()`, `Location.empty()`), with `compare_position`,
  `compare_range`, `compare_location` (each returning -1, 0 or 1),
  `intersect`, which treats an empty range touching another range as
  intersecting it, and `utf16_len`, which counts UTF-16 code units in text or
  UTF-8 bytes. It also defines the protocol enumerations
  (`TextDocumentSyncKind`, `MessageType`, `FileChangeType`, `WatchKind`,
  `CompletionTriggerKind`, `DiagnosticSeverity`, `DiagnosticTag`,
  `CompletionItemKind`, `InsertTextFormat`, `DocumentHighlightKind`,
  `SymbolKind`, `TextDocumentSaveReason`). `format_enum(enum_type, value)`
  gives the display name of a value, or `TypeName(value)` for an unknown one.
  `str()` of an enumeration member uses the same name.
- `rockide.semtok`: `Token`, `TokenType`, `Modifier`, the `TOKEN_TYPES` and
  `TOKEN_MODIFIERS` legends, and `encode(tokens, encode_type,
  encode_modifier)`. `encode` sorts tokens by position and returns the
  protocol's delta-encoded integer stream. Types or modifiers mapped to
  `False` are left out.
- `rockide.uri`: `DocumentURI` (a `str` subclass with `path()`, `dir()`,
  `dir_path()` and `encloses()`), `parse_document_uri`, which canonicalises
  client URIs (two-slash forms, over-escaping, lower-case drive letters),
  `uri_from_path`, `clean_uri` and `in_dir` for lexical path containment.
  Invalid input raises `URIError`, a `ValueError`.
- `rockide.textdocument`: `TextDocument`, whose positions count UTF-8 bytes.
  It has `position_at`, `offset_at` and `create_virtual_document(*ranges)`.
  The virtual document keeps only the given ranges and line breaks and
  blanks the rest with spaces. `TextDocumentStore` is a thread-safe registry
  of open documents with `open`, `get`, `close`, `sync_full`,
  `sync_incremental` (applying `ContentChange` edits) and
  `get_or_read_file`. It also provides `read_file`, `is_eol` and
  `compute_line_offsets`.
- `rockide.shared`: `Project` (behavior and resource pack directories), the
  current project (`get_project`, `set_project`) and `getwd`. It defines
  `Pattern`, a glob tagged with its pack. Build one with `behavior_pattern`
  or `resource_pattern` and resolve it with `Pattern.resolve()`. Resolving
  raises `RuntimeError` when no project is set. The module also holds
  constants for every pack file type (`ENTITY_GLOB`, `TEXTURE_GLOB`, …),
  `FILTER_PATHS`, `PROPERTY_TESTS`, and the helpers `flat_map` and `find`.
- `rockide.workspace`: `find_project_paths(options)`. It takes the packs from
  a `{"behaviorPack": ..., "resourcePack": ...}` dictionary. Otherwise it
  searches `packs/`, or the current directory, for folders such as
  `behavior_pack`, `*BP`, `resource_pack` and `*RP`. It raises
  `ProjectNotFoundError` when it cannot find them.
- `rockide.vanilla_world`: frozensets of base-game identifiers:
  `ATMOSPHERIC`, `BIOME_ID`, `BIOME_TAG`, `CAMERA_ID`, `COLOR_GRADING`,
  `FOG`.

## Installation

```
pip install .
```

## Example

```python
from rockide.protocol import Position
from rockide.textdocument import TextDocumentStore
from rockide.uri import uri_from_path

store = TextDocumentStore()
uri = uri_from_path("BP/entities/pig.json")
store.open(uri, '{\n  "format_version": "1.20.0"\n}')

doc = store.get(uri)
offset = doc.offset_at(Position(line=1, character=2))
assert doc.position_at(offset) == Position(line=1, character=2)
```

## What it does not do

This is a library, not a running language server. It has no command, does
not speak JSON-RPC over stdio, and has no request handlers for completion,
hover, rename or definitions. It does not index symbols or file paths across
a workspace. Its vanilla data covers world identifiers only: no block
states, block tags, entity families, geometries or client animations.

## Running the tests

```
pip install .[test]
pytest
```