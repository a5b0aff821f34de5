"""Encoding of LSP semantic tokens."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Mapping


class TokenType(str, Enum):
    COMMENT = "comment"
    ENUM_MEMBER = "enumMember"
    FUNCTION = "function"
    KEYWORD = "keyword"
    LABEL = "label"
    MACRO = "macro"
    METHOD = "method"
    NAMESPACE = "namespace"
    NUMBER = "number"
    OPERATOR = "operator"
    PARAMETER = "parameter"
    STRING = "string"
    TYPE = "type"
    TYPE_PARAMETER = "typeParameter"
    VARIABLE = "variable"

    def __str__(self) -> str:
        return self.value


class Modifier(str, Enum):
    DEFAULT_LIBRARY = "defaultLibrary"
    DEFINITION = "definition"
    READONLY = "readonly"
    ARRAY = "array"
    BOOL = "bool"
    CHAN = "chan"
    FORMAT = "format"
    INTERFACE = "interface"
    MAP = "map"
    NUMBER = "number"
    POINTER = "pointer"
    SIGNATURE = "signature"
    SLICE = "slice"
    STRING = "string"
    STRUCT = "struct"

    def __str__(self) -> str:
        return self.value


TOKEN_TYPES: list[TokenType] = [
    TokenType.NAMESPACE,
    TokenType.ENUM_MEMBER,
    TokenType.TYPE,
    TokenType.TYPE_PARAMETER,
    TokenType.PARAMETER,
    TokenType.VARIABLE,
    TokenType.FUNCTION,
    TokenType.METHOD,
    TokenType.MACRO,
    TokenType.KEYWORD,
    TokenType.COMMENT,
    TokenType.STRING,
    TokenType.NUMBER,
    TokenType.OPERATOR,
    TokenType.LABEL,
]

TOKEN_MODIFIERS: list[Modifier] = [
    Modifier.DEFINITION,
    Modifier.READONLY,
    Modifier.DEFAULT_LIBRARY,
    Modifier.ARRAY,
    Modifier.BOOL,
    Modifier.CHAN,
    Modifier.FORMAT,
    Modifier.INTERFACE,
    Modifier.MAP,
    Modifier.NUMBER,
    Modifier.POINTER,
    Modifier.SIGNATURE,
    Modifier.SLICE,
    Modifier.STRING,
    Modifier.STRUCT,
]


@dataclass
class Token:
    """The extent and semantics of one token."""

    line: int
    start: int
    length: int
    type: TokenType
    modifiers: tuple[Modifier, ...] = field(default_factory=tuple)


def encode(
    tokens: Iterable[Token],
    encode_type: Mapping[TokenType, bool] | None = None,
    encode_modifier: Mapping[Modifier, bool] | None = None,
) -> list[int]:
    """Return the LSP integer encoding of tokens.

    A type or modifier mapped to False is left out of the output.
    """
    encode_type = encode_type or {}
    encode_modifier = encode_modifier or {}
    ordered = sorted(tokens, key=lambda t: (t.line, t.start))

    type_map = {
        t: i for i, t in enumerate(TOKEN_TYPES) if encode_type.get(t, True)
    }
    mod_map = {
        m: 1 << i
        for i, m in enumerate(TOKEN_MODIFIERS)
        if encode_modifier.get(m, True)
    }

    result: list[int] = []
    last: Token | None = None
    for item in ordered:
        typ = type_map.get(item.type)
        if typ is None:
            continue
        if last is None:
            delta_line = ordered[0].line
            delta_start = item.start
        else:
            delta_line = item.line - last.line
            delta_start = item.start - last.start if delta_line == 0 else item.start
        mask = 0
        for modifier in item.modifiers:
            mask |= mod_map.get(modifier, 0)
        result.extend((delta_line, delta_start, item.length, typ, mask))
        last = item
    return result