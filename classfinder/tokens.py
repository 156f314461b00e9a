"""Flat lexical token stream derived from a Tree-sitter PHP syntax tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from .parser import ParsedSource, PhpParser


class TokenKind(Enum):
    # Keywords consulted by the scanner
    NAMESPACE = auto()
    CLASS = auto()
    INTERFACE = auto()
    USE = auto()  # imports at file level, trait usage inside a class body
    EXTENDS = auto()
    IMPLEMENTS = auto()
    AS = auto()
    FINAL = auto()
    ABSTRACT = auto()
    FUNCTION = auto()
    CONST = auto()

    # Names
    NAME = auto()  # bare identifier fragment
    SEPARATOR = auto()  # \

    # Trivia
    WHITESPACE = auto()
    COMMENT = auto()

    SYMBOL = auto()  # single punctuation character: { } ; , ( )
    OTHER = auto()


TRIVIA = frozenset({TokenKind.WHITESPACE, TokenKind.COMMENT})

KEYWORDS = {
    "namespace": TokenKind.NAMESPACE,
    "class": TokenKind.CLASS,
    "interface": TokenKind.INTERFACE,
    "use": TokenKind.USE,
    "extends": TokenKind.EXTENDS,
    "implements": TokenKind.IMPLEMENTS,
    "as": TokenKind.AS,
    "final": TokenKind.FINAL,
    "abstract": TokenKind.ABSTRACT,
    "function": TokenKind.FUNCTION,
    "const": TokenKind.CONST,
}


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    text: str
    line: int = 0

    def is_symbol(self, char: str) -> bool:
        return self.kind is TokenKind.SYMBOL and self.text == char


def classify(node_type: str, text: str, named: bool = False) -> TokenKind:
    """Map a Tree-sitter leaf (type + source text) onto a TokenKind."""
    lowered = node_type.lower()
    if lowered in KEYWORDS and text.lower() == lowered:
        return KEYWORDS[lowered]
    if node_type == "name":
        return TokenKind.NAME
    if node_type == "\\":
        return TokenKind.SEPARATOR
    if node_type == "comment":
        return TokenKind.COMMENT
    if not text.strip():
        return TokenKind.WHITESPACE
    if not named and len(text) == 1 and not text.isalnum():
        return TokenKind.SYMBOL
    return TokenKind.OTHER


def tokenize(parsed: ParsedSource) -> list[Token]:
    source_bytes = parsed.source_bytes
    tokens: list[Token] = []

    for node in _iter_leaves(parsed.tree.root_node):
        # Error recovery inserts zero-width MISSING leaves; they carry no text.
        if node.is_missing or node.end_byte <= node.start_byte:
            continue
        text = source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="replace")
        tokens.append(
            Token(
                kind=classify(node.type, text, named=node.is_named),
                text=text,
                line=node.start_point[0] + 1,
            )
        )

    return tokens


def tokenize_source(source_text: str, parser: PhpParser | None = None) -> list[Token]:
    parser = parser or PhpParser()
    return tokenize(parser.parse_text(source_text))


def _iter_leaves(root) -> Iterator:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.child_count == 0:
            yield node
            continue
        stack.extend(reversed(node.children))
