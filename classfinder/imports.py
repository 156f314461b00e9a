"""Build the per-file alias table from top-level ``use`` imports."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Sequence

from .cursor import (
    closes_block,
    collect_name,
    opens_block,
    skip_statement,
    skip_trivia,
)
from .names import SEPARATOR, basename
from .tokens import Token, TokenKind

ImportTable = Mapping[str, str]

_NON_CLASS_IMPORTS = {TokenKind.FUNCTION, TokenKind.CONST}


def build_import_table(tokens: Sequence[Token]) -> ImportTable:
    """Map each imported alias to the fully-qualified name it stands for.

    Only imports at the top level of the file (or directly inside a
    braced ``namespace Foo { ... }`` block) are honoured, so closure
    ``use (...)`` clauses and trait usage are never mistaken for imports.
    ``use function`` and ``use const`` imports are ignored.
    """
    imports: dict[str, str] = {}
    depth = 0
    top_depth = 0
    index = 0
    count = len(tokens)

    while index < count:
        token = tokens[index]

        if opens_block(token):
            depth += 1
            index += 1
            continue

        if closes_block(token):
            depth = max(0, depth - 1)
            top_depth = min(top_depth, depth)
            index += 1
            continue

        if depth == 0 and token.kind is TokenKind.NAMESPACE:
            index = _enter_namespace(tokens, index + 1)
            if index > 0 and opens_block(tokens[index - 1]):
                depth = top_depth = 1
            continue

        if depth == top_depth and token.kind is TokenKind.USE:
            index = _parse_use(tokens, index + 1, imports)
            continue

        index += 1

    return MappingProxyType(imports)


def _enter_namespace(tokens: Sequence[Token], index: int) -> int:
    index = skip_trivia(tokens, index)
    if index < len(tokens) and tokens[index].kind is TokenKind.SEPARATOR:
        # namespace\foo() is a relative name, not a declaration
        return index
    _, index = collect_name(tokens, index)
    if index < len(tokens) and (tokens[index].is_symbol(";") or opens_block(tokens[index])):
        return index + 1
    return index


def _parse_use(tokens: Sequence[Token], index: int, imports: dict[str, str]) -> int:
    count = len(tokens)
    index = skip_trivia(tokens, index)
    if index >= count:
        return index

    if tokens[index].kind in _NON_CLASS_IMPORTS:
        return skip_statement(tokens, index)

    while index < count:
        base, index = collect_name(tokens, index)
        if base is None:
            # A group without a prefix, or something that is not an import.
            return skip_statement(tokens, index)

        index = skip_trivia(tokens, index)
        if index < count and opens_block(tokens[index]):
            index = _parse_group(tokens, index + 1, base.strip(SEPARATOR), imports)
            return skip_statement(tokens, index)

        alias, index = _parse_alias(tokens, index)
        fqcn = base.strip(SEPARATOR)
        if fqcn:
            imports[alias or basename(fqcn)] = fqcn

        index = skip_trivia(tokens, index)
        if index < count and tokens[index].is_symbol(","):
            index += 1
            continue
        break

    return skip_statement(tokens, index)


def _parse_group(tokens: Sequence[Token], index: int, base: str, imports: dict[str, str]) -> int:
    count = len(tokens)
    while index < count:
        index = skip_trivia(tokens, index)
        if index >= count:
            break
        token = tokens[index]

        if closes_block(token):
            return index + 1
        if token.is_symbol(","):
            index += 1
            continue
        if token.kind in _NON_CLASS_IMPORTS:
            index = _skip_group_member(tokens, index)
            continue

        member, next_index = collect_name(tokens, index)
        if member is None:
            if token.is_symbol(";"):
                return index
            index += 1
            continue

        alias, index = _parse_alias(tokens, next_index)
        member = member.strip(SEPARATOR)
        if member:
            fqcn = f"{base}{SEPARATOR}{member}" if base else member
            imports[alias or basename(member)] = fqcn

    return index


def _parse_alias(tokens: Sequence[Token], index: int) -> tuple[str | None, int]:
    index = skip_trivia(tokens, index)
    if index >= len(tokens) or tokens[index].kind is not TokenKind.AS:
        return None, index
    index = skip_trivia(tokens, index + 1)
    if index < len(tokens) and tokens[index].kind is TokenKind.NAME:
        return tokens[index].text, index + 1
    return None, index


def _skip_group_member(tokens: Sequence[Token], index: int) -> int:
    while index < len(tokens):
        token = tokens[index]
        if token.is_symbol(",") or closes_block(token) or token.is_symbol(";"):
            return index
        index += 1
    return index
