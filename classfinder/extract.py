"""Extract class and interface declarations from a PHP token stream.

The scan is a single forward walk. Outside declarations the cursor
looks for ``namespace``, ``class`` and ``interface`` keywords; a
declaration is then read in phases: header (modifiers and name),
inheritance clause (``extends`` / ``implements`` up to the body), and
for classes the body, where top-level ``use`` statements name traits.
Malformed input never raises; the affected declaration is skipped or
reported with whatever was collected.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .cursor import (
    closes_block,
    collect_name,
    opens_block,
    skip_balanced,
    skip_trivia,
)
from .imports import ImportTable, build_import_table
from .models import Declaration
from .names import SEPARATOR, qualify, resolve_name
from .parser import ParsedSource
from .tokens import TRIVIA, Token, TokenKind, tokenize

logger = logging.getLogger(__name__)

DECLARATION_KINDS = {
    TokenKind.CLASS: "class",
    TokenKind.INTERFACE: "interface",
}
HEADER_MODIFIERS = TRIVIA | {TokenKind.FINAL, TokenKind.ABSTRACT}


def extract_declarations(parsed: ParsedSource, path: str | None = None) -> list[Declaration]:
    return scan_declarations(tokenize(parsed), path or "")


def scan_declarations(
    tokens: Sequence[Token],
    path: str,
    imports: ImportTable | None = None,
) -> list[Declaration]:
    if imports is None:
        imports = build_import_table(tokens)

    declarations: list[Declaration] = []
    namespace = ""
    index = 0
    count = len(tokens)

    while index < count:
        token = tokens[index]

        if token.kind is TokenKind.NAMESPACE:
            declared, index = _parse_namespace(tokens, index + 1)
            if declared is not None:
                namespace = declared
            continue

        if token.kind in DECLARATION_KINDS:
            short_name, index = _parse_class_name(tokens, index + 1)
            if short_name is None:
                # anonymous class or ::class constant
                continue

            extends, implements, index, has_body = _parse_inheritance(
                tokens, index, namespace, imports
            )

            traits: list[str] = []
            if token.kind is TokenKind.CLASS and has_body:
                traits, index = _parse_class_body(tokens, index, namespace, imports)

            declarations.append(
                Declaration(
                    name=qualify(short_name, namespace),
                    path=path,
                    namespace=namespace,
                    short_name=short_name,
                    kind=DECLARATION_KINDS[token.kind],
                    extends=extends,
                    implements=tuple(implements),
                    traits=tuple(traits),
                )
            )
            continue

        index += 1

    logger.debug("Found %d declaration(s) in %s", len(declarations), path or "<source>")
    return declarations


def _parse_namespace(tokens: Sequence[Token], index: int) -> tuple[str | None, int]:
    index = skip_trivia(tokens, index)
    if index < len(tokens) and tokens[index].kind is TokenKind.SEPARATOR:
        # namespace\foo() refers to a name relative to the current namespace
        return None, index

    name, index = collect_name(tokens, index)
    if index < len(tokens) and (tokens[index].is_symbol(";") or opens_block(tokens[index])):
        index += 1

    return (name or "").strip(SEPARATOR), index


def _parse_class_name(tokens: Sequence[Token], index: int) -> tuple[str | None, int]:
    while index < len(tokens) and tokens[index].kind in HEADER_MODIFIERS:
        index += 1

    if index >= len(tokens):
        return None, index

    token = tokens[index]
    if token.kind is not TokenKind.NAME or SEPARATOR in token.text:
        return None, index

    return token.text, index + 1


def _parse_inheritance(
    tokens: Sequence[Token],
    index: int,
    namespace: str,
    imports: ImportTable,
) -> tuple[str | None, list[str], int, bool]:
    extends: str | None = None
    implements: list[str] = []
    count = len(tokens)

    while index < count:
        token = tokens[index]

        if opens_block(token):
            return extends, implements, index + 1, True

        if token.is_symbol(";"):
            return extends, implements, index + 1, False

        if token.kind is TokenKind.EXTENDS:
            name, index = collect_name(tokens, index + 1)
            resolved = resolve_name(name, namespace, imports)
            # Interfaces may extend several parents; only the first is kept.
            if resolved is not None and extends is None:
                extends = resolved
            continue

        if token.kind is TokenKind.IMPLEMENTS:
            index += 1
            while index < count:
                current = tokens[index]
                if opens_block(current) or current.is_symbol(";"):
                    break
                if current.is_symbol(",") or current.kind in TRIVIA:
                    index += 1
                    continue

                name, index = collect_name(tokens, index)
                if name is None:
                    break
                resolved = resolve_name(name, namespace, imports)
                if resolved is not None:
                    implements.append(resolved)
            continue

        index += 1

    return extends, implements, index, False


def _parse_class_body(
    tokens: Sequence[Token],
    index: int,
    namespace: str,
    imports: ImportTable,
) -> tuple[list[str], int]:
    """Collect trait names from ``use`` statements at the top of the body.

    ``index`` points just past the opening brace. Returns past the
    matching closing brace.
    """
    traits: list[str] = []
    depth = 1

    while index < len(tokens):
        token = tokens[index]

        if opens_block(token):
            depth += 1
        elif closes_block(token):
            depth -= 1
            if depth == 0:
                return traits, index + 1
        elif depth == 1 and token.kind is TokenKind.USE:
            names, index = _parse_trait_use(tokens, index + 1, namespace, imports)
            traits.extend(names)
            continue

        index += 1

    return traits, index


def _parse_trait_use(
    tokens: Sequence[Token],
    index: int,
    namespace: str,
    imports: ImportTable,
) -> tuple[list[str], int]:
    names: list[str] = []

    while index < len(tokens):
        token = tokens[index]

        if token.kind in TRIVIA or token.is_symbol(","):
            index += 1
            continue

        if token.is_symbol(";"):
            return names, index + 1

        if opens_block(token):
            # adaptation block: { foo as protected; A::bar insteadof B; }
            return names, skip_balanced(tokens, index)

        name, next_index = collect_name(tokens, index)
        if name is None:
            # function, const, } ... the statement ended without a terminator
            return names, index

        resolved = resolve_name(name, namespace, imports)
        if resolved is not None:
            names.append(resolved)
        index = next_index

    return names, index
