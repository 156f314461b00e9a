"""Read-only cursor helpers shared by the import and declaration scanners.

Every helper takes the token list and a start index and returns the
index where it stopped. None of them raise on odd input: at worst they
stop at the end of the stream.
"""

from __future__ import annotations

from typing import Sequence

from .tokens import TRIVIA, Token, TokenKind

NAME_KINDS = frozenset({TokenKind.NAME, TokenKind.SEPARATOR})


def opens_block(token: Token) -> bool:
    # "${" opens a brace pair inside interpolated strings.
    return (token.kind is TokenKind.SYMBOL and token.text == "{") or token.text == "${"


def closes_block(token: Token) -> bool:
    return token.is_symbol("}")


def skip_trivia(tokens: Sequence[Token], index: int) -> int:
    while index < len(tokens) and tokens[index].kind in TRIVIA:
        index += 1
    return index


def collect_name(tokens: Sequence[Token], index: int) -> tuple[str | None, int]:
    """Join consecutive name fragments and separators starting at ``index``.

    Trivia between the parts is skipped. Stops at the first other token
    (``,``, ``{``, ``;``, ``)``, a keyword...) without consuming it.
    """
    parts: list[str] = []
    index = skip_trivia(tokens, index)
    while index < len(tokens):
        token = tokens[index]
        if token.kind in NAME_KINDS:
            parts.append(token.text)
            index += 1
            continue
        if token.kind in TRIVIA:
            index += 1
            continue
        break

    if not parts:
        return None, index
    return "".join(parts), index


def skip_balanced(tokens: Sequence[Token], index: int) -> int:
    """Advance from an opening brace to just past its matching close."""
    depth = 0
    while index < len(tokens):
        token = tokens[index]
        if opens_block(token):
            depth += 1
        elif closes_block(token):
            depth -= 1
            if depth <= 0:
                return index + 1
        index += 1
    return index


def skip_statement(tokens: Sequence[Token], index: int) -> int:
    """Advance past the next ``;``; stops before any brace instead."""
    while index < len(tokens):
        token = tokens[index]
        if token.is_symbol(";"):
            return index + 1
        if opens_block(token) or closes_block(token):
            return index
        index += 1
    return index
