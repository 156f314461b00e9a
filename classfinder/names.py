"""Qualified-name resolution for PHP class references."""

from __future__ import annotations

from typing import Mapping

SEPARATOR = "\\"


def normalize_name(name: str) -> str:
    """Canonical comparison form: no leading separator, lowercased."""
    return name.lstrip(SEPARATOR).lower()


def basename(name: str) -> str:
    return name.rstrip(SEPARATOR).rsplit(SEPARATOR, 1)[-1]


def qualify(name: str, namespace: str) -> str:
    if not namespace:
        return name
    return f"{namespace}{SEPARATOR}{name}"


def resolve_name(
    raw_name: str | None,
    namespace: str,
    imports: Mapping[str, str] | None = None,
) -> str | None:
    """Resolve a name as written in source to its fully-qualified form.

    ``imports`` maps aliases to fully-qualified names. Without it the
    name is only prefixed with the current namespace. Returns ``None``
    when there is no name to resolve.
    """
    if raw_name is None:
        return None
    trimmed = raw_name.lstrip(SEPARATOR)
    if not trimmed:
        return None

    if raw_name.startswith(SEPARATOR):
        return trimmed

    imports = imports or {}

    if SEPARATOR not in trimmed:
        if trimmed in imports:
            return imports[trimmed].lstrip(SEPARATOR)
        return qualify(trimmed, namespace)

    first, remainder = trimmed.split(SEPARATOR, 1)
    if first in imports:
        base = imports[first].strip(SEPARATOR)
        return f"{base}{SEPARATOR}{remainder}"

    return qualify(trimmed, namespace)
