"""Tree-sitter language loader helpers."""

from __future__ import annotations


def load_php_language():
    """Return a Tree-sitter Language object for PHP (with HTML/inline text)."""
    from tree_sitter import Language

    try:
        import tree_sitter_php as tsphp
    except Exception as exc:  # pragma: no cover - import guard
        raise RuntimeError("tree_sitter_php is not installed") from exc

    # tree_sitter_php exposes `language_php`, `LANGUAGE_PHP` or a generic `language`.
    if hasattr(tsphp, "language_php"):
        lang = tsphp.language_php
        lang = lang() if callable(lang) else lang
    elif hasattr(tsphp, "LANGUAGE_PHP"):
        lang = tsphp.LANGUAGE_PHP
    elif hasattr(tsphp, "language"):
        lang = tsphp.language
        lang = lang() if callable(lang) else lang
    else:
        raise RuntimeError("Unsupported tree_sitter_php API")

    if isinstance(lang, Language):
        return lang
    return Language(lang)
