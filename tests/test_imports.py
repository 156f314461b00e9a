from __future__ import annotations

import pytest

from classfinder.imports import build_import_table
from classfinder.tokens import Token, TokenKind, tokenize_source


def _imports(source: str) -> dict[str, str]:
    return dict(build_import_table(tokenize_source(source)))


def test_simple_and_aliased_imports():
    imports = _imports(
        r"""<?php
namespace App;

use My\ParentNamespace\AltParent as BaseParent;
use \Other\Thing;
use Single;
"""
    )

    assert imports == {
        "BaseParent": "My\\ParentNamespace\\AltParent",
        "Thing": "Other\\Thing",
        "Single": "Single",
    }


def test_grouped_imports():
    imports = _imports(
        r"""<?php
use My\Ns\{A, B as C, Sub\D};
"""
    )

    assert imports == {
        "A": "My\\Ns\\A",
        "C": "My\\Ns\\B",
        "D": "My\\Ns\\Sub\\D",
    }


def test_comma_separated_imports():
    imports = _imports("<?php\nuse First\\One, Second\\Two as Dos;\n")

    assert imports == {"One": "First\\One", "Dos": "Second\\Two"}


def test_function_and_const_imports_are_ignored():
    imports = _imports(
        r"""<?php
use function My\Helpers\format_name;
use const My\Helpers\LIMIT;
use My\Models\User;
"""
    )

    assert imports == {"User": "My\\Models\\User"}


def test_nested_use_clauses_are_not_imports():
    imports = _imports(
        r"""<?php
namespace App;

use My\Traits\Loggable;

class Service
{
    use Loggable;

    public function run($value)
    {
        return function () use ($value) {
            return $value;
        };
    }
}
"""
    )

    assert imports == {"Loggable": "My\\Traits\\Loggable"}


def test_imports_inside_braced_namespace_are_top_level():
    imports = _imports(
        r"""<?php
namespace App {
    use My\Base\Model;

    class User extends Model
    {
        use Helper;
    }
}
"""
    )

    assert imports == {"Model": "My\\Base\\Model"}


def test_import_table_is_read_only():
    table = build_import_table(tokenize_source("<?php\nuse A\\B;\n"))

    with pytest.raises(TypeError):
        table["X"] = "Y"  # type: ignore[index]


def test_truncated_import_does_not_raise():
    tokens = [
        Token(TokenKind.USE, "use"),
        Token(TokenKind.NAME, "My"),
        Token(TokenKind.SEPARATOR, "\\"),
        Token(TokenKind.SYMBOL, "{"),
        Token(TokenKind.NAME, "A"),
        Token(TokenKind.AS, "as"),
    ]

    assert dict(build_import_table(tokens)) == {"A": "My\\A"}
    assert dict(build_import_table([Token(TokenKind.USE, "use")])) == {}


def test_top_level_closure_use_is_not_an_import():
    imports = _imports(
        r"""<?php
use Foo\Bar;

$x = 1;
$f = function () use ($x) {
    return $x;
};
"""
    )

    assert imports == {"Bar": "Foo\\Bar"}
