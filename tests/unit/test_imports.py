import pytest

from sqlcmock.errors import ImportPathError
from sqlcmock.extractors.go.imports import collect_imports, unquote
from sqlcmock.model import Import


def test_collects_single_grouped_and_aliased_imports(parse_go) -> None:
    root = parse_go(
        """package db

import "context"

import (
	"database/sql"
	pg "github.com/jackc/pgx/v5/pgtype"
	_ "embed"
	. "strings"
	`time`
)
"""
    )

    assert collect_imports(root) == (
        Import("context"),
        Import("database/sql"),
        Import("github.com/jackc/pgx/v5/pgtype", "pg"),
        Import("embed", "_"),
        Import("strings", "."),
        Import("time"),
    )


def test_no_imports(parse_go) -> None:
    assert collect_imports(parse_go("package db\n")) == ()


def test_malformed_import_path_is_fatal(parse_go) -> None:
    root = parse_go('package db\n\nimport "bad\\qpath"\n')

    with pytest.raises(ImportPathError, match="malformed import path"):
        collect_imports(root)


@pytest.mark.parametrize(
    ("literal", "expected"),
    [
        ('"plain/path"', "plain/path"),
        ('"tab\\there"', "tab\there"),
        ('"quote\\"d"', 'quote"d'),
        ('"\\x41\\102"', "AB"),
        ('"\\u00e9\\U0001F600"', "é\U0001F600"),
        ('"\\xc3\\xa9"', "é"),
        ("`raw\\n`", "raw\\n"),
        ("`a\r\nb`", "a\nb"),
    ],
)
def test_unquote(literal: str, expected: str) -> None:
    assert unquote(literal) == expected


@pytest.mark.parametrize(
    "literal",
    ['"', '"open', '"bad\\q"', '"\\\'"', '"\\400"', '"\\uD800"', '"a"b"', "'c'", "`a`b`"],
)
def test_unquote_rejects_invalid_literals(literal: str) -> None:
    with pytest.raises(ValueError):
        unquote(literal)
