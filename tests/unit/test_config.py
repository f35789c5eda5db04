from pathlib import Path

import pytest

from sqlcmock.config import Opts, find_defaults_file, read_defaults, with_project_defaults
from sqlcmock.errors import ConfigError


def test_no_defaults_file_leaves_opts_alone(go_module) -> None:
    source = go_module("db/querier.go", "package db\n")
    opts = Opts(input_file=source)

    assert with_project_defaults(opts) is opts
    assert opts.should_format is True


def test_defaults_from_module_root(go_module) -> None:
    source = go_module("db/querier.go", "package db\n")
    go_module(
        ".sqlcmock.toml",
        '[sqlcmock]\ntemplate = "tmpl/mock.tmpl"\npackage = "dbmock"\nformat = false\n',
    )

    opts = with_project_defaults(Opts(input_file=source))

    assert opts.template_file == go_module.root / "tmpl" / "mock.tmpl"
    assert opts.output_package == "dbmock"
    assert opts.should_format is False


def test_explicit_options_win(go_module) -> None:
    source = go_module("db/querier.go", "package db\n")
    go_module(".sqlcmock.toml", '[sqlcmock]\npackage = "dbmock"\nformat = false\n')

    opts = with_project_defaults(Opts(input_file=source, output_package="other", format=True))

    assert opts.output_package == "other"
    assert opts.format is True


def test_file_next_to_input_is_preferred(go_module) -> None:
    source = go_module("db/querier.go", "package db\n")
    go_module(".sqlcmock.toml", "[sqlcmock]\n")
    local = go_module("db/.sqlcmock.toml", "[sqlcmock]\n")

    assert find_defaults_file(source) == local


def test_invalid_toml(tmp_path: Path) -> None:
    path = tmp_path / ".sqlcmock.toml"
    path.write_text("[sqlcmock\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid TOML"):
        read_defaults(path)


def test_wrong_value_type(tmp_path: Path) -> None:
    path = tmp_path / ".sqlcmock.toml"
    path.write_text('[sqlcmock]\nformat = "yes"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="'format' must be a bool"):
        read_defaults(path)
