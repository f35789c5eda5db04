"""Run options and the optional ``.sqlcmock.toml`` project defaults."""

from __future__ import annotations

import dataclasses
import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

from sqlcmock.errors import ConfigError
from sqlcmock.extractors.go.module import find_module_root

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".sqlcmock.toml"


@dataclass
class Opts:
    """Options for a single generation run.

    ``None`` for *template_file*, *output_package* and *format* means "not
    given on the command line", so project defaults may still fill them in.
    """

    input_file: Path
    output_file: Path | None = None
    template_file: Path | None = None
    output_package: str | None = None
    format: bool | None = None

    @property
    def should_format(self) -> bool:
        return True if self.format is None else self.format


def find_defaults_file(input_file: Path) -> Path | None:
    """Return the defaults file next to *input_file* or at its module root."""
    directory = input_file.resolve().parent
    candidates = [directory]
    root = find_module_root(directory)
    if root is not None and root != directory:
        candidates.append(root)
    for candidate in candidates:
        path = candidate / CONFIG_FILENAME
        if path.is_file():
            return path
    return None


def read_defaults(path: Path) -> dict:
    """Read the ``[sqlcmock]`` table from *path*."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"cannot read {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid TOML in {path}: {e}") from e

    table = data.get("sqlcmock", {})
    if not isinstance(table, dict):
        raise ConfigError(f"{path}: [sqlcmock] must be a table")

    expected = {"template": str, "package": str, "format": bool}
    for key, value in table.items():
        kind = expected.get(key)
        if kind is None:
            logger.warning("%s: ignoring unknown key %r", path, key)
        elif not isinstance(value, kind):
            raise ConfigError(
                f"{path}: {key!r} must be a {kind.__name__}, got {value!r}"
            )
    return table


def with_project_defaults(opts: Opts) -> Opts:
    """Return *opts* with unset fields filled from the project defaults file."""
    path = find_defaults_file(opts.input_file)
    if path is None:
        return opts

    logger.debug("Using defaults from %s", path)
    table = read_defaults(path)
    changes: dict = {}
    if opts.template_file is None and table.get("template"):
        changes["template_file"] = path.parent / table["template"]
    if opts.output_package is None and table.get("package"):
        changes["output_package"] = table["package"]
    if opts.format is None and "format" in table:
        changes["format"] = table["format"]
    return dataclasses.replace(opts, **changes)
