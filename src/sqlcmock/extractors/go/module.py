"""Locate the enclosing Go module and derive the input package's import path."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from sqlcmock.errors import ModuleFileError

logger = logging.getLogger(__name__)

GO_MOD = "go.mod"

# module example.com/app        module "example.com/app"        module (
_MODULE_LINE = re.compile(r'^module(?:\s*(\()|\s+(?:"([^"]*)"|`([^`]*)`|(\S+)))')
_QUOTED_OR_BARE = re.compile(r'^(?:"([^"]*)"|`([^`]*)`|(\S+))')


def find_module_root(directory: Path) -> Path | None:
    """Walk up from *directory* until one contains a go.mod file.

    Returns None when the filesystem root is reached without finding one.
    """
    current = directory
    while True:
        if (current / GO_MOD).is_file():
            return current
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _strip_comment(line: str) -> str:
    # Module paths never contain "//".
    return line.split("//", 1)[0].strip()


def parse_module_path(content: str) -> str | None:
    """Return the module path declared in go.mod *content*, if any."""
    lines = [_strip_comment(line) for line in content.splitlines()]
    for i, line in enumerate(lines):
        m = _MODULE_LINE.match(line)
        if not m:
            continue
        block, quoted, raw, bare = m.groups()
        if block:
            # module (
            #     example.com/app
            # )
            for inner in lines[i + 1 :]:
                if inner == ")":
                    break
                if inner:
                    im = _QUOTED_OR_BARE.match(inner)
                    return next(g for g in im.groups() if g is not None)
            return None
        path = next(g for g in (quoted, raw, bare) if g is not None)
        return path or None
    return None


def read_module_path(go_mod: Path) -> str:
    """Read *go_mod* and return its declared module path."""
    try:
        content = go_mod.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ModuleFileError(f"cannot read {go_mod}: {e}") from e

    path = parse_module_path(content)
    if path is None:
        raise ModuleFileError(f"{go_mod}: no module directive")
    return path


def resolve_model_path(input_file: Path) -> str:
    """Return the fully-qualified import path of the package holding *input_file*."""
    directory = input_file.resolve().parent
    root = find_module_root(directory)
    if root is None:
        raise ModuleFileError(f"no {GO_MOD} found above {directory}")

    module_path = read_module_path(root / GO_MOD)
    relative = directory.relative_to(root).as_posix()
    model_path = module_path if relative == "." else f"{module_path}/{relative}"
    logger.debug("Module root %s, package path %s", root, model_path)
    return model_path
