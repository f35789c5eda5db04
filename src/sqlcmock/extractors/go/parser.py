"""Parse Go source via tree-sitter."""

from __future__ import annotations

import logging
from pathlib import Path

from sqlcmock.errors import SourceParseError

logger = logging.getLogger(__name__)


def make_parser():
    """Return a tree-sitter parser configured for Go."""
    try:
        import tree_sitter_go as tsgo
        from tree_sitter import Language, Parser
    except ImportError as e:
        raise SourceParseError(
            "tree-sitter / tree-sitter-go not installed. "
            "Install with: pip install sqlcmock"
        ) from e

    return Parser(Language(tsgo.language()))


def _first_error(node):
    """Return the first ERROR or missing node under *node*, depth-first."""
    if node.type == "ERROR" or node.is_missing:
        return node
    if not node.has_error:
        return None
    for child in node.children:
        found = _first_error(child)
        if found is not None:
            return found
    return node


def parse_source(source: bytes, path: Path | str = "<source>", parser=None):
    """Parse *source* and return the tree, rejecting files with syntax errors."""
    parser = parser or make_parser()
    tree = parser.parse(source)
    if tree.root_node.has_error:
        bad = _first_error(tree.root_node)
        line, column = bad.start_point
        raise SourceParseError(f"{path}:{line + 1}:{column + 1}: syntax error")
    return tree


def read_source(path: Path) -> bytes:
    """Read the Go file at *path*."""
    try:
        return path.read_bytes()
    except OSError as e:
        raise SourceParseError(f"cannot read {path}: {e}") from e
