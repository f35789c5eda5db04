"""Go extractors: shared helpers."""

from __future__ import annotations


def node_text(node) -> str:
    """Return the source text covered by a tree-sitter *node*."""
    return node.text.decode("utf-8")


def node_line(node) -> int:
    """Return the 1-indexed line on which *node* starts."""
    return node.start_point[0] + 1
