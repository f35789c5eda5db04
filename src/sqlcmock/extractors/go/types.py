"""Spell Go type expressions as source text for the generated mock."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from sqlcmock.extractors.go import node_line, node_text

logger = logging.getLogger(__name__)

# Optional non-alphanumeric prefix ("*", "[]", ...) then an exported,
# unqualified identifier.
_NEEDS_PACKAGE = re.compile(r"^([^A-Za-z0-9]*)([A-Z][^.]*)$")


def unhandled(kind: str) -> str:
    """Return the placeholder emitted for an unsupported construct."""
    return f"<error_unhandled_{kind}>"


@dataclass(frozen=True)
class TypeScope:
    """What is known about names visible in the interface's source file.

    This is a best-effort approximation, not a type checker: an exported
    bare name is assumed to live in *package* unless a dot import could
    have provided it and the file does not declare it itself.
    """

    package: str
    declared: frozenset[str] = frozenset()
    dot_imports: bool = False

    def qualify(self, spelling: str) -> str:
        m = _NEEDS_PACKAGE.match(spelling)
        if m is None:
            return spelling
        prefix, name = m.groups()
        if self.dot_imports and name not in self.declared:
            logger.debug("Leaving %s unqualified: may come from a dot import", name)
            return spelling
        return f"{prefix}{self.package}.{name}"


def _inner(node):
    for child in node.named_children:
        if child.type != "comment":
            return child
    return None


def spell_type(node) -> str:
    """Return the literal spelling of a type expression, without qualification."""
    kind = node.type
    if kind == "type_identifier":
        return node_text(node)
    if kind == "qualified_type":
        package = node.child_by_field_name("package")
        name = node.child_by_field_name("name")
        return f"{node_text(package)}.{node_text(name)}"
    if kind in ("slice_type", "array_type"):
        # Array lengths are dropped: [4]T is spelled []T.
        return "[]" + spell_type(node.child_by_field_name("element"))
    if kind == "pointer_type":
        return "*" + spell_type(_inner(node))
    if kind == "parenthesized_type":
        return spell_type(_inner(node))

    logger.warning("line %d: unhandled type %s: %s", node_line(node), kind, node_text(node))
    return unhandled(kind)


def render_type(node, scope: TypeScope) -> str:
    """Return the spelling of *node* as it must appear outside its own package."""
    return scope.qualify(spell_type(node))
