"""Extract the method set of the target interface from a Go syntax tree."""

from __future__ import annotations

import logging

from sqlcmock.errors import QuerierNotFoundError, SourceParseError
from sqlcmock.extractors.go import node_line, node_text
from sqlcmock.extractors.go.types import TypeScope, render_type, unhandled
from sqlcmock.model import TARGET_INTERFACE, Field, Method

logger = logging.getLogger(__name__)

# Method elements in current and older tree-sitter-go grammars.
_METHOD_TYPES = {"method_elem", "method_spec"}

_PARAMETER_TYPES = {"parameter_declaration", "variadic_parameter_declaration"}

# `type Querier interface {...}` and `type Querier = interface {...}`.
_TYPE_SPEC_TYPES = {"type_spec", "type_alias"}


def package_name(root) -> str:
    """Return the name from the file's package clause."""
    for child in root.named_children:
        if child.type == "package_clause":
            for ident in child.named_children:
                if ident.type == "package_identifier":
                    return node_text(ident)
    raise SourceParseError("missing package clause")


def declared_types(root) -> frozenset[str]:
    """Return the names of all top-level type declarations."""
    names: set[str] = set()
    for decl in root.named_children:
        if decl.type != "type_declaration":
            continue
        for spec in decl.named_children:
            if spec.type not in _TYPE_SPEC_TYPES:
                continue
            name = spec.child_by_field_name("name")
            if name is not None:
                names.add(node_text(name))
    return frozenset(names)


def find_interface(root, name: str = TARGET_INTERFACE):
    """Return the first type spec or alias called *name*, searching depth-first."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type in _TYPE_SPEC_TYPES:
            spec_name = node.child_by_field_name("name")
            if spec_name is not None and node_text(spec_name) == name:
                return node
        stack.extend(reversed(node.named_children))
    return None


def extract_fields(node, scope: TypeScope) -> tuple[Field, ...]:
    """Expand a parameter list, or a lone result type, into Fields.

    ``(a, b int)`` yields two Fields; an unnamed slot yields one Field with
    an empty name.
    """
    if node is None:
        return ()
    if node.type != "parameter_list":
        return (Field(name="", type=render_type(node, scope)),)

    fields: list[Field] = []
    for decl in node.named_children:
        if decl.type not in _PARAMETER_TYPES:
            continue
        if decl.type == "variadic_parameter_declaration":
            logger.warning(
                "line %d: variadic parameters are not supported: %s",
                node_line(decl),
                node_text(decl),
            )
            type_text = unhandled(decl.type)
        else:
            type_text = render_type(decl.child_by_field_name("type"), scope)
        names = [node_text(n) for n in decl.children_by_field_name("name")]
        for name in names or [""]:
            fields.append(Field(name=name, type=type_text))
    return tuple(fields)


def _extract_method(node, scope: TypeScope) -> Method:
    return Method(
        name=node_text(node.child_by_field_name("name")),
        input=extract_fields(node.child_by_field_name("parameters"), scope),
        output=extract_fields(node.child_by_field_name("result"), scope),
    )


def extract_methods(root, scope: TypeScope, name: str = TARGET_INTERFACE) -> tuple[Method, ...]:
    """Return one Method per method declared directly in interface *name*.

    Raises QuerierNotFoundError when the file has no such interface.
    """
    spec = find_interface(root, name)
    if spec is None:
        raise QuerierNotFoundError(f"no {name} found")
    body = spec.child_by_field_name("type")
    if body is None or body.type != "interface_type":
        raise QuerierNotFoundError(f"{name} is not an interface")

    methods: list[Method] = []
    for elem in body.named_children:
        if elem.type in _METHOD_TYPES:
            methods.append(_extract_method(elem, scope))
        elif elem.type != "comment":
            # Embedded interfaces and type constraints are not flattened.
            logger.warning(
                "line %d: skipping embedded element %s", node_line(elem), node_text(elem)
            )

    logger.debug("%s: %d methods", name, len(methods))
    return tuple(methods)
