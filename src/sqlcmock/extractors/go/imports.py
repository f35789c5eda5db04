"""Collect the import specs of a Go file."""

from __future__ import annotations

import logging
import re

from sqlcmock.errors import ImportPathError
from sqlcmock.extractors.go import node_line, node_text
from sqlcmock.model import Import

logger = logging.getLogger(__name__)

_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    '"': '"',
}

_ESCAPE = re.compile(
    r"""\\(?:
        (?P<simple>[abfnrtv\\"])
      | (?P<octal>[0-7]{3})
      | x(?P<hex>[0-9A-Fa-f]{2})
      | u(?P<u4>[0-9A-Fa-f]{4})
      | U(?P<u8>[0-9A-Fa-f]{8})
    )""",
    re.VERBOSE,
)


def unquote(literal: str) -> str:
    """Decode a Go string literal the way ``strconv.Unquote`` does.

    Raises ValueError for anything that is not a valid literal.
    """
    if len(literal) < 2:
        raise ValueError("literal too short")
    quote = literal[0]
    if quote != literal[-1]:
        raise ValueError("unterminated literal")
    body = literal[1:-1]

    if quote == "`":
        if "`" in body:
            raise ValueError("backquote inside raw string")
        return body.replace("\r", "")
    if quote != '"':
        raise ValueError(f"unexpected quote {quote!r}")
    if "\n" in body:
        raise ValueError("newline in interpreted string")

    out = bytearray()
    pos = 0
    while pos < len(body):
        ch = body[pos]
        if ch == '"':
            raise ValueError("unescaped quote")
        if ch != "\\":
            out += ch.encode("utf-8")
            pos += 1
            continue
        m = _ESCAPE.match(body, pos)
        if m is None:
            raise ValueError(f"invalid escape at offset {pos}")
        if m["simple"]:
            out += _SIMPLE_ESCAPES[m["simple"]].encode("utf-8")
        elif m["octal"]:
            value = int(m["octal"], 8)
            if value > 0xFF:
                raise ValueError(f"octal escape out of range: {m.group()}")
            out.append(value)
        elif m["hex"]:
            out.append(int(m["hex"], 16))
        else:
            code = int(m["u4"] or m["u8"], 16)
            if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
                raise ValueError(f"invalid code point: {m.group()}")
            out += chr(code).encode("utf-8")
        pos = m.end()
    return out.decode("utf-8")


def _specs(root):
    for decl in root.named_children:
        if decl.type != "import_declaration":
            continue
        for child in decl.named_children:
            if child.type == "import_spec":
                yield child
            elif child.type == "import_spec_list":
                yield from (s for s in child.named_children if s.type == "import_spec")


def collect_imports(root) -> tuple[Import, ...]:
    """Return the file's imports in source order.

    The alias is left empty when the spec has none; no default alias is
    inferred from the path.
    """
    imports: list[Import] = []
    for spec in _specs(root):
        literal = node_text(spec.child_by_field_name("path"))
        try:
            path = unquote(literal)
        except (ValueError, UnicodeDecodeError) as e:
            raise ImportPathError(
                f"line {node_line(spec)}: malformed import path {literal}: {e}"
            ) from e
        alias = spec.child_by_field_name("name")
        imports.append(Import(path=path, name=node_text(alias) if alias is not None else ""))

    logger.debug("Imports: %s", [i.path for i in imports])
    return tuple(imports)
