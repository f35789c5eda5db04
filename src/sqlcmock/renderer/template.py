"""Render the mock IR through a Jinja2 template."""

from __future__ import annotations

import logging
import re
from pathlib import Path

import jinja2

from sqlcmock.errors import TemplateLoadError, TemplateRenderError, TemplateSyntaxError
from sqlcmock.model import Import, Method, Output
from sqlcmock.renderer.gofmt import format_source

logger = logging.getLogger(__name__)

_TEMPLATE_PATH = Path(__file__).with_name("default.go.tmpl")

_QUALIFIER = re.compile(r"([A-Za-z_][A-Za-z0-9_]*)\.")
_WORD_BOUNDARY = re.compile(r"[_\-\s]+|(?<=[a-z0-9])(?=[A-Z])")
_MAJOR_VERSION = re.compile(r"^v[0-9]+$")
_DOT_VERSION = re.compile(r"\.v[0-9]+$")


def lcfirst(s: str) -> str:
    return s[:1].lower() + s[1:]


def ucfirst(s: str) -> str:
    return s[:1].upper() + s[1:]


def _words(s: str) -> list[str]:
    return [w for w in _WORD_BOUNDARY.split(s) if w]


def camelcase(s: str) -> str:
    """``get_user_by_id`` -> ``GetUserById``."""
    return "".join(ucfirst(w.lower()) for w in _words(s))


def snakecase(s: str) -> str:
    """``GetUserByID`` -> ``get_user_by_id``."""
    return "_".join(w.lower() for w in _words(s))


def trim_prefix(s: str, prefix: str) -> str:
    return s[len(prefix):] if prefix and s.startswith(prefix) else s


def trim_suffix(s: str, suffix: str) -> str:
    return s[: -len(suffix)] if suffix and s.endswith(suffix) else s


def default_alias(imp: Import) -> str:
    """Return the name an import is referenced by.

    Without an explicit alias this is the last path segment, skipping a
    trailing major-version element (``pgx/v5`` -> ``pgx``) and dropping a
    gopkg.in style suffix (``null.v4`` -> ``null``).
    """
    if imp.name:
        return imp.name
    segments = imp.path.split("/")
    last = segments[-1]
    if len(segments) > 1 and _MAJOR_VERSION.match(last):
        last = segments[-2]
    return _DOT_VERSION.sub("", last)


def qualifiers(methods: tuple[Method, ...]) -> list[str]:
    """Return the sorted package qualifiers used by any parameter or result type."""
    found: set[str] = set()
    for method in methods:
        for field in method.input + method.output:
            found.update(_QUALIFIER.findall(field.type))
    return sorted(found)


HELPERS = {
    "lcfirst": lcfirst,
    "ucfirst": ucfirst,
    "camelcase": camelcase,
    "snakecase": snakecase,
    "trim_prefix": trim_prefix,
    "trim_suffix": trim_suffix,
    "default_alias": default_alias,
    "qualifiers": qualifiers,
}


def make_environment() -> jinja2.Environment:
    env = jinja2.Environment(
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        autoescape=False,
    )
    env.filters.update(HELPERS)
    env.globals.update(HELPERS)
    return env


def load_template(template_file: Path | None) -> str:
    """Return the template text: *template_file* if given, else the built-in one."""
    path = template_file or _TEMPLATE_PATH
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateLoadError(f"failed to open template file: {e}") from e


def render_template(output: Output, source: str, name: str = "mock") -> bytes:
    """Execute template *source* against *output* and return the raw bytes."""
    env = make_environment()
    try:
        template = env.from_string(source)
    except jinja2.TemplateSyntaxError as e:
        raise TemplateSyntaxError(f"{name}:{e.lineno}: {e.message}") from e

    context = {
        "output": output,
        "gen_package": output.gen_package,
        "model_path": output.model_path,
        "package": output.package,
        "struct": output.struct,
        "imports": output.imports,
        "methods": output.methods,
    }
    try:
        return template.render(context).encode("utf-8")
    except (jinja2.TemplateError, TypeError, ValueError, AttributeError) as e:
        raise TemplateRenderError(f"failed to execute template {name}: {e}") from e


def render(output: Output, template_file: Path | None = None, fmt: bool = True) -> bytes:
    """Render *output* with the chosen template, formatting it with gofmt if *fmt*."""
    source = load_template(template_file)
    name = str(template_file) if template_file else _TEMPLATE_PATH.name
    logger.debug("Rendering %d methods with %s", len(output.methods), name)
    rendered = render_template(output, source, name)
    if not fmt:
        return rendered
    return format_source(rendered)
