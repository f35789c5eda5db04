"""Orchestrator: parse → extract → assemble → render → write."""

from __future__ import annotations

import logging
from pathlib import Path

from sqlcmock.config import Opts
from sqlcmock.errors import ConfigError, OutputWriteError
from sqlcmock.extractors.go.imports import collect_imports
from sqlcmock.extractors.go.interface import declared_types, extract_methods, package_name
from sqlcmock.extractors.go.module import resolve_model_path
from sqlcmock.extractors.go.parser import parse_source, read_source
from sqlcmock.extractors.go.types import TypeScope
from sqlcmock.model import STRUCT_NAME, Output
from sqlcmock.renderer.template import render

logger = logging.getLogger(__name__)


def _gen_package(opts: Opts) -> str:
    """Explicit package name, else the name of the output file's directory."""
    if opts.output_package:
        return opts.output_package
    out_path = Path(opts.output_file or ".").resolve()
    return out_path.parent.name


def parse(opts: Opts) -> Output:
    """Build the mock IR for ``opts.input_file``."""
    source = read_source(opts.input_file)
    root = parse_source(source, opts.input_file).root_node

    package = package_name(root)
    imports = collect_imports(root)
    scope = TypeScope(
        package=package,
        declared=declared_types(root),
        dot_imports=any(imp.name == "." for imp in imports),
    )
    methods = extract_methods(root, scope)

    output = Output(
        gen_package=_gen_package(opts),
        model_path=resolve_model_path(opts.input_file),
        package=package,
        struct=STRUCT_NAME,
        imports=imports,
        methods=methods,
    )
    logger.debug(
        "Package %s -> %s (%s), %d methods",
        output.package,
        output.gen_package,
        output.model_path,
        len(output.methods),
    )
    return output


def run(opts: Opts) -> Path:
    """Run the full sqlcmock pipeline and return the written file's path."""
    if not opts.output_file:
        raise ConfigError("no output file given (use --output)")

    output = parse(opts)
    generated = render(output, opts.template_file, opts.should_format)

    out_path = Path(opts.output_file)
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_bytes(generated)
    except OSError as e:
        raise OutputWriteError(f"cannot write {out_path}: {e}") from e

    logger.info("Generated %s", out_path)
    return out_path
