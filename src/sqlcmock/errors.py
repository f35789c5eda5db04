"""Exceptions raised by the sqlcmock pipeline."""

from __future__ import annotations


class SqlcmockError(Exception):
    """Base exception for every fatal sqlcmock error."""


class ConfigError(SqlcmockError):
    """Options or the project defaults file are unusable."""


class SourceParseError(SqlcmockError):
    """The Go source file could not be read or parsed."""


class ImportPathError(SourceParseError):
    """An import path literal is not a valid Go string literal."""


class QuerierNotFoundError(SqlcmockError):
    """The source file declares no ``Querier`` interface."""


class ModuleFileError(SqlcmockError):
    """No usable go.mod encloses the input file."""


class TemplateLoadError(SqlcmockError):
    """The template file could not be read."""


class TemplateSyntaxError(SqlcmockError):
    """The template does not compile."""


class TemplateRenderError(SqlcmockError):
    """The template failed while executing against the IR."""


class FormatError(SqlcmockError):
    """gofmt is unavailable or rejected the rendered source."""


class OutputWriteError(SqlcmockError):
    """The generated file could not be written."""
