"""Generate mocks for sqlc ``Querier`` interfaces."""

from sqlcmock.config import Opts
from sqlcmock.errors import QuerierNotFoundError, SqlcmockError
from sqlcmock.model import Field, Import, Method, Output
from sqlcmock.pipeline import parse, run

__all__ = [
    "Field",
    "Import",
    "Method",
    "Opts",
    "Output",
    "QuerierNotFoundError",
    "SqlcmockError",
    "parse",
    "run",
]
