"""Run rendered Go source through gofmt."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess

from sqlcmock.errors import FormatError

logger = logging.getLogger(__name__)


def find_gofmt() -> str:
    """Return the gofmt executable, honouring the ``GOFMT`` environment variable."""
    gofmt = os.environ.get("GOFMT") or shutil.which("gofmt")
    if not gofmt:
        raise FormatError("gofmt not found; install Go or rerun with --no-format")
    return gofmt


def format_source(source: bytes) -> bytes:
    """Return *source* formatted by gofmt."""
    gofmt = find_gofmt()
    try:
        result = subprocess.run([gofmt], input=source, capture_output=True)
    except OSError as e:
        raise FormatError(f"cannot run {gofmt}: {e}") from e
    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        raise FormatError(f"failed to format source: {stderr}")
    logger.debug("gofmt: %d -> %d bytes", len(source), len(result.stdout))
    return result.stdout
