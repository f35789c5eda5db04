import sys
from pathlib import Path

import pytest


def _add_src_to_path() -> None:
    root = Path(__file__).resolve().parents[1]
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


_add_src_to_path()

from sqlcmock.extractors.go.parser import make_parser, parse_source  # noqa: E402


@pytest.fixture(scope="session")
def go_parser():
    return make_parser()


@pytest.fixture
def parse_go(go_parser):
    """Parse a Go snippet and return the root node."""

    def _parse(source: str):
        return parse_source(source.encode("utf-8"), "test.go", parser=go_parser).root_node

    return _parse


@pytest.fixture
def go_module(tmp_path: Path):
    """Create a module ``example.com/app`` and return a writer for files in it."""
    root = tmp_path / "app"
    root.mkdir()
    (root / "go.mod").write_text("module example.com/app\n\ngo 1.22\n", encoding="utf-8")

    def _write(relative: str, content: str) -> Path:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    _write.root = root
    return _write
