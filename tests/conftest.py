import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def toml_file():
    """Write TOML bytes to a temporary file and yield a factory for its path."""
    paths: list[str] = []

    def _write(content: bytes) -> str:
        with tempfile.NamedTemporaryFile(suffix=".toml", delete=False) as f:
            f.write(content)
            paths.append(f.name)
        return f.name

    yield _write

    for path in paths:
        Path(path).unlink()


@pytest.fixture
def ureg():
    pint = pytest.importorskip("pint")
    return pint.UnitRegistry()
