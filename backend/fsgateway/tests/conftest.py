from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from fsgateway.main import app
from fsgateway.routers.fs import get_root_dir


@pytest.fixture
def fs_root(tmp_path: Path) -> Path:
    """A small tree: foo.txt, bar/foo2.txt, bar/baz.txt."""
    (tmp_path / "foo.txt").write_text("top")
    (tmp_path / "bar").mkdir()
    (tmp_path / "bar" / "foo2.txt").write_text("nested")
    (tmp_path / "bar" / "baz.txt").write_text("other")
    return tmp_path


@pytest.fixture
async def client(fs_root: Path):
    """Test client whose requests resolve paths against ``fs_root``.

    Async tests run without markers because asyncio_mode = "auto" is set in pyproject.toml.
    """
    app.dependency_overrides[get_root_dir] = lambda: str(fs_root)
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
