import sys
from pathlib import Path

import pytest
from httpx import AsyncClient

# Ensure local source package (src/wrapi) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("WRAPI_BASE_URL", raising=False)
    monkeypatch.delenv("WRAPI_TIMEOUT", raising=False)
    monkeypatch.delenv("WRAPI_DEBUG", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com"


@pytest.fixture
def client() -> AsyncClient:
    """Provide a bare async client; transports are mocked by pytest-httpx."""
    return AsyncClient()
