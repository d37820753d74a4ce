import sys
from pathlib import Path
from typing import Generator

import pytest

# Ensure local source package (src/matrixsdk) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from matrixsdk._config import Config  # noqa: E402
from matrixsdk._dispatcher import Dispatcher  # noqa: E402
from matrixsdk._transport import HttpxTransport  # noqa: E402


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("MATRIX_HOMESERVER_URL", raising=False)
    monkeypatch.delenv("MATRIX_ACCESS_TOKEN", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://matrix.org"


@pytest.fixture
def access_token() -> str:
    return "syt_test_token"


@pytest.fixture
def room_id() -> str:
    return "!someroom:matrix.org"


@pytest.fixture
def config(base_url: str, access_token: str) -> Config:
    return Config(base_url=base_url, access_token=access_token)


@pytest.fixture
def transport() -> Generator[HttpxTransport, None, None]:
    with HttpxTransport() as transport:
        yield transport


@pytest.fixture
def dispatcher(transport: HttpxTransport) -> Dispatcher:
    return Dispatcher(transport)
