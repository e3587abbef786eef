"""Shared fixtures for the SEC EDGAR test suite."""

from pathlib import Path

import httpx
import pytest

from sec_edgar.config import EdgarConfig

FIXTURES_DIR = Path(__file__).parent / "fixtures"
USER_AGENT = "Sample Company Name admin@sample.com"


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays a response."""

    def __init__(self, status_code: int = 200, content: bytes = b"") -> None:
        self.status_code = status_code
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.content)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def ticker_file() -> Path:
    """Local ticker dictionary fixture."""
    return FIXTURES_DIR / "ticker.txt"


@pytest.fixture
def atom_feed() -> bytes:
    """browse-edgar Atom feed for AMD 10-K filings."""
    return (FIXTURES_DIR / "browse_edgar_10k.xml").read_bytes()


@pytest.fixture
def config() -> EdgarConfig:
    return EdgarConfig(user_agent=USER_AGENT)


@pytest.fixture
def make_client():
    """Build an httpx client whose transport is a RecordingHandler."""
    clients = []

    def _make(status_code: int = 200, content: bytes = b"") -> tuple[httpx.Client, RecordingHandler]:
        handler = RecordingHandler(status_code, content)
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client, handler

    yield _make

    for client in clients:
        client.close()
