"""Pytest fixtures for all tests."""

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config, GeneratorConfig
from encoding.alphabets import resolve
from ui.app import create_app


class FakeClock:
    """Settable millisecond clock."""

    def __init__(self, now=1_700_000_000_000):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, millis=1):
        self.now += millis


@pytest.fixture
def clock(monkeypatch):
    """Freeze the generator's wall clock."""
    fake = FakeClock()
    monkeypatch.setattr("generation.push_id.now_millis", fake)
    return fake


@pytest.fixture
def fixed_random(monkeypatch):
    """Make suffix reseeding return a chosen digit."""
    state = {"digit": 0}
    monkeypatch.setattr("generation.suffix.secrets.randbelow", lambda n: state["digit"] % n)
    return state


@pytest.fixture(params=["base64url", "base62", "base58", "base36"])
def alphabet(request):
    """Each supported alphabet in turn."""
    return resolve(request.param)


def _suffix_value(uid, alphabet):
    result = 0
    for char in uid[8:]:
        result = result * alphabet.radix + alphabet.index(char)
    return result


@pytest.fixture
def suffix_value():
    """Read the 12-char suffix of an ID as a base-R integer."""
    return _suffix_value


@pytest.fixture
def app():
    """Create test FastAPI app."""
    return create_app(Config(generator=GeneratorConfig(max_batch=50)))


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
