import threading
import uuid

import pytest

from skull_cacher.resolvers import NameResolver

PLAYER_ID = uuid.UUID("123e4567-e89b-12d3-a456-426614174000")
OTHER_PLAYER_ID = uuid.UUID("069a79f4-44e9-4726-a5be-fca90e38aaf5")


class FakeResponse:
    def __init__(self, status_code=200, payload=None, error=None):
        self.status_code = status_code
        self._payload = payload
        self._error = error

    def json(self):
        if self._error is not None:
            raise self._error
        return self._payload


def profile_response(signature="S", value="V"):
    return FakeResponse(
        200,
        {
            "id": PLAYER_ID.hex,
            "name": "Player",
            "properties": [
                {"name": "textures", "signature": signature, "value": value}
            ],
        },
    )


class FakeSessionClient:
    """Stands in for skull_cacher.clients.Client without touching the network."""

    def __init__(self, responses=None, default=None, gate=None):
        self.responses = responses or {}
        self.default = default or FakeResponse(404)
        self.gate = gate
        self.calls = []
        self._lock = threading.Lock()
        self.closed = False

    def get_profile(self, identifier):
        with self._lock:
            self.calls.append(identifier)

        if self.gate is not None:
            self.gate.wait(timeout=5)

        response = self.responses.get(identifier, self.default)
        if isinstance(response, Exception):
            raise response
        return response

    def get_uuid(self, name):
        raise AssertionError("name lookups go through the resolver in tests")

    def close(self):
        self.closed = True


class FakeResolver(NameResolver):
    def __init__(self, names=None, error=None):
        self.names = names or {}
        self.error = error

    def get_uuid(self, name):
        if self.error is not None:
            raise self.error
        return self.names.get(name)


class Recorder:
    """Outcome callback that remembers everything it was given."""

    def __init__(self):
        self.outcomes = []
        self.threads = []

    def __call__(self, outcome):
        self.outcomes.append(outcome)
        self.threads.append(threading.current_thread())

    @property
    def kinds(self):
        return [type(outcome).__name__ for outcome in self.outcomes]


@pytest.fixture
def cache_dir(tmp_path):
    return tmp_path / "textures"


@pytest.fixture
def recorder():
    return Recorder()
