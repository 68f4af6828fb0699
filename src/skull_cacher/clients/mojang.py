import uuid
from typing import Optional

import requests
from requests.utils import quote

from skull_cacher.constants import (
    DEFAULT_API_URL,
    DEFAULT_READ_TIMEOUT,
    DEFAULT_SESSION_URL,
    NAME_LOOKUP_PATH,
    PROFILE_PATH,
)
from skull_cacher.util.uuid import compact_hex, parse_identifier


class Client:
    def __init__(
        self,
        session_url=DEFAULT_SESSION_URL,
        api_url=DEFAULT_API_URL,
        read_timeout=DEFAULT_READ_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.session_url = session_url
        self.api_url = api_url
        self.read_timeout = read_timeout
        self.session = session or requests.Session()

    def _make_path(self, base_url, path):
        path = path.lstrip("/")
        host = base_url.rstrip("/")
        return f"{host}/{path}"

    def _make_request(self, method, base_url, path, **kwargs):
        kwargs.setdefault("timeout", self.read_timeout)
        return self.session.request(method, self._make_path(base_url, path), **kwargs)

    def get_profile(self, identifier: uuid.UUID) -> requests.Response:
        """Look up the signed profile (and with it the skin texture) of a player."""
        return self._make_request(
            "GET",
            self.session_url,
            PROFILE_PATH.format(compact_id=compact_hex(identifier)),
            params={"unsigned": "false"},
        )

    def get_uuid(self, name: str) -> Optional[uuid.UUID]:
        """Resolve a player name to its identifier, or None for unknown names."""
        response = self._make_request(
            "GET", self.api_url, NAME_LOOKUP_PATH.format(name=quote(name, safe=""))
        )

        if response.status_code in (204, 404):
            return None

        response.raise_for_status()
        return parse_identifier(response.json()["id"])

    def close(self):
        self.session.close()
