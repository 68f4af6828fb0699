import threading
import uuid
from typing import Dict, Optional

from skull_cacher.clients import Client
from skull_cacher.util.logging import get_logger

from ._base import NameResolver

logger = get_logger(__name__)


class MojangNameResolver(NameResolver):
    """Resolves player names through the Mojang API.

    Successful lookups are remembered for the lifetime of the resolver;
    unknown names and failed lookups are asked again next time.
    """

    def __init__(self, client: Client):
        self.client = client
        self._lock = threading.Lock()
        self._known: Dict[str, uuid.UUID] = {}

    def get_uuid(self, name: str) -> Optional[uuid.UUID]:
        key = name.lower()
        with self._lock:
            if key in self._known:
                return self._known[key]

        identifier = self.client.get_uuid(name)
        if identifier is None:
            logger.info("Unknown player name", name=name)
            return None

        with self._lock:
            self._known[key] = identifier

        logger.debug("Resolved player name", name=name, identifier=str(identifier))
        return identifier
