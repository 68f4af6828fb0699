import threading
import uuid
from typing import Dict, List, Optional

from skull_cacher.models import Texture

from ._base import AbstractTextureCache


class MemoryTextureCache(AbstractTextureCache):
    """Unbounded in-memory texture cache, safe to share between threads.

    Entries are only ever dropped through ``remove_texture`` or ``clear``.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._textures: Dict[uuid.UUID, Texture] = {}

    def get_texture(self, identifier: uuid.UUID) -> Optional[Texture]:
        with self._lock:
            return self._textures.get(identifier)

    def put_texture(self, texture: Texture):
        with self._lock:
            self._textures[texture.identifier] = texture

    def remove_texture(self, identifier: uuid.UUID) -> Optional[Texture]:
        with self._lock:
            return self._textures.pop(identifier, None)

    def items(self) -> List[Texture]:
        with self._lock:
            return list(self._textures.values())

    def clear(self):
        with self._lock:
            self._textures.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._textures)
