from ._base import AbstractTextureCache
from ._memory import MemoryTextureCache

__all__ = [
    "AbstractTextureCache",
    "MemoryTextureCache",
]
