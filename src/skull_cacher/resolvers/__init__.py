from ._base import NameResolver
from ._mojang import MojangNameResolver

__all__ = [
    "NameResolver",
    "MojangNameResolver",
]
