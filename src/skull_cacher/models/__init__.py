from .texture import Texture

__all__ = [
    "Texture",
]
