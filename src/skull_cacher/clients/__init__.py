from .mojang import Client

__all__ = [
    "Client",
]
