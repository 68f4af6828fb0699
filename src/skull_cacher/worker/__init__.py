from .fetch import FetchWorker

__all__ = [
    "FetchWorker",
]
