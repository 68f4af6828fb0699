import abc
import uuid
from typing import Any, Callable, Optional


class NameResolver(abc.ABC):
    @abc.abstractmethod
    def get_uuid(self, name: str) -> Optional[uuid.UUID]:
        pass

    def resolve(self, name: str, on_result: Callable[[Optional[uuid.UUID]], Any]):
        on_result(self.get_uuid(name))
