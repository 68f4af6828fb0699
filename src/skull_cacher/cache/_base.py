import abc
import uuid
from typing import List, Optional

from skull_cacher.models import Texture


class AbstractTextureCache(abc.ABC):
    @abc.abstractmethod
    def get_texture(self, identifier: uuid.UUID) -> Optional[Texture]:
        pass

    @abc.abstractmethod
    def put_texture(self, texture: Texture):
        pass

    @abc.abstractmethod
    def remove_texture(self, identifier: uuid.UUID) -> Optional[Texture]:
        pass

    @abc.abstractmethod
    def items(self) -> List[Texture]:
        pass

    @abc.abstractmethod
    def __len__(self) -> int:
        pass

    def __contains__(self, identifier) -> bool:
        return self.get_texture(identifier) is not None
