from .client import SkullCacherClient
from .models import Texture
from .outcomes import Error, Fail, Outcome, Started, Success, TextureCallback

__all__ = [
    "SkullCacherClient",
    "Texture",
    "Outcome",
    "Started",
    "Success",
    "Fail",
    "Error",
    "TextureCallback",
]
