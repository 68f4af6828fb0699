from typing import ClassVar, Optional

from skull_cacher.constants import OUTCOME_KIND
from skull_cacher.models import Texture

from ._base import Outcome


class Started(Outcome):
    kind: ClassVar[OUTCOME_KIND] = OUTCOME_KIND.STARTED
    terminal: ClassVar[bool] = False


class Success(Outcome):
    kind: ClassVar[OUTCOME_KIND] = OUTCOME_KIND.SUCCESS

    texture: Texture


class Fail(Outcome):
    """An expected miss, e.g. an unknown profile or nothing to remove."""

    kind: ClassVar[OUTCOME_KIND] = OUTCOME_KIND.FAIL

    reason: Optional[str] = None


class Error(Outcome):
    """An unexpected fault while serving the request."""

    kind: ClassVar[OUTCOME_KIND] = OUTCOME_KIND.ERROR

    cause: BaseException
