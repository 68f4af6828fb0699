from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from skull_cacher.constants import OUTCOME_KIND


# Base outcome class that all outcomes of a texture request inherit from
class Outcome(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: ClassVar[OUTCOME_KIND]
    terminal: ClassVar[bool] = True

