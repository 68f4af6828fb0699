from ._base import Outcome
from .outcome_types import Error, Fail, Started, Success

__all__ = [
    "Outcome",
    "Started",
    "Success",
    "Fail",
    "Error",
]
