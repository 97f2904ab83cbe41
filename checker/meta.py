import math
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exception import InvalidToleranceError


def validate_eps(eps: float) -> float:
    if math.isnan(eps) or eps < 0:
        raise InvalidToleranceError(eps)
    return eps


class CheckerInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    candidate: Tuple[float, ...] = ()
    reference: Tuple[float, ...] = ()
    eps: float

    # InvalidToleranceError is not a ValueError, so pydantic lets it
    # propagate instead of wrapping it into a ValidationError
    @field_validator("eps")
    @classmethod
    def _check_eps(cls, v):
        return validate_eps(v)


class CheckRequest(BaseModel):
    token: str = ""
    candidate: List[float] = Field(default_factory=list)
    reference: List[float] = Field(default_factory=list)
    params: List[float] = Field(default_factory=list)
