"""A single ``styled`` use found in a file."""

from pydantic import BaseModel, ConfigDict, Field

from .ElementKind import ElementKind


class StyledMatch(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: ElementKind
    identifier: str = Field(..., min_length=1)
