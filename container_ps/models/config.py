"""User default models for Container PS."""

from typing import Literal, Optional
from pydantic import BaseModel, field_validator


class PsDefaults(BaseModel):
    """Stored defaults applied when the matching ps flag is not given."""
    sort: Optional[str] = None
    format: Literal["table", "json"] = "table"
    no_trunc: bool = False
    all: bool = False

    @field_validator("sort")
    @classmethod
    def _empty_sort_is_unset(cls, value: Optional[str]) -> Optional[str]:
        return value or None
