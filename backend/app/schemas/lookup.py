"""Lookup Schemas — Pydantic models for the zipcode lookup response body.

Invariants:
    - LookupAccepted.state is always "MD"
    - city, neighborhoods, jurisdiction serialize as explicit nulls (never omitted)
    - supported is True and has_jurisdiction is False on every accepted body
    - Wire keys are camelCase (hasJurisdiction), Python attributes snake_case

Design Decisions:
    - Literal types pin the constant fields: a model with any other value fails validation
    - Reserved fields kept as None for a richer lookup that is not wired up
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.core.domain_types import LOOKUP_MESSAGE


class LookupAccepted(BaseModel):
    """Accepted lookup: every valid 5-digit zipcode maps to Maryland."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True,
    )

    zipcode: str = Field(pattern=r"^[0-9]{5}$")
    city: None = None
    state: Literal["MD"] = "MD"
    neighborhoods: None = None
    jurisdiction: None = None
    supported: Literal[True] = True
    has_jurisdiction: Literal[False] = False
    message: str = LOOKUP_MESSAGE

    def to_body(self) -> dict:
        return self.model_dump(by_alias=True)
