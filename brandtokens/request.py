"""
request.py — Input model for token synthesis.

Four free-text fields, all optional. Absent fields (missing or None) become
the empty string and contribute no keyword hits. Anything that is not a
string is a caller error and is rejected by pydantic at construction time.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class TokenRequest(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    directive: str = Field(default="", description="One-line product directive, e.g. 'legal case tracker'")
    product_name: str = Field(default="", description="Product / app name, e.g. 'Casewell'")
    brand_statement: str = Field(
        default="",
        description="Tone, positioning and values joined into one string",
    )
    pitch: str = Field(default="", description="Elevator pitch")

    @field_validator("directive", "product_name", "brand_statement", "pitch", mode="before")
    @classmethod
    def _none_is_empty(cls, v):
        return "" if v is None else v
