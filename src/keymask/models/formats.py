"""Request and response contracts for the masking API."""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field

from keymask.masking import FormatRule

MAX_RAW_LENGTH = 10_000


class FormatDescriptor(BaseModel):
    """Public view of one rule table entry."""

    id: str
    label: str
    domain: str
    region: Optional[str] = Field(default=None)
    character_class: str
    renderer: str
    max_length: Optional[int] = Field(default=None)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_rule(cls, rule: FormatRule) -> "FormatDescriptor":
        return cls(
            id=rule.format_id,
            label=rule.label,
            domain=rule.domain.value,
            region=rule.region,
            character_class=rule.character_class.value,
            renderer=rule.renderer.kind,
            max_length=rule.max_length,
        )


class FormatRequest(BaseModel):
    format_id: str = Field(min_length=1, max_length=64)
    value: str = Field(default="", max_length=MAX_RAW_LENGTH)


class FormatResponse(BaseModel):
    format_id: str
    value: str
    masked: str
    known: bool = Field(
        default=True,
        description="False when the id was unknown and the value passed through.",
    )


class BatchFormatRequest(BaseModel):
    format_id: str = Field(min_length=1, max_length=64)
    values: list[Annotated[str, Field(max_length=MAX_RAW_LENGTH)]] = Field(
        default_factory=list,
        max_length=1000,
    )


class BatchFormatResponse(BaseModel):
    format_id: str
    masked: list[str] = Field(default_factory=list)
    known: bool = Field(default=True)
