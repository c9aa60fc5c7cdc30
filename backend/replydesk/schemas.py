from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ComposeRequest(BaseModel):
    # The form posts camelCase field names; snake_case is accepted as well.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    company_name: Optional[str] = Field(default="", max_length=255)
    product_service: Optional[str] = Field(default="", max_length=2000)
    customer_message: Optional[str] = Field(default="", max_length=10000)
    # Any tone string is accepted; unknown values fall back to "professional".
    tone: Optional[str] = None


class ComposeResponse(BaseModel):
    response: str
    tone: str
    kind: Optional[str] = None
    complete: bool = True


class ToneOptionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    value: str
    label: str
    description: str


class ResponseTipOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str
    body: str


class ComposeOptionsResponse(BaseModel):
    default_tone: str
    copy_feedback_ms: int
    tones: list[ToneOptionOut] = Field(default_factory=list)
    tips: list[ResponseTipOut] = Field(default_factory=list)
