from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    # Wire format is camelCase (partiesPurpose, riskFlags, ...); Python side
    # stays snake_case. Either name is accepted on input.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Obligations(_CamelModel):
    you: list[str] = Field(default_factory=list, description="What the reader must do.")
    them: list[str] = Field(default_factory=list, description="What the other party must do.")


class MoneyAndDates(_CamelModel):
    payments: list[str] = Field(default_factory=list)
    dates: list[str] = Field(default_factory=list)


class SummaryRecord(_CamelModel):
    """
    Structured, plain-English brief of a contract or policy.

    Produced per request and never stored.
    """

    tldr: str = ""
    parties_purpose: str = ""
    obligations: Obligations = Field(default_factory=Obligations)
    money_and_dates: MoneyAndDates = Field(default_factory=MoneyAndDates)
    risk_flags: list[str] = Field(default_factory=list)
    actions: list[str] = Field(default_factory=list)
    unknowns: list[str] = Field(default_factory=list)
    excerpt: str = ""
    confidence: int = Field(70, ge=0, le=100, description="0 to 100 confidence score.")


class SimplifyRequest(BaseModel):
    # Optional here so a missing/blank 'text' is reported as 400, not 422.
    text: str | None = None
    # Untyped: Tone.parse maps anything unrecognized to the plain tone.
    tone: Any = None


class ExtractedText(BaseModel):
    text: str


class ErrorResponse(BaseModel):
    error: str
