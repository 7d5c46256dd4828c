from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Color(BaseModel):
    name: str = Field("", description="Human-readable color label in the source language.")
    code: str = Field("", description="Opaque color code, returned exactly as received.")

    @field_validator("name", "code", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        return "" if value is None else value


class TranslateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    colors: list[Color] = Field(
        default_factory=list,
        description="Ordered colors whose names should be translated.",
    )
    to: str = Field("", description="Provider language tag to translate into.")
    render_text: str = Field(
        "",
        alias="renderText",
        description="Auxiliary display string translated alongside the colors.",
    )

    @field_validator("colors", mode="before")
    @classmethod
    def _null_colors_as_empty(cls, value: object) -> object:
        return [] if value is None else value

    @field_validator("to", "render_text", mode="before")
    @classmethod
    def _null_text_as_empty(cls, value: object) -> object:
        return "" if value is None else value


class TranslateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    colors: list[Color] = Field(
        default_factory=list,
        description="Translated colors, positionally aligned with the request.",
    )
    render_text: str = Field("", alias="renderText", description="Translated display string.")
    status: bool = Field(False, description="True when the translation request succeeded.")
    message: str = Field("", description="Human-readable outcome summary.")
