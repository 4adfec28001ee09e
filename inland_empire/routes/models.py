"""Pydantic request models for API endpoints."""

from pydantic import BaseModel, Field, field_validator


class BuildBody(BaseModel):
    attribute_points: dict[str, int]
    name: str | None = None


class MessageBody(BaseModel):
    message: str


class CheckBody(BaseModel):
    skill_id: str
    difficulty: str | int = "medium"
    modifier: int = 0
    skill_level: int | None = Field(None, ge=1, le=10)

    @field_validator("difficulty")
    @classmethod
    def _numeric_string_is_threshold(cls, value: str | int) -> str | int:
        if isinstance(value, str) and value.strip().isdigit():
            return int(value)
        return value
