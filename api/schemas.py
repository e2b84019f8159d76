"""Request bodies accepted by the reading API."""
from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class TextCreate(BaseModel):
    """Reference passage set by a teacher."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    duration_sec: int = Field(gt=0)


class ReadingCreate(BaseModel):
    """A student's transcribed reading of one passage.

    The transcript is kept exactly as submitted; only "" is rejected.
    """

    student_name: str = Field(min_length=1)
    text_id: int = Field(gt=0)
    transcript: str = Field(min_length=1)
    duration_sec: float = Field(gt=0, allow_inf_nan=False)

    @field_validator("student_name", mode="before")
    @classmethod
    def _strip_name(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value


def describe_errors(exc: ValidationError) -> List[Dict[str, Any]]:
    """JSON-safe summary of a pydantic ValidationError."""
    return [
        {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
        for err in exc.errors()
    ]
