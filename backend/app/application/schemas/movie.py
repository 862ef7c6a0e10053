"""Pydantic DTOs (Data Transfer Objects) for the Movie feature.

The same per-field rules back both the create and the partial-update
schema. JSON keys are camelCase (``yearTime``, ``createdAt``); the
snake_case attribute names are accepted on input as well.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from app.domain.entities import MovieType


class CamelModel(BaseModel):
    """Base for every schema exchanged with the browser client."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MovieCreate(CamelModel):
    """Schema for creating a new movie — every field required."""

    title: str = Field(..., min_length=2, max_length=255, examples=["Dune"])
    type: MovieType = Field(..., examples=[MovieType.MOVIE])
    director: str = Field(..., min_length=1, max_length=255, examples=["Denis Villeneuve"])
    budget: str = Field(..., min_length=1, max_length=100, examples=["$165M"])
    location: str = Field(..., min_length=1, max_length=255, examples=["Jordan"])
    duration: str = Field(..., min_length=1, max_length=50, examples=["155 min"])
    year_time: str = Field(..., min_length=1, max_length=50, examples=["2021"])


class MovieUpdate(CamelModel):
    """Schema for updating an existing movie — all fields optional, none empty.

    Omitted fields keep their stored value. An explicit ``null`` is
    rejected, and so is a body that sets nothing at all.
    """

    title: str | None = Field(None, min_length=2, max_length=255)
    type: MovieType | None = None
    director: str | None = Field(None, min_length=1, max_length=255)
    budget: str | None = Field(None, min_length=1, max_length=100)
    location: str | None = Field(None, min_length=1, max_length=255)
    duration: str | None = Field(None, min_length=1, max_length=50)
    year_time: str | None = Field(None, min_length=1, max_length=50)

    @field_validator("*")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("Field may be omitted but must not be null")
        return value

    @model_validator(mode="after")
    def _require_one_field(self) -> "MovieUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided for update")
        return self

    def changes(self) -> dict[str, Any]:
        """Return only the fields the client actually supplied."""
        return self.model_dump(exclude_unset=True)


class MovieResponse(CamelModel):
    """Schema returned to the client."""

    id: str
    title: str
    type: MovieType
    director: str
    budget: str
    location: str
    duration: str
    year_time: str
    created_at: datetime
    updated_at: datetime
