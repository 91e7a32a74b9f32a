"""Suggestion Type Schemas — a single unique name."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

Name = Annotated[
    str, StringConstraints(strip_whitespace=True, strict=True, min_length=1, max_length=100),
]


class SuggestionTypeCreate(BaseModel):
    name: Name


class SuggestionTypeUpdate(BaseModel):
    name: Name = None


class SuggestionTypeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    created_at: datetime
    updated_at: datetime
