"""Recommended Website Schemas — title/url/description rules.

Invariants:
    - url must be an absolute http(s) URL without whitespace
    - No duplicate key: identical websites may be stored twice
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

Title = Annotated[
    str, StringConstraints(strip_whitespace=True, strict=True, min_length=1, max_length=200),
]
Url = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True, strict=True, max_length=2048,
        pattern=r"^https?://\S+$",
    ),
]
Description = Annotated[
    str, StringConstraints(strip_whitespace=True, strict=True, min_length=1, max_length=2000),
]


class RecommendedWebsiteCreate(BaseModel):
    title: Title
    url: Url
    description: Description


class RecommendedWebsiteUpdate(BaseModel):
    title: Title = None
    url: Url = None
    description: Description = None


class RecommendedWebsiteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    url: str
    description: str
    created_at: datetime
    updated_at: datetime
