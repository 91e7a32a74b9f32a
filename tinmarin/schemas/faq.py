"""FAQ Schemas — question/answer rules for create, update and responses.

Invariants:
    - FAQCreate.question: 1-500 chars after strip; FAQCreate.answer: 1-5000 chars
    - FAQUpdate accepts the same fields, each optional, null rejected
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

Question = Annotated[
    str, StringConstraints(strip_whitespace=True, strict=True, min_length=1, max_length=500),
]
Answer = Annotated[
    str, StringConstraints(strip_whitespace=True, strict=True, min_length=1, max_length=5000),
]


class FAQCreate(BaseModel):
    question: Question
    answer: Answer


class FAQUpdate(BaseModel):
    question: Question = None
    answer: Answer = None


class FAQResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    question: str
    answer: str
    created_at: datetime
    updated_at: datetime
