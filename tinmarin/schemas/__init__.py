"""Pydantic Schemas — field rules and response shapes per resource type.

Invariants:
    - *Create models declare required fields; *Update models make every field optional
    - *Response models are built from ORM objects (from_attributes)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
