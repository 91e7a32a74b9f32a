"""Field Validation — create/update checks driven by per-resource pydantic models.

Invariants:
    - verify_fields reports EVERY missing or invalid field, never just the first
    - verify_update fails when zero recognised fields are supplied
    - Unrecognised fields are dropped silently by both checks
    - Neither check raises: outcomes are returned as Result

Design Decisions:
    - Rules live in schemas/ as pydantic models; this module only maps
      ValidationError onto the Result envelope so handlers stay model-agnostic
    - A recognised field with an invalid value fails the update (malformed input),
      it is not silently discarded
"""

from typing import Any

from pydantic import BaseModel, ValidationError

from tinmarin.core.result import Failure, Result

INVALID_FIELDS_MESSAGE = "Missing or invalid fields."
EMPTY_UPDATE_MESSAGE = "No valid fields to update."
INVALID_BODY_MESSAGE = "Request body must be a JSON object."


def validation_details(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Flatten pydantic error dicts into field/message/type entries."""
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in errors
    ]


def verify_fields(model: type[BaseModel], body: Any) -> Result:
    """Check a create payload; success content is the normalised field dict."""
    if not isinstance(body, dict):
        return Result.fail(Failure.INVALID, INVALID_BODY_MESSAGE)
    try:
        validated = model.model_validate(body)
    except ValidationError as e:
        return Result.fail(
            Failure.INVALID, INVALID_FIELDS_MESSAGE,
            details=validation_details(e.errors()),
        )
    return Result.ok(validated.model_dump())


def verify_update(model: type[BaseModel], body: Any) -> Result:
    """Check a partial update; success content holds only the supplied fields."""
    if not isinstance(body, dict):
        return Result.fail(Failure.INVALID, INVALID_BODY_MESSAGE)
    recognised = {k: v for k, v in body.items() if k in model.model_fields}
    if not recognised:
        return Result.fail(
            Failure.INVALID, EMPTY_UPDATE_MESSAGE,
            fields=sorted(model.model_fields),
        )
    try:
        validated = model.model_validate(recognised)
    except ValidationError as e:
        return Result.fail(
            Failure.INVALID, INVALID_FIELDS_MESSAGE,
            details=validation_details(e.errors()),
        )
    return Result.ok(validated.model_dump(exclude_unset=True))
