"""Suggestion Type Routes — /api/v1/suggestion-types."""

from tinmarin.api.routes.crud import build_resource_router
from tinmarin.services.suggestion_type import SuggestionTypeService

router = build_resource_router(
    "/api/v1/suggestion-types", "suggestion-types", SuggestionTypeService,
)
