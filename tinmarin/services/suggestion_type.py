"""Suggestion Type Service — names are unique by exact text."""

from tinmarin.models.suggestion_type import SuggestionType
from tinmarin.schemas.suggestion_type import (
    SuggestionTypeCreate, SuggestionTypeResponse, SuggestionTypeUpdate,
)
from tinmarin.services.resource_service import ResourceService


class SuggestionTypeService(ResourceService):
    label = "Suggestion type"
    model = SuggestionType
    create_schema = SuggestionTypeCreate
    update_schema = SuggestionTypeUpdate
    response_schema = SuggestionTypeResponse
    duplicate_key = "name"
