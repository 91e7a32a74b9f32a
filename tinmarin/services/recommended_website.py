"""Recommended Website Service — no duplicate key, creates are never rejected as duplicates."""

from tinmarin.models.recommended_website import RecommendedWebsite
from tinmarin.schemas.recommended_website import (
    RecommendedWebsiteCreate, RecommendedWebsiteResponse, RecommendedWebsiteUpdate,
)
from tinmarin.services.resource_service import ResourceService


class RecommendedWebsiteService(ResourceService):
    label = "Recommended website"
    model = RecommendedWebsite
    create_schema = RecommendedWebsiteCreate
    update_schema = RecommendedWebsiteUpdate
    response_schema = RecommendedWebsiteResponse
