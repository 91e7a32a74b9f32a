"""Recommended Website Routes — /api/v1/recommended-websites."""

from tinmarin.api.routes.crud import build_resource_router
from tinmarin.services.recommended_website import RecommendedWebsiteService

router = build_resource_router(
    "/api/v1/recommended-websites", "recommended-websites",
    RecommendedWebsiteService,
)
