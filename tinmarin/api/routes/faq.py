"""FAQ Routes — /api/v1/faq."""

from tinmarin.api.routes.crud import build_resource_router
from tinmarin.services.faq import FAQService

router = build_resource_router("/api/v1/faq", "faq", FAQService)
