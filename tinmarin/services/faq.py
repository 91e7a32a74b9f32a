"""FAQ Service — questions are unique by exact text."""

from tinmarin.models.faq import FAQ
from tinmarin.schemas.faq import FAQCreate, FAQResponse, FAQUpdate
from tinmarin.services.resource_service import ResourceService


class FAQService(ResourceService):
    label = "FAQ"
    model = FAQ
    create_schema = FAQCreate
    update_schema = FAQUpdate
    response_schema = FAQResponse
    duplicate_key = "question"
