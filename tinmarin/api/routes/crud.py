"""CRUD Router Factory — the five document endpoints, bound to one ResourceService.

Invariants:
    - Request bodies reach the handlers unvalidated (field rules live in schemas/)
    - A body that is not a JSON object fails FastAPI validation → 400
    - 204 responses carry no body

Design Decisions:
    - One factory instead of three copies: resources differ only in their service
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response
from fastapi.responses import JSONResponse

from tinmarin.api.dependencies import get_db_manager
from tinmarin.infrastructure.database import DatabaseSessionManager
from tinmarin.services.request_handlers import HandlerResponse, ResourceHandlers
from tinmarin.services.resource_service import ResourceService


def to_http(response: HandlerResponse) -> Response:
    if response.status_code == 204:
        return Response(status_code=204)
    return JSONResponse(status_code=response.status_code, content=response.body)


def build_resource_router(
    prefix: str, tag: str, service_class: type[ResourceService],
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[tag])

    def get_handlers(
        db_manager: DatabaseSessionManager = Depends(get_db_manager),
    ) -> ResourceHandlers:
        return ResourceHandlers(service_class(db_manager))

    @router.post("", status_code=201)
    async def create_resource(
        body: dict[str, Any] | None = Body(None),
        handlers: ResourceHandlers = Depends(get_handlers),
    ):
        return to_http(await handlers.create(body or {}))

    @router.get("")
    async def list_resources(handlers: ResourceHandlers = Depends(get_handlers)):
        return to_http(await handlers.list_all())

    @router.get("/{resource_id}")
    async def get_resource(
        resource_id: str, handlers: ResourceHandlers = Depends(get_handlers),
    ):
        return to_http(await handlers.retrieve(resource_id))

    @router.patch("/{resource_id}")
    async def update_resource(
        resource_id: str,
        body: dict[str, Any] | None = Body(None),
        handlers: ResourceHandlers = Depends(get_handlers),
    ):
        return to_http(await handlers.update(resource_id, body or {}))

    @router.delete("/{resource_id}", status_code=204)
    async def delete_resource(
        resource_id: str, handlers: ResourceHandlers = Depends(get_handlers),
    ):
        return to_http(await handlers.remove(resource_id))

    return router
