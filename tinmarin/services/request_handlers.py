"""Request Handlers — create/update/remove decision sequences over a ResourceService.

Invariants:
    - Status vocabulary is fixed and identical for every resource type:
      200 updated, 201 created, 204 deleted, 400 malformed, 403 duplicate,
      404 not found, 500 unexpected, 503 storage fault
    - update/retrieve reject a malformed id before any storage access
    - Every fault body is {"error": message}; 500 never carries internal detail
    - The except clause is a last-resort net; expected outcomes arrive as Result

Design Decisions:
    - Handlers return HandlerResponse instead of FastAPI responses: routes stay thin
      and the decision sequence is testable without HTTP
    - update/remove are find-then-act without a transaction: a concurrent delete
      between the two steps yields 404 (update) or 204 (remove), never a fault
"""

import logging
from dataclasses import dataclass
from typing import Any

from tinmarin.core.identifiers import is_valid_id
from tinmarin.core.result import Failure, Result
from tinmarin.services.resource_service import ResourceService

logger = logging.getLogger(__name__)

INVALID_ID_BODY = {"error": "Invalid id."}
INTERNAL_ERROR_BODY = {"error": "Internal Server Error."}

_WRITE_FAILURE_STATUS = {
    Failure.NOT_FOUND: 404,
    Failure.DUPLICATE: 403,
    Failure.STORAGE: 503,
}


@dataclass(frozen=True)
class HandlerResponse:
    status_code: int
    body: Any = None


class ResourceHandlers:
    """One instance per resource type; holds no state between requests."""

    def __init__(self, service: ResourceService):
        self.service = service

    async def create(self, body: Any) -> HandlerResponse:
        try:
            verified = self.service.verify_fields(body)
            if not verified.success:
                return HandlerResponse(400, verified.content)

            if self.service.duplicate_key is not None:
                exists = await self.service.find_by_duplicate_key(verified.content)
                if exists.success:
                    return HandlerResponse(
                        403, {"error": self.service.duplicate_message()},
                    )

            saved = await self.service.create(verified.content)
            if not saved.success:
                return self._write_failure(saved)
            return HandlerResponse(201, self.service.serialize(saved.content))
        except Exception:
            return self._internal_error("create")

    async def update(self, resource_id: str, body: Any) -> HandlerResponse:
        try:
            if not is_valid_id(resource_id):
                return HandlerResponse(400, INVALID_ID_BODY)

            verified = self.service.verify_update(body)
            if not verified.success:
                return HandlerResponse(400, verified.content)

            found = await self.service.find_one_by_id(resource_id)
            if not found.success:
                return HandlerResponse(404, found.content)

            updated = await self.service.update_one_by_id(
                found.content, verified.content,
            )
            if not updated.success:
                return self._write_failure(updated)
            return HandlerResponse(200, self.service.serialize(updated.content))
        except Exception:
            return self._internal_error("update", resource_id)

    async def remove(self, resource_id: str) -> HandlerResponse:
        try:
            found = await self.service.find_one_by_id(resource_id)
            if not found.success:
                return HandlerResponse(404, found.content)

            deleted = await self.service.remove(resource_id)
            if not deleted.success:
                return self._write_failure(deleted)
            return HandlerResponse(204)
        except Exception:
            return self._internal_error("remove", resource_id)

    async def retrieve(self, resource_id: str) -> HandlerResponse:
        try:
            if not is_valid_id(resource_id):
                return HandlerResponse(400, INVALID_ID_BODY)

            found = await self.service.find_one_by_id(resource_id)
            if not found.success:
                return HandlerResponse(404, found.content)
            return HandlerResponse(200, self.service.serialize(found.content))
        except Exception:
            return self._internal_error("retrieve", resource_id)

    async def list_all(self) -> HandlerResponse:
        try:
            found = await self.service.find_all()
            return HandlerResponse(
                200, [self.service.serialize(e) for e in found.content],
            )
        except Exception:
            return self._internal_error("list")

    def _write_failure(self, result: Result) -> HandlerResponse:
        status_code = _WRITE_FAILURE_STATUS.get(result.failure, 503)
        return HandlerResponse(status_code, {"error": result.content["error"]})

    def _internal_error(
        self, operation: str, resource_id: str | None = None,
    ) -> HandlerResponse:
        logger.error(
            f"Unhandled exception in {self.service.label} {operation}",
            extra={
                "resource": self.service.label, "resource_id": resource_id,
                "operation": operation, "status_code": 500,
            },
            exc_info=True,
        )
        return HandlerResponse(500, INTERNAL_ERROR_BODY)
