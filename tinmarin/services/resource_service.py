"""Resource Service — validation, duplicate lookup and persistence for one document type.

Invariants:
    - Every operation opens its own session from the injected DatabaseSessionManager
    - Every operation returns a Result; only read faults escape as DatabaseError
    - find_one_by_id never touches storage for a malformed id
    - update_one_by_id re-reads the row in its own session and never recreates a
      record deleted since the caller's find_one_by_id
    - remove succeeds on a no-op delete

Design Decisions:
    - Subclasses are declarative (model, schemas, label, duplicate_key): behaviour is
      shared, the three resource types differ only in data
    - Write faults become Result failures here so request handlers never inspect
      exception types: UniqueViolationError → DUPLICATE, other DatabaseError → STORAGE
"""

import logging
from typing import Any, ClassVar

from pydantic import BaseModel
from sqlalchemy import delete, select

from tinmarin.core.errors import DatabaseError, UniqueViolationError
from tinmarin.core.field_validation import verify_fields, verify_update
from tinmarin.core.identifiers import is_valid_id, normalize_id
from tinmarin.core.result import Failure, Result
from tinmarin.db.base import Base
from tinmarin.infrastructure.database import DatabaseSessionManager

logger = logging.getLogger(__name__)

STORAGE_UNAVAILABLE_MESSAGE = "Service unavailable. Try again later."


class ResourceService:
    """Persistence operations shared by every document type."""

    label: ClassVar[str]
    model: ClassVar[type[Base]]
    create_schema: ClassVar[type[BaseModel]]
    update_schema: ClassVar[type[BaseModel]]
    response_schema: ClassVar[type[BaseModel]]
    duplicate_key: ClassVar[str | None] = None

    def __init__(self, db_manager: DatabaseSessionManager):
        self.db_manager = db_manager

    # ─── Validation ─────────────────────────────────────────────

    def verify_fields(self, body: Any) -> Result:
        return verify_fields(self.create_schema, body)

    def verify_update(self, body: Any) -> Result:
        return verify_update(self.update_schema, body)

    def serialize(self, entity: Base) -> dict:
        return self.response_schema.model_validate(entity).model_dump(mode="json")

    def duplicate_message(self) -> str:
        return f"{self.label} with indicated {self.duplicate_key} already exists."

    def not_found(self) -> Result:
        return Result.fail(Failure.NOT_FOUND, f"{self.label} not found.")

    # ─── Reads ──────────────────────────────────────────────────

    async def find_one_by_id(self, resource_id: str) -> Result:
        if not is_valid_id(resource_id):
            return self.not_found()
        async with self.db_manager.session() as db:
            entity = await db.get(self.model, normalize_id(resource_id))
        if entity is None:
            return self.not_found()
        return Result.ok(entity)

    async def find_all(self) -> Result:
        async with self.db_manager.session() as db:
            result = await db.execute(
                select(self.model).order_by(self.model.created_at),
            )
            entities = list(result.scalars().all())
        return Result.ok(entities)

    async def find_by_duplicate_key(self, fields: dict) -> Result:
        """success=True means a record with the same key value already exists."""
        if self.duplicate_key is None or self.duplicate_key not in fields:
            return self.not_found()
        column = getattr(self.model, self.duplicate_key)
        async with self.db_manager.session() as db:
            result = await db.execute(
                select(self.model).where(column == fields[self.duplicate_key]),
            )
            entity = result.scalars().first()
        if entity is None:
            return self.not_found()
        return Result.ok(entity)

    # ─── Writes ─────────────────────────────────────────────────

    async def create(self, fields: dict) -> Result:
        entity = self.model(**fields)
        try:
            async with self.db_manager.session() as db:
                db.add(entity)
                await db.commit()
                await db.refresh(entity)
        except UniqueViolationError:
            logger.warning(
                f"{self.label} create hit uniqueness constraint",
                extra={"resource": self.label, "operation": "create"},
            )
            return Result.fail(Failure.DUPLICATE, self.duplicate_message())
        except DatabaseError as e:
            return self._storage_fault(e)
        logger.info(
            f"{self.label} created",
            extra={"resource": self.label, "resource_id": entity.id},
        )
        return Result.ok(entity)

    async def update_one_by_id(self, existing: Base, partial: dict) -> Result:
        try:
            async with self.db_manager.session() as db:
                entity = await db.get(self.model, existing.id)
                if entity is None:
                    return self.not_found()
                for name, value in partial.items():
                    setattr(entity, name, value)
                await db.commit()
                await db.refresh(entity)
        except UniqueViolationError:
            logger.warning(
                f"{self.label} update hit uniqueness constraint",
                extra={"resource": self.label, "resource_id": existing.id},
            )
            return Result.fail(Failure.DUPLICATE, self.duplicate_message())
        except DatabaseError as e:
            return self._storage_fault(e, existing.id)
        logger.info(
            f"{self.label} updated",
            extra={"resource": self.label, "resource_id": entity.id},
        )
        return Result.ok(entity)

    async def remove(self, resource_id: str) -> Result:
        key = normalize_id(resource_id)
        try:
            async with self.db_manager.session() as db:
                await db.execute(delete(self.model).where(self.model.id == key))
                await db.commit()
        except DatabaseError as e:
            return self._storage_fault(e, key)
        logger.info(
            f"{self.label} deleted",
            extra={"resource": self.label, "resource_id": key},
        )
        return Result.ok({})

    def _storage_fault(self, error: DatabaseError, resource_id: str | None = None) -> Result:
        logger.warning(
            f"{self.label} {error.operation} failed: {error.message}",
            extra={
                "resource": self.label, "resource_id": resource_id,
                "error_code": error.code, "operation": error.operation,
            },
        )
        return Result.fail(Failure.STORAGE, STORAGE_UNAVAILABLE_MESSAGE)
