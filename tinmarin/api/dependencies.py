"""Route Dependencies — hand the lifespan-owned storage client to routes.

Invariants:
    - The DatabaseSessionManager lives on app.state, set once in main.lifespan
    - Tests replace it through app.dependency_overrides[get_db_manager]
"""

from fastapi import Request

from tinmarin.infrastructure.database import DatabaseSessionManager


def get_db_manager(request: Request) -> DatabaseSessionManager:
    manager = getattr(request.app.state, "db_manager", None)
    if manager is None:
        raise RuntimeError("Database not initialized")
    return manager
