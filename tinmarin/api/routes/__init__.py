"""Route Modules — one file per resource/concern.

Invariants:
    - Each module exposes its own APIRouter with prefix and tags
    - Routes never contain business logic (delegate to ResourceHandlers)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
    - The three document resources share build_resource_router (crud.py)
"""
