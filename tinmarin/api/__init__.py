"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON bodies, except 204 which has none

Design Decisions:
    - Thin routes delegate to services/request_handlers.py
"""
