"""Services Layer — per-resource persistence services and request handlers.

Invariants:
    - One ResourceService subclass per document type, declarative only
    - ResourceHandlers is the only place that chooses HTTP status codes

Design Decisions:
    - Service/handler split: services speak Result, handlers speak status codes
"""
