"""Core Layer — pure validation and outcome types, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: services orchestrate
      the async storage calls around these pure checks
"""
