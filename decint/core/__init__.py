"""Core Layer — pure decimal arithmetic, no IO, no settings, no logging setup.

Invariants:
    - No module in core/ imports from services/, infrastructure/, or config
    - All functions are pure and deterministic; capacity is always an explicit argument

Design Decisions:
    - Functional core separated from the settings-bound engine in services/
"""
