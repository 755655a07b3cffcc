"""Core Layer: pure domain logic, no IO, no async, no DB sessions.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (new_identifier aside)

Design Decisions:
    - Functional core separated from imperative shell: resolvers do the IO,
      core decides what the results mean
"""
