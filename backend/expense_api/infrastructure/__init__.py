"""Infrastructure Layer: database pool, store gateway, message store and logging.

Invariants:
    - Infrastructure never decides business rules; it only maps store failures
      onto the core error hierarchy
"""
