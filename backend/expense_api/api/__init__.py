"""API Layer: GraphQL schema, probe routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Thin resolvers delegate to services/resolver_set.py
"""
