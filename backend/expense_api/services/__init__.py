"""Services Layer: resolvers and the resolver set.

Invariants:
    - Handlers split by concern (max ~4 methods each)
    - Field routing uses an explicit dict mapping (no auto-discovery)
"""
