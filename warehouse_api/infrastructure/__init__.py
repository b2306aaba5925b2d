"""Infrastructure Layer — database access, identity store, and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Store failures are mapped to core/errors.py types at this boundary
"""
