"""Services Layer — the generic resource handler and the catalog resource definitions.

Invariants:
    - Services never import from api/ (routes depend on services, not the reverse)
    - Store access only through the EntityStore protocol
"""
