"""Route Modules — one router per resource/concern.

Invariants:
    - Each router carries its own prefix and tags
    - Routes never contain business logic (delegate to services)
"""
