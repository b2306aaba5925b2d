"""API Layer — FastAPI routes, authentication gate, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - The authentication gate runs before any route

Design Decisions:
    - Thin routes delegate to the resource handler in services/
"""
