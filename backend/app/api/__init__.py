"""API Layer — FastAPI gateway route and global error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses

Design Decisions:
    - Thin route delegates to the Dispatcher (functional core, imperative shell)
"""
