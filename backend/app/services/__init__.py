"""Services Layer — route handlers and the Dispatcher.

Invariants:
    - Dispatcher uses an explicit route table (no auto-discovery)
    - Handlers are the imperative shell around core/ (settings, schemas, errors)
"""
