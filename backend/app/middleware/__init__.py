"""Middleware Layer — ASGI wrappers composed around the FastAPI app.

Invariants:
    - Every wrapper takes an ASGI app and returns an ASGI app
    - Ordering in main.py: request logging outermost, then CORS preflight

Design Decisions:
    - Functional entry points (with_cors, log_requests) for composing by hand;
      classes for app.add_middleware
"""
