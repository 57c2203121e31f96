"""Pydantic Schemas — request validation for API endpoints.

Invariants:
    - Schemas validate request shape at the system boundary
    - Range checks tied to domain constants (thumbnail, language) live in services

Design Decisions:
    - Separate from core documents: schemas are API contracts, documents are storage
"""
