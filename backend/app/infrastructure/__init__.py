"""Infrastructure Layer — database session management, document stores, logging.

Invariants:
    - Infrastructure never imports domain rules, only core records and errors
    - All SQLAlchemy failures surface as DatabaseError
"""
