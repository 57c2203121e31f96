"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every entity is a JSON document row keyed by (collection, doc_id)
"""

from app.models.document import Document  # noqa: F401
