"""Root conftest — shared test configuration.

Environment is set before app.main is imported anywhere, so the cached
Settings (and the middleware stack built from them) see test values.
"""

import os

os.environ.setdefault("DOCUMENT_STORE", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("CORS_ALLOWED_ORIGINS", '["https://app.test"]')
os.environ.setdefault("CORS_ALLOWED_METHODS", '["GET", "POST", "PUT", "DELETE"]')
os.environ.setdefault("CORS_ALLOWED_HEADERS", '["Content-Type", "Authorization"]')
os.environ.setdefault("CORS_SUPPORTS_CREDENTIALS", "true")
os.environ.setdefault("CORS_MAX_AGE", "600")
os.environ.setdefault("LOG_FORMAT", "text")
