"""
data_exporter.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, schema bootstrap and repositories.
"""

# Package marker.
