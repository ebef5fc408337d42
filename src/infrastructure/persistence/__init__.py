"""Database persistence infrastructure.

- base: declarative base, timestamp and soft-delete mixins, UTCDateTime
- database: engine, request-scoped sessions, schema bootstrap
- models/: one module per aggregate (members, catalogs, projects, tasks, ...)
- repositories/: protocol implementations mapping models to entities
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database

__all__ = [
    "BaseModel",
    "Database",
]
