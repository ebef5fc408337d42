"""Infrastructure layer - Adapters for the domain protocols.

Structure:
- persistence/: SQLAlchemy models, the Database session manager and
  repositories (PostgreSQL via asyncpg, SQLite via aiosqlite)
- security/: bcrypt password hashing and PyJWT token service
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
