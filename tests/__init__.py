"""Test suite for the task management API.

- unit/: Handlers, entities and helpers with mocked dependencies
- integration/: Repositories, database and security services on SQLite
- api/: HTTP behaviour through the FastAPI application
"""
