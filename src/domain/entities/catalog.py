"""Catalog entities: roles, task statuses and priorities.

All three are small code/name/description lookup tables maintained by
managers. They share one shape, so they share one base dataclass.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class CatalogEntry:
    """Code/name/description lookup row.

    Attributes:
        id: Unique identifier
        code: Short machine code (unique within its catalog)
        name: Human-readable name
        description: Optional longer description
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """

    id: UUID
    code: str
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime


@dataclass
class Role(CatalogEntry):
    """Entry in the role catalogue (e.g. code="pm", name="Project Manager")."""


@dataclass
class TaskStatus(CatalogEntry):
    """Workflow status a task can be in (e.g. code="todo", name="To Do")."""


@dataclass
class Priority(CatalogEntry):
    """Task priority level (e.g. code="high", name="High")."""
