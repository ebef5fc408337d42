"""Domain layer - Pure business logic.

Members, catalogs, projects, boards, tasks and notifications as plain
dataclasses, plus the protocols (ports) the application layer talks to.
No framework or database imports live here.

Structure:
- entities/: Domain entities (mutable, have identity)
- enums/: Member roles and notification types
- errors/: Constructors for the errors handlers report
- value_objects/: Search filters and pagination (immutable)
- protocols/: Repository and service interfaces
"""
