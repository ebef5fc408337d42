"""Application layer - Use cases and orchestration.

Each use case is a command or query dataclass with a handler class whose
handle() returns a Result. Handlers enforce ownership and role rules and
call repositories through domain protocols.

Structure:
- commands/: Write operations and their handlers
- queries/: Read operations and their handlers
- services/: Helpers shared by handlers (task notifications)
- dtos/: Results that are not plain entities (token bundles)
- errors/: ApplicationError for the presentation layer
"""
