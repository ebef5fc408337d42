"""Domain enums for business logic.

Available Enums:
    - MemberRole: Member roles (tpm, pm, pmo, developer, designer, qa)
    - NotificationType: Kinds of task activity notifications
"""

from src.domain.enums.member_role import MANAGER_ROLES, MemberRole
from src.domain.enums.notification_type import NotificationType

__all__ = [
    "MANAGER_ROLES",
    "MemberRole",
    "NotificationType",
]
