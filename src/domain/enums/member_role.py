"""Member roles for task management authorization.

Every member carries exactly one role. The role is chosen at join time
through the role segment of the auth path (/auth/{role}/join) and is
embedded in issued tokens.

Role groups:
    Managers: tpm, pm, pmo. They may maintain catalogs, own projects and
        boards, and manage other members.
    Contributors: developer, designer, qa. They work on tasks, comments
        and status changes.

Usage:
    from src.domain.enums import MemberRole

    if MemberRole(current_user.role).is_manager:
        ...
"""

from enum import Enum


class MemberRole(str, Enum):
    """Member roles.

    String enum so values serialize directly into JWT claims and JSON.
    """

    TPM = "tpm"
    """Technical project manager."""

    PM = "pm"
    """Project manager."""

    PMO = "pmo"
    """Project management office."""

    DEVELOPER = "developer"
    DESIGNER = "designer"
    QA = "qa"

    @property
    def is_manager(self) -> bool:
        """True for roles allowed to manage catalogs, projects and members."""
        return self in MANAGER_ROLES

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: ['tpm', 'pm', 'pmo', 'developer', 'designer', 'qa'].
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role."""
        return value in cls.values()


MANAGER_ROLES: frozenset[MemberRole] = frozenset(
    {MemberRole.TPM, MemberRole.PM, MemberRole.PMO}
)
