"""Member directory command handlers.

Rules:
- Managers (tpm, pm, pmo) create and delete members
- A member may update their own profile; managers may update anyone
- Nobody deletes themselves
- Email stays unique across all members, soft-deleted ones included
"""

from dataclasses import replace
from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.member_commands import (
    CreateMember,
    DeleteMember,
    UpdateMember,
)
from src.application.dtos import MemberResult
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import Member
from src.domain.errors import (
    RecordConflictError,
    already_exists,
    manager_required,
    not_found,
)
from src.domain.protocols import (
    LoggerProtocol,
    MemberRepository,
    PasswordHashingProtocol,
)


class CreateMemberHandler:
    """Create a member of any role on a manager's behalf."""

    def __init__(
        self,
        member_repo: MemberRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._members = member_repo
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: CreateMember) -> Result[MemberResult, DomainError]:
        if not cmd.actor_role.is_manager:
            return Failure(error=manager_required("create members"))

        email = cmd.email.strip().lower()
        if await self._members.find_by_email(email) is not None:
            return Failure(
                error=already_exists(
                    ErrorCode.EMAIL_ALREADY_EXISTS, "Member", "email", email
                )
            )

        now = datetime.now(UTC)
        member = Member(
            id=uuid7(),
            email=email,
            password_hash=self._password_service.hash_password(cmd.password),
            name=cmd.name,
            role=cmd.role,
            created_at=now,
            updated_at=now,
        )
        try:
            await self._members.save(member)
        except RecordConflictError as exc:
            return Failure(error=exc.conflict)

        self._logger.info(
            "Member created",
            member_id=str(member.id),
            role=member.role.value,
            created_by=str(cmd.actor_id),
        )
        return Success(value=MemberResult.from_entity(member))


class UpdateMemberHandler:
    """Update name, email or password of a member.

    Flow:
    1. Load the member (404 if missing or soft-deleted)
    2. Allow the member themself or a manager (403 otherwise)
    3. Check a new email is free (409)
    4. Hash a new password
    5. Persist
    """

    def __init__(
        self,
        member_repo: MemberRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._members = member_repo
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: UpdateMember) -> Result[MemberResult, DomainError]:
        member = await self._members.find_by_id(cmd.member_id)
        if member is None:
            return Failure(
                error=not_found(ErrorCode.MEMBER_NOT_FOUND, "Member", cmd.member_id)
            )

        if member.id != cmd.actor_id and not cmd.actor_role.is_manager:
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.PERMISSION_DENIED,
                    message="Unauthorized: only the member or a manager can update this member",
                    required_permission="member:self_or_manager",
                )
            )

        changes: dict[str, object] = {"updated_at": datetime.now(UTC)}
        if cmd.name is not None:
            changes["name"] = cmd.name
        if cmd.email is not None:
            email = cmd.email.strip().lower()
            existing = await self._members.find_by_email(email)
            if existing is not None and existing.id != member.id:
                return Failure(
                    error=already_exists(
                        ErrorCode.EMAIL_ALREADY_EXISTS, "Member", "email", email
                    )
                )
            changes["email"] = email
        if cmd.password is not None:
            changes["password_hash"] = self._password_service.hash_password(cmd.password)

        updated = replace(member, **changes)
        try:
            await self._members.update(updated)
        except RecordConflictError as exc:
            return Failure(error=exc.conflict)

        self._logger.info(
            "Member updated",
            member_id=str(member.id),
            updated_by=str(cmd.actor_id),
            fields=sorted(k for k in changes if k != "updated_at"),
        )
        return Success(value=MemberResult.from_entity(updated))


class DeleteMemberHandler:
    """Soft delete a member (managers only, never themselves)."""

    def __init__(self, member_repo: MemberRepository, logger: LoggerProtocol) -> None:
        self._members = member_repo
        self._logger = logger

    async def handle(self, cmd: DeleteMember) -> Result[None, DomainError]:
        if not cmd.actor_role.is_manager:
            return Failure(error=manager_required("delete members"))

        if cmd.member_id == cmd.actor_id:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="Members cannot delete themselves",
                    field="member_id",
                )
            )

        member = await self._members.find_by_id(cmd.member_id)
        if member is None:
            return Failure(
                error=not_found(ErrorCode.MEMBER_NOT_FOUND, "Member", cmd.member_id)
            )

        now = datetime.now(UTC)
        await self._members.update(replace(member, deleted_at=now, updated_at=now))

        self._logger.info(
            "Member deleted", member_id=str(member.id), deleted_by=str(cmd.actor_id)
        )
        return Success(value=None)
