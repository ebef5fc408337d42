"""Authentication handlers: join, login and refresh.

Every successful call returns an AuthorizedResult (member plus token pair).

Flow (login):
1. Look up the member by email
2. Reject unknown, soft-deleted or wrong-role members and bad passwords with
   the same "Invalid credentials" error
3. Issue a new access/refresh pair

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (repositories and services are injected)
- Passwords and tokens are never logged
"""

from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.auth_commands import (
    JoinMember,
    LoginMember,
    RefreshMemberToken,
)
from src.application.dtos import AuthorizedResult, MemberResult
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Member
from src.domain.errors import RecordConflictError, TokenError, already_exists
from src.domain.protocols import (
    LoggerProtocol,
    MemberRepository,
    PasswordHashingProtocol,
    TokenGenerationProtocol,
)

INVALID_CREDENTIALS = AuthenticationError(
    code=ErrorCode.INVALID_CREDENTIALS,
    message="Invalid credentials",
)


class JoinMemberHandler:
    """Handler for member registration (/auth/{role}/join)."""

    def __init__(
        self,
        member_repo: MemberRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize join handler with dependencies.

        Args:
            member_repo: Member repository for persistence.
            password_service: Password hashing service.
            token_service: Token pair issuer.
            logger: Structured logger.
        """
        self._members = member_repo
        self._password_service = password_service
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: JoinMember) -> Result[AuthorizedResult, DomainError]:
        """Register a member and sign them in.

        Returns:
            Success(AuthorizedResult) on registration.
            Failure(ConflictError) if the email is already registered.
        """
        email = cmd.email.strip().lower()

        if await self._members.find_by_email(email) is not None:
            self._logger.warning("Join rejected: email taken", role=cmd.role.value)
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
            "Member joined", member_id=str(member.id), role=member.role.value
        )
        return Success(value=_authorize(member, self._token_service))


class LoginMemberHandler:
    """Handler for /auth/{role}/login."""

    def __init__(
        self,
        member_repo: MemberRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._members = member_repo
        self._password_service = password_service
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: LoginMember) -> Result[AuthorizedResult, DomainError]:
        """Authenticate a member through their role's path.

        Returns:
            Success(AuthorizedResult) on valid credentials.
            Failure(AuthenticationError) otherwise; the reason is only logged.
        """
        member = await self._members.find_by_email(cmd.email.strip().lower())

        if (
            member is None
            or not member.can_login_as(cmd.role)
            or not self._password_service.verify_password(
                cmd.password, member.password_hash
            )
        ):
            self._logger.warning(
                "Login rejected",
                role=cmd.role.value,
                known_email=member is not None,
            )
            return Failure(error=INVALID_CREDENTIALS)

        self._logger.info(
            "Member logged in", member_id=str(member.id), role=member.role.value
        )
        return Success(value=_authorize(member, self._token_service))


class RefreshMemberTokenHandler:
    """Handler for /auth/{role}/refresh.

    The refresh token must be valid, carry the path's role in its type claim
    and belong to a member who still exists with that role.
    """

    def __init__(
        self,
        member_repo: MemberRepository,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._members = member_repo
        self._token_service = token_service
        self._logger = logger

    async def handle(
        self, cmd: RefreshMemberToken
    ) -> Result[AuthorizedResult, DomainError]:
        result = self._token_service.validate_refresh_token(cmd.refresh_token)
        if isinstance(result, Failure):
            self._logger.warning("Refresh rejected", reason=result.error)
            code = (
                ErrorCode.TOKEN_EXPIRED
                if result.error == TokenError.EXPIRED_TOKEN
                else ErrorCode.TOKEN_INVALID
            )
            return Failure(error=AuthenticationError(code=code, message=result.error))

        payload = result.value

        if payload.get("type") != cmd.role.value:
            self._logger.warning("Refresh rejected", reason="role_mismatch")
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Token does not belong to this role",
                )
            )

        try:
            member_id = UUID(str(payload["sub"]))
        except ValueError:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID, message=TokenError.INVALID_TOKEN
                )
            )

        member = await self._members.find_by_id(member_id)
        if member is None or not member.can_login_as(cmd.role):
            self._logger.warning("Refresh rejected", reason="member_gone")
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Member no longer exists",
                )
            )

        self._logger.info("Token refreshed", member_id=str(member.id))
        return Success(value=_authorize(member, self._token_service))


def _authorize(
    member: Member, token_service: TokenGenerationProtocol
) -> AuthorizedResult:
    token = token_service.generate_token_pair(
        member_id=member.id,
        email=member.email,
        role=member.role,
    )
    return AuthorizedResult(member=MemberResult.from_entity(member), token=token)
