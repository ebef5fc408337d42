"""Member directory query handlers.

Returns MemberResult DTOs so password hashes never reach the presentation
layer.
"""

from src.application.dtos import MemberResult
from src.application.queries.member_queries import GetMember, ListMembers
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.errors import not_found
from src.domain.protocols import MemberRepository
from src.domain.value_objects import Page


class GetMemberHandler:
    def __init__(self, member_repo: MemberRepository) -> None:
        self._members = member_repo

    async def handle(self, query: GetMember) -> Result[MemberResult, DomainError]:
        member = await self._members.find_by_id(query.member_id)
        if member is None:
            return Failure(
                error=not_found(ErrorCode.MEMBER_NOT_FOUND, "Member", query.member_id)
            )
        return Success(value=MemberResult.from_entity(member))


class ListMembersHandler:
    def __init__(self, member_repo: MemberRepository) -> None:
        self._members = member_repo

    async def handle(
        self, query: ListMembers
    ) -> Result[Page[MemberResult], DomainError]:
        page = await self._members.search(query.criteria, query.page)
        return Success(value=page.map(MemberResult.from_entity))
