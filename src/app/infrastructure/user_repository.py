import datetime
from typing import Optional

from sqlalchemy import ColumnElement, delete, func, select, true, update

from src.app.core.domain.models import GetAllUsersOptions, User
from src.app.core.domain.repositories import UserRepositoryBase
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database

from src.app.infrastructure.entities.user_entity import UserEntity
from src.app.infrastructure.mappers.user_mapper import UserMapper

# Largest OFFSET both SQLite and PostgreSQL accept
MAX_OFFSET = 2**63 - 1


def _born_on_or_after(date_filter: datetime.date | None) -> ColumnElement[bool]:
    if date_filter is None:
        return true()
    return UserEntity.date_of_birth >= date_filter


class UserRepository(BaseRepository[UserEntity, User], UserRepositoryBase):
    """Repository for User operations."""

    entity_name = "User"

    def __init__(self, db: Database, mapper: UserMapper):
        super().__init__(db, mapper)

    async def create(self, user: User) -> bool:
        """Insert a user and write the generated id back onto it."""
        entity = await self.add(self.mapper.to_entity(user))
        user.id = entity.id
        return True

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by ID."""
        return await self.find_one(
            select(UserEntity).where(UserEntity.id == user_id)
        )

    async def get_by_email(self, email: str, exclude_id: int = 0) -> Optional[User]:
        """
        Get a user by exact email.

        The email column is not unique. When several rows share the email the
        lowest id wins. A non-zero exclude_id skips that user's own row, so a
        user keeping their email is never matched against itself.
        """
        stmt = select(UserEntity).where(UserEntity.email == email)
        if exclude_id:
            stmt = stmt.where(UserEntity.id != exclude_id)
        return await self.find_one(stmt.order_by(UserEntity.id).limit(1))

    async def get_all(self, options: GetAllUsersOptions) -> list[User]:
        """
        Get one page of users.

        Users born before options.date are excluded. Rows are ordered by id so
        that consecutive pages are stable. A page whose offset does not fit in
        a BIGINT is necessarily past the last row and comes back empty.
        """
        offset = (options.page - 1) * options.page_size
        if offset > MAX_OFFSET:
            return []

        stmt = (
            select(UserEntity)
            .where(_born_on_or_after(options.date))
            .order_by(UserEntity.id)
            .offset(offset)
            .limit(options.page_size)
        )
        return await self.find_all(stmt)

    async def update(self, user: User) -> bool:
        personal_data = user.personal_data
        stmt = (
            update(UserEntity)
            .where(UserEntity.id == user.id)
            .values(
                first_name=personal_data.first_name,
                last_name=personal_data.last_name,
                email=user.email_address.email,
                date_of_birth=personal_data.date_of_birth,
                phone_number=personal_data.phone_number,
            )
        )
        return await self.execute(stmt) > 0

    async def delete_by_id(self, user_id: int) -> bool:
        return await self.execute(delete(UserEntity).where(UserEntity.id == user_id)) > 0

    async def get_count(self, date_filter: datetime.date | None) -> int:
        """Count users matching the same date filter as get_all, ignoring paging."""
        return await self.scalar(
            select(func.count(UserEntity.id)).where(_born_on_or_after(date_filter))
        )
