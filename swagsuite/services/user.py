
from sqlalchemy.ext.asyncio import AsyncSession

from swagsuite.core.exceptions import NotFoundError
from swagsuite.domain.user import User
from swagsuite.repositories.user import UserRepository


class UserService:
    def __init__(self, session: AsyncSession):
        self._repo = UserRepository(session)

    async def get_user(self, user_id: str) -> User:
        user = await self._repo.get_by_id(user_id)
        if not user:
            raise NotFoundError("User", user_id)
        return user
