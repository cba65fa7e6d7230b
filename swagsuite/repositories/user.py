
from swagsuite.domain.user import User
from swagsuite.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User
