from sqlalchemy.ext.asyncio import AsyncSession

from app.logging import get_logger
from app.models.user import User
from app.repositories.user_repo import UserRepository
from app.schemas.user import UserCreate

logger = get_logger(__name__)


class UserService:
    def __init__(self):
        self.repo = UserRepository()

    async def create_user(self, db: AsyncSession, user_in: UserCreate) -> User:
        async with db.begin():
            user = await self.repo.create(db, user_in)
        logger.info("User created", user_id=user.id)
        return user

    async def list_users(self, db: AsyncSession) -> list[User]:
        async with db.begin():
            return await self.repo.list(db)
