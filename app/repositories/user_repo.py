from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.repositories.base import BaseRepository
from app.schemas.user import UserCreate

class UserRepository(BaseRepository[User]):
    def __init__(self):
        super().__init__(User)

    async def create(self, db: AsyncSession, user_in: UserCreate) -> User:
        return await super().create(db, User(**user_in.model_dump()))
