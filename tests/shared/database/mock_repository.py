from typing import Optional
from sqlalchemy import select

from src.shared.database.base_repo import BaseRepository
from tests.shared.database.mock_entities import UserEntity, UserModel


class UserRepository(BaseRepository[UserEntity, UserModel]):
    async def get_by_id(self, user_id: int) -> Optional[UserModel]:
        return await self.find_one(select(UserEntity).where(UserEntity.id == user_id))

    async def get_by_email(self, email: str) -> Optional[UserModel]:
        return await self.find_one(select(UserEntity).where(UserEntity.email == email))

    async def get_all(self) -> list[UserModel]:
        return await self.find_all(select(UserEntity).order_by(UserEntity.id))

    async def get_names(self) -> list[str]:
        return await self.find_scalars(select(UserEntity.name).order_by(UserEntity.id))
