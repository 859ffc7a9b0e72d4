import hashlib
import os
from typing import Any, Optional

from sqlalchemy import select

from playarena.models.user import User, UserStats
from playarena.repositories.base import CrudRepository

PBKDF2_ROUNDS = 200_000


def hash_password(password: str, salt: Optional[bytes] = None) -> str:
    salt = salt or os.urandom(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt, PBKDF2_ROUNDS)
    return f"{salt.hex()}${digest.hex()}"


class UserRepository(CrudRepository[User]):
    model = User

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.scalars(select(User).where(User.email == email)).first()

    def create(self, data: dict[str, Any]) -> User:
        return super().create({**data, "password": hash_password(data["password"])})


class UserStatsRepository(CrudRepository[UserStats]):
    model = UserStats

    def for_user(self, user_id: str) -> list[UserStats]:
        stmt = select(UserStats).where(UserStats.user_id == user_id).order_by(UserStats.sport)
        return list(self.db.scalars(stmt).all())

    def upsert(self, user_id: str, sport: str, data: dict[str, Any]) -> UserStats:
        stmt = select(UserStats).where(UserStats.user_id == user_id, UserStats.sport == sport)
        stats = self.db.scalars(stmt).first()
        if stats is None:
            return self.create({"user_id": user_id, "sport": sport, **data})

        for field, value in data.items():
            setattr(stats, field, value)
        self.db.commit()
        self.db.refresh(stats)
        return stats
