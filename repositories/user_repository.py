# repositories/user_repository.py
from __future__ import annotations
from typing import Optional

from extensions.database import db
from models.user import User


class UserRepository:
    """用户只读仓储：账号由外部身份系统维护。"""

    @staticmethod
    def find_by_id(user_id: int) -> Optional[User]:
        if user_id is None:
            return None
        return db.session.get(User, int(user_id))
