# repositories/post_repository.py
from typing import Optional

from extensions.database import db
from models.post import Post


class PostRepository:
    @staticmethod
    def get_by_id(post_id: int) -> Optional[Post]:
        if post_id is None:
            return None
        return db.session.get(Post, int(post_id))
