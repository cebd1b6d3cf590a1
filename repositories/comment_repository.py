# repositories/comment_repository.py
from typing import Optional, List, Tuple
from sqlalchemy import select, func, desc
from sqlalchemy.exc import IntegrityError
from extensions.database import db
from models.comment import Comment


class CommentRepository:
    """
    评论仓储（数据访问）层。
    - 不做业务校验，仅负责读写。
    - 写操作只 flush，由上层显式调用 commit()。
    """

    @staticmethod
    def add(comment: Comment) -> Comment:
        db.session.add(comment)
        db.session.flush()
        return comment

    @staticmethod
    def get_by_id(comment_id: int) -> Optional[Comment]:
        return db.session.get(Comment, comment_id)

    @staticmethod
    def list(
        post_id: Optional[int] = None,
        page: int = 1,
        page_size: int = 2,
    ) -> Tuple[List[Comment], int]:
        stmt = select(Comment)
        count_stmt = select(func.count(Comment.id))
        if post_id is not None:
            stmt = stmt.where(Comment.post_id == post_id)
            count_stmt = count_stmt.where(Comment.post_id == post_id)
        stmt = stmt.order_by(desc(Comment.published_at), desc(Comment.id))
        total = db.session.execute(count_stmt).scalar()
        stmt = stmt.offset((page - 1) * page_size).limit(page_size)
        items = db.session.execute(stmt).scalars().all()
        return items, total

    @staticmethod
    def update(comment: Comment, content: Optional[str] = None, published_at=None) -> Comment:
        if content is not None:
            comment.content = content
        if published_at is not None:
            comment.published_at = published_at
        db.session.flush()
        return comment

    @staticmethod
    def delete(comment: Comment):
        db.session.delete(comment)
        db.session.flush()

    @staticmethod
    def commit():
        try:
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            raise e
