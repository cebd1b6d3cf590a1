# services/comment_service.py
import logging
from typing import Optional, Tuple, List

from flask import current_app
from sqlalchemy.exc import IntegrityError

from constants.comment import DEFAULT_ITEMS_PER_PAGE, MAX_ITEMS_PER_PAGE
from models.comment import Comment
from repositories.comment_repository import CommentRepository
from repositories.post_repository import PostRepository
from repositories.user_repository import UserRepository
from utils.datetime_helpers import parse_iso_datetime
from utils.exceptions import BizError, NotFoundError, ValidationError
from utils.permissions import (
    EDIT_COMMENT,
    PermissionScope,
    assert_authenticated,
    assert_granted,
)
from utils.validators import assert_valid

logger = logging.getLogger(__name__)


class CommentService:

    @staticmethod
    def _locale() -> str:
        return current_app.config.get("MESSAGE_LOCALE", "zh")

    @staticmethod
    def _validate(comment: Comment):
        try:
            assert_valid(comment, locale=CommentService._locale())
        except ValidationError as e:
            logger.warning(
                "comment rejected: %s",
                ",".join(v.message_key for v in e.violations),
            )
            raise

    @staticmethod
    def resolve_page_size(page_size: Optional[int]) -> int:
        cfg = current_app.config
        default = cfg.get("COMMENT_ITEMS_PER_PAGE", DEFAULT_ITEMS_PER_PAGE)
        upper = cfg.get("COMMENT_MAX_ITEMS_PER_PAGE", MAX_ITEMS_PER_PAGE)
        if not page_size:
            return default
        return max(1, min(int(page_size), upper))

    @staticmethod
    def create(
        post_id: Optional[int],
        content: Optional[str],
        *,
        permission_scope: PermissionScope | None,
    ) -> Comment:
        scope = assert_authenticated(permission_scope)
        if post_id is None:
            raise BizError("post 不能为空")
        post = PostRepository.get_by_id(post_id)
        if not post:
            raise NotFoundError("文章不存在")
        author = UserRepository.find_by_id(scope.user_id)
        if not author:
            raise NotFoundError("用户不存在")

        comment = Comment(content=content)
        CommentService._validate(comment)
        comment.post = post
        comment.author = author
        CommentRepository.add(comment)
        try:
            CommentRepository.commit()
        except IntegrityError:
            raise BizError("创建评论失败：数据约束冲突")
        logger.info("comment %s created on post %s by user %s", comment.id, post.id, author.id)
        return comment

    @staticmethod
    def get(comment_id: int) -> Comment:
        comment = CommentRepository.get_by_id(comment_id)
        if not comment:
            raise NotFoundError("评论不存在")
        return comment

    @staticmethod
    def list(
        post_id: Optional[int] = None,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> Tuple[List[Comment], int, int, int]:
        """返回 (items, total, 实际页码, 实际每页条数)。"""
        page = max(int(page or 1), 1)
        page_size = CommentService.resolve_page_size(page_size)
        items, total = CommentRepository.list(post_id=post_id, page=page, page_size=page_size)
        return items, total, page, page_size

    @staticmethod
    def update(
        comment_id: int,
        content: Optional[str] = None,
        published_at=None,
        *,
        permission_scope: PermissionScope | None,
    ) -> Comment:
        scope = assert_authenticated(permission_scope)
        comment = CommentService.get(comment_id)
        assert_granted(EDIT_COMMENT, comment, scope=scope)
        if published_at is not None:
            published_at = parse_iso_datetime(published_at)

        # 先校验候选值，通过后再改动持久化对象
        candidate = Comment(
            content=comment.content if content is None else content,
            published_at=published_at or comment.published_at,
        )
        CommentService._validate(candidate)

        CommentRepository.update(comment, content=content, published_at=published_at)
        try:
            CommentRepository.commit()
        except IntegrityError:
            raise BizError("更新评论失败：数据约束冲突")
        logger.info("comment %s updated by user %s", comment.id, scope.user_id)
        return comment

    @staticmethod
    def delete(comment_id: int, *, permission_scope: PermissionScope | None):
        scope = assert_authenticated(permission_scope)
        comment = CommentService.get(comment_id)
        assert_granted(EDIT_COMMENT, comment, scope=scope)
        CommentRepository.delete(comment)
        CommentRepository.commit()
        logger.info("comment %s deleted by user %s", comment_id, scope.user_id)
