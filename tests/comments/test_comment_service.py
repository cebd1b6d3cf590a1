# -*- coding: utf-8 -*-
"""单元测试：CommentService 的创建、查询、分页、修改与删除。"""
from datetime import datetime, timedelta

import pytest

from constants.roles import SystemRole
from extensions.database import db
from models import Comment
from services.comment_service import CommentService
from utils.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BizError,
    NotFoundError,
    ValidationError,
)
from utils.permissions import build_permission_scope


def _seed_comments(post, author, count, start=datetime(2024, 1, 1, 8, 0, 0)):
    comments = []
    for i in range(count):
        c = Comment(
            content=f"comment number {i}",
            post=post,
            author=author,
            published_at=start + timedelta(minutes=i),
        )
        db.session.add(c)
        comments.append(c)
    db.session.commit()
    return comments


def test_create_assigns_author_post_and_id(make_user, make_post):
    user = make_user()
    post = make_post()

    comment = CommentService.create(
        post.id, "Great post!", permission_scope=build_permission_scope(user)
    )

    assert comment.id is not None
    assert comment.post_id == post.id
    assert comment.author_id == user.id
    assert comment.published_at is not None
    assert db.session.get(Comment, comment.id) is comment


def test_create_requires_authentication(make_post):
    post = make_post()
    with pytest.raises(AuthenticationError):
        CommentService.create(post.id, "Great post!", permission_scope=None)


def test_create_missing_post(make_user):
    scope = build_permission_scope(make_user())
    with pytest.raises(NotFoundError):
        CommentService.create(999, "Great post!", permission_scope=scope)
    with pytest.raises(BizError) as exc_info:
        CommentService.create(None, "Great post!", permission_scope=scope)
    assert exc_info.value.code == 400


@pytest.mark.parametrize(
    "content, key",
    [
        ("Hi", "comment.too_short"),
        ("a" * 10001, "comment.too_long"),
        ("contact me at foo@bar.com please", "comment.is_spam"),
        ("   ", "comment.blank"),
    ],
)
def test_create_rejects_invalid_content_without_persisting(make_user, make_post, content, key):
    user = make_user()
    post = make_post()

    with pytest.raises(ValidationError) as exc_info:
        CommentService.create(post.id, content, permission_scope=build_permission_scope(user))

    assert key in [v.message_key for v in exc_info.value.violations]
    assert db.session.query(Comment).count() == 0


def test_get_missing_comment(app):
    with pytest.raises(NotFoundError):
        CommentService.get(12345)


def test_list_is_newest_first_with_default_page_size(make_user, make_post):
    user = make_user()
    post = make_post()
    seeded = _seed_comments(post, user, 5)

    items, total, page, page_size = CommentService.list()

    assert total == 5
    assert (page, page_size) == (1, 2)
    assert [c.id for c in items] == [seeded[4].id, seeded[3].id]

    items, _, page, _ = CommentService.list(page=3)
    assert page == 3
    assert [c.id for c in items] == [seeded[0].id]


def test_list_filters_by_post(make_user, make_post):
    user = make_user()
    post_a = make_post()
    post_b = make_post()
    _seed_comments(post_a, user, 3)
    only_b = _seed_comments(post_b, user, 1)

    items, total, _, _ = CommentService.list(post_id=post_b.id, page_size=10)

    assert total == 1
    assert [c.id for c in items] == [only_b[0].id]


def test_list_page_size_is_clamped(app, make_user, make_post):
    _seed_comments(make_post(), make_user(), 3)
    assert CommentService.resolve_page_size(None) == 2
    assert CommentService.resolve_page_size(0) == 2
    assert CommentService.resolve_page_size(-4) == 1
    assert CommentService.resolve_page_size(10_000) == app.config["COMMENT_MAX_ITEMS_PER_PAGE"]

    items, total, page, page_size = CommentService.list(page=0)
    assert total == 3 and len(items) == 2
    assert (page, page_size) == (1, 2)


def test_update_by_author_revalidates(make_user, make_post):
    user = make_user()
    (comment,) = _seed_comments(make_post(), user, 1)
    scope = build_permission_scope(user)

    updated = CommentService.update(
        comment.id,
        content="An edited comment",
        published_at="2024-02-03T04:05:06Z",
        permission_scope=scope,
    )
    assert updated.content == "An edited comment"
    assert updated.published_at == datetime(2024, 2, 3, 4, 5, 6)

    with pytest.raises(ValidationError):
        CommentService.update(comment.id, content="me@example", permission_scope=scope)
    db.session.expire_all()
    assert db.session.get(Comment, comment.id).content == "An edited comment"


def test_update_by_other_user_is_forbidden_before_mutation(make_user, make_post):
    author = make_user()
    stranger = make_user()
    (comment,) = _seed_comments(make_post(), author, 1)

    with pytest.raises(AuthorizationError):
        CommentService.update(
            comment.id, content="Hijacked content", permission_scope=build_permission_scope(stranger)
        )
    assert comment.content == "comment number 0"


def test_admin_can_update_and_delete_any_comment(make_user, make_post):
    author = make_user()
    admin = make_user(role=SystemRole.ADMIN.value)
    (comment,) = _seed_comments(make_post(), author, 1)
    scope = build_permission_scope(admin)

    CommentService.update(comment.id, content="Moderated text", permission_scope=scope)
    CommentService.delete(comment.id, permission_scope=scope)

    assert db.session.get(Comment, comment.id) is None


def test_delete_by_other_user_is_forbidden(make_user, make_post):
    author = make_user()
    (comment,) = _seed_comments(make_post(), author, 1)

    with pytest.raises(AuthorizationError):
        CommentService.delete(comment.id, permission_scope=build_permission_scope(make_user()))
    with pytest.raises(AuthenticationError):
        CommentService.delete(comment.id, permission_scope=None)
    assert db.session.get(Comment, comment.id) is not None


def test_update_rejects_bad_timestamp(make_user, make_post):
    user = make_user()
    (comment,) = _seed_comments(make_post(), user, 1)
    with pytest.raises(BizError) as exc_info:
        CommentService.update(
            comment.id, published_at="yesterday", permission_scope=build_permission_scope(user)
        )
    assert exc_info.value.code == 400


def test_deleting_post_removes_its_comments(make_user, make_post):
    post = make_post()
    _seed_comments(post, make_user(), 2)

    db.session.delete(post)
    db.session.commit()

    assert db.session.query(Comment).count() == 0
