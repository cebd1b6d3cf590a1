# -*- coding: utf-8 -*-
"""
公共 fixture：
- app: 使用内存 SQLite 的 Flask 应用，每个用例重新建表
- client: Flask 测试客户端
- make_user / make_post: 直接落库的基础数据
- auth_headers: 为指定用户签发 Bearer token
"""
import uuid
import pytest

from app import create_app
from constants.roles import SystemRole
from extensions.database import db
from extensions.jwt import create_token
from models import Post, User


def _rand_suffix(n=8):
    return uuid.uuid4().hex[:n]


@pytest.fixture()
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_user(app):
    def _create(role: str = SystemRole.USER.value, active: bool = True, **overrides):
        sfx = _rand_suffix()
        user = User(
            username=overrides.pop("username", f"user_{sfx}"),
            full_name=overrides.pop("full_name", f"Test User {sfx}"),
            email=overrides.pop("email", f"user_{sfx}@example.com"),
            role=role,
            active=active,
            **overrides,
        )
        db.session.add(user)
        db.session.commit()
        return user
    return _create


@pytest.fixture()
def make_post(app, make_user):
    def _create(author=None, **overrides):
        author = author or make_user()
        sfx = _rand_suffix()
        post = Post(
            title=overrides.pop("title", f"Post {sfx}"),
            slug=overrides.pop("slug", f"post-{sfx}"),
            summary=overrides.pop("summary", "summary"),
            content=overrides.pop("content", "Lorem ipsum dolor sit amet"),
            author=author,
            **overrides,
        )
        db.session.add(post)
        db.session.commit()
        return post
    return _create


@pytest.fixture()
def auth_headers(app):
    def _headers(user):
        token = create_token(user.id, user.username, user.role)
        return {"Authorization": f"Bearer {token}"}
    return _headers
