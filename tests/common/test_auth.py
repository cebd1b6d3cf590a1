# -*- coding: utf-8 -*-
"""token 校验与权限判定。"""
import pytest

from constants.roles import SystemRole
from extensions.jwt import TokenError, create_token, decode_token
from models import Comment
from utils.exceptions import AuthenticationError, AuthorizationError
from utils.permissions import EDIT_COMMENT, PermissionScope, assert_granted


def test_token_round_trip(app):
    token = create_token(5, "alice", SystemRole.USER.value)
    payload = decode_token(token)
    assert payload["sub"] == 5
    assert payload["username"] == "alice"
    assert payload["exp"] > payload["iat"]


def test_expired_token(app):
    token = create_token(5, "alice", SystemRole.USER.value, expires_seconds=-10)
    with pytest.raises(TokenError):
        decode_token(token)


def test_tampered_token(app):
    token = create_token(5, "alice", SystemRole.USER.value)
    header, payload, sig = token.split(".")
    with pytest.raises(TokenError):
        decode_token(f"{header}.{payload}.{sig[:-2]}xx")
    with pytest.raises(TokenError):
        decode_token("garbage")


def test_token_signed_with_other_secret(app):
    token = create_token(5, "alice", SystemRole.USER.value)
    app.config["JWT_SECRET_KEY"] = "rotated"
    with pytest.raises(TokenError):
        decode_token(token)


def _comment_by(author_id):
    comment = Comment(content="Great post!")
    comment.author_id = author_id
    return comment


@pytest.mark.parametrize(
    "scope, expected",
    [
        (PermissionScope(user_id=1, system_role=SystemRole.USER.value), True),
        (PermissionScope(user_id=2, system_role=SystemRole.USER.value), False),
        (PermissionScope(user_id=2, system_role=SystemRole.ADMIN.value), True),
    ],
)
def test_edit_comment_predicate(scope, expected):
    assert scope.is_granted(EDIT_COMMENT, _comment_by(1)) is expected


def test_unknown_attribute_is_denied():
    scope = PermissionScope(user_id=1, system_role=SystemRole.ADMIN.value)
    assert scope.is_granted("DELETE_POST", _comment_by(1)) is False


def test_assert_granted(app):
    with pytest.raises(AuthenticationError):
        assert_granted(EDIT_COMMENT, _comment_by(1), scope=None)
    with pytest.raises(AuthorizationError):
        assert_granted(
            EDIT_COMMENT,
            _comment_by(1),
            scope=PermissionScope(user_id=2, system_role=SystemRole.USER.value),
        )
