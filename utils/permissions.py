from __future__ import annotations

from dataclasses import dataclass

from flask import g

from constants.roles import SystemRole
from utils.exceptions import AuthenticationError, AuthorizationError

# 评论编辑/删除权限名，对应 can_edit_comment 判定
EDIT_COMMENT = "EDIT_COMMENT"


@dataclass
class PermissionScope:
    user_id: int
    system_role: str

    def is_system_admin(self) -> bool:
        return self.system_role == SystemRole.ADMIN.value

    def can_edit_comment(self, comment) -> bool:
        """作者本人或管理员（版主）可以修改/删除评论。"""
        if comment is None:
            return False
        if self.is_system_admin():
            return True
        return comment.author_id is not None and int(comment.author_id) == int(self.user_id)

    def is_granted(self, attribute: str, subject=None) -> bool:
        if attribute == EDIT_COMMENT:
            return self.can_edit_comment(subject)
        return False


def get_permission_scope(default=None) -> PermissionScope | None:
    return getattr(g, "permission_scope", default)


def build_permission_scope(user) -> PermissionScope:
    if not user:
        raise AuthenticationError("未登录")
    return PermissionScope(user_id=user.id, system_role=user.role)


def assert_authenticated(scope: PermissionScope | None = None) -> PermissionScope:
    scope = scope or get_permission_scope()
    if scope is None:
        raise AuthenticationError("需要登录后操作")
    return scope


def assert_granted(attribute: str, subject=None, scope: PermissionScope | None = None) -> PermissionScope:
    scope = assert_authenticated(scope)
    if not scope.is_granted(attribute, subject):
        raise AuthorizationError("无权限操作该评论")
    return scope
