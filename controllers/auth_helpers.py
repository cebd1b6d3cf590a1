# controllers/auth_helpers.py
from __future__ import annotations

from functools import wraps

from flask import g, request

from extensions.jwt import decode_token, TokenError
from repositories.user_repository import UserRepository
from utils.permissions import PermissionScope, build_permission_scope
from utils.response import json_response


def _extract_bearer(auth_header: str | None) -> str | None:
    if not auth_header:
        return None
    if auth_header.startswith("Bearer "):
        token = auth_header[7:].strip()
        return token or None
    return None


def _resolve_user_from_token(token: str):
    """
    解析 token 并返回 user 对象。
    失败时抛出携带提示文案的 ValueError，供调用方决定如何返回。
    """
    try:
        payload = decode_token(token)
    except TokenError:
        raise ValueError("Token 无效或已过期")

    user_id = payload.get("sub")
    if user_id is None:
        raise ValueError("Token 载荷无效")
    user = UserRepository.find_by_id(user_id)
    if not user or not getattr(user, "active", False):
        raise ValueError("用户不存在或被禁用")
    return user


def _attach_scope(user) -> PermissionScope:
    scope = build_permission_scope(user)
    g.permission_scope = scope
    return scope


def auth_required():
    """
    鉴权装饰器（完整登录态）：
      - 验证 Authorization: Bearer <token>
      - 解析 token -> user
      - 构建 PermissionScope，注入 g.permission_scope
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            g.permission_scope = None
            token = _extract_bearer(request.headers.get("Authorization"))
            if not token:
                return json_response(code=401, message="缺少或无效 Authorization")
            try:
                user = _resolve_user_from_token(token)
            except ValueError as ve:
                return json_response(code=401, message=str(ve))

            _attach_scope(user)

            return fn(*args, **kwargs)

        return wrapper

    return decorator
