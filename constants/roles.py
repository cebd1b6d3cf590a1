from __future__ import annotations

from enum import Enum


class SystemRole(str, Enum):
    """
    博客系统全局角色：
    - ADMIN: 管理员 / 版主，可编辑、删除任意评论
    - USER: 普通注册用户，仅能管理自己的评论
    """

    ADMIN = "sys_admin"
    USER = "sys_user"
