# -*- coding: utf-8 -*-
"""
__init__.py
--------------------------------------------------------------------
汇总导入所有模型，使得：
- db.create_all() 能发现全部表。
- 外部模块可简化引用：from models import Comment, Post
注意：
- 避免循环导入：各模型仅在这里集中 import。
"""

from .mixins import TimestampMixin
from .user import User
from .post import Post
from .comment import Comment

__all__ = [
    "TimestampMixin",
    "User", "Post", "Comment",
]
