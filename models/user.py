# -*- coding: utf-8 -*-
"""
user.py
--------------------------------------------------------------------
用户实体（评论作者 / 文章作者）。
说明：
- 账号由外部身份系统维护，本服务只读取，不提供注册与登录。
- role 字段为全局角色：sys_user / sys_admin。
- active 控制账号启用状态，禁用后 token 不再被接受。
"""

from extensions.database import db
from .mixins import TimestampMixin, COMMON_TABLE_ARGS
from constants.roles import SystemRole


class User(TimestampMixin, db.Model):
    __tablename__ = "user"
    __table_args__ = (COMMON_TABLE_ARGS,)

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(50), unique=True, nullable=False, index=True)
    full_name = db.Column(db.String(255))
    email = db.Column(db.String(120), unique=True)
    role = db.Column(db.String(32), nullable=False, server_default=SystemRole.USER.value)
    active = db.Column(db.Boolean, nullable=False, server_default="1")

    def __repr__(self):
        return f"<User id={self.id} username={self.username} role={self.role}>"

