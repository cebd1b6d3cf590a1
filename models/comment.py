# -*- coding: utf-8 -*-
"""
comment.py
--------------------------------------------------------------------
博客评论实体：
- 多对一关联 Post（post_id）与 User（author_id），均为非拥有引用，
  生命周期由文章/用户自身管理。
- published_at 在构造时默认取当前 UTC 时间，之后可修改。
- id 在入库时分配，分配后不可再改。
校验：
- 字段/对象级约束见 utils/validators.py，由服务层在写入前统一执行。
- is_legit_comment 是最朴素的反垃圾规则：正文包含 "@" 即视为垃圾评论。
序列化：
- 字段分组见 constants/comment.py 的 SERIALIZATION_GROUPS。
"""

from sqlalchemy.orm import validates

from constants.comment import SPAM_MARKER
from extensions.database import db
from utils.datetime_helpers import utcnow, datetime_to_utc_iso
from .mixins import COMMON_TABLE_ARGS


class Comment(db.Model):
    __tablename__ = "comment"
    __table_args__ = (
        db.Index("ix_comment_post_published", "post_id", "published_at"),
        COMMON_TABLE_ARGS,
    )

    id = db.Column(db.Integer, primary_key=True)
    post_id = db.Column(db.Integer, db.ForeignKey("post.id", ondelete="CASCADE"), nullable=False)
    content = db.Column(db.Text, nullable=False)
    published_at = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)
    author_id = db.Column(db.Integer, db.ForeignKey("user.id"), nullable=False)

    post = db.relationship("Post", back_populates="comments")
    author = db.relationship("User", backref=db.backref("comments"))

    def __init__(self, **kwargs):
        kwargs.setdefault("published_at", utcnow())
        super().__init__(**kwargs)

    def __repr__(self):
        return f"<Comment id={self.id} post_id={self.post_id} author_id={self.author_id}>"

    @validates("id")
    def _validate_id(self, key, value):
        current = self.__dict__.get("id")
        if current is not None and value != current:
            raise ValueError("评论 id 分配后不可修改")
        return value

    @validates("post", "author")
    def _validate_reference(self, key, value):
        if value is None:
            raise ValueError(f"{key} 不能为空")
        return value

    @validates("published_at")
    def _validate_published_at(self, key, value):
        if value is None:
            raise ValueError("published_at 不能为空")
        return value

    def is_legit_comment(self) -> bool:
        if self.content is None:
            return True
        return SPAM_MARKER not in self.content

    # 序列化字段取值，供 utils/serializer.py 按分组读取
    def serialize_field(self, name: str):
        if name == "published_at":
            return datetime_to_utc_iso(self.published_at)
        if name == "post":
            return self.post_id if self.post_id is not None else getattr(self.post, "id", None)
        if name == "author":
            return self.author_id if self.author_id is not None else getattr(self.author, "id", None)
        return getattr(self, name)
