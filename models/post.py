# -*- coding: utf-8 -*-
"""
post.py
--------------------------------------------------------------------
博客文章：
- 评论的归属对象，Comment.post 的反向端为 Post.comments。
- comments 按发布时间倒序加载；删除文章时级联删除其评论。
"""

from extensions.database import db
from utils.datetime_helpers import utcnow
from .mixins import TimestampMixin, COMMON_TABLE_ARGS


class Post(TimestampMixin, db.Model):
    __tablename__ = "post"
    __table_args__ = (COMMON_TABLE_ARGS,)

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False)
    summary = db.Column(db.String(255))
    content = db.Column(db.Text)
    published_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    author_id = db.Column(db.Integer, db.ForeignKey("user.id", ondelete="SET NULL"))

    author = db.relationship("User", backref=db.backref("posts", passive_deletes=True))
    comments = db.relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="Comment.published_at.desc()",
    )

    def __repr__(self):
        return f"<Post id={self.id} slug={self.slug}>"
