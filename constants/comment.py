# constants/comment.py
"""
评论相关的常量集合
统一管理：
  - 内容长度限制
  - 违规类型 ViolationKind 及其消息 key（comment.blank 等）
  - 消息 key 的多语言文案
  - 序列化分组（read:comment / read:full:comment）
  - 列表分页默认值
"""

from enum import Enum


CONTENT_MIN_LENGTH = 5
CONTENT_MAX_LENGTH = 10000

# 反垃圾规则：正文中不允许出现的字符
SPAM_MARKER = "@"


class ViolationKind(Enum):
    BLANK = "blank"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    SPAM_DETECTED = "spam_detected"

    @property
    def message_key(self) -> str:
        return VIOLATION_MESSAGE_KEYS[self]


VIOLATION_MESSAGE_KEYS = {
    ViolationKind.BLANK: "comment.blank",
    ViolationKind.TOO_SHORT: "comment.too_short",
    ViolationKind.TOO_LONG: "comment.too_long",
    ViolationKind.SPAM_DETECTED: "comment.is_spam",
}

MESSAGES = {
    "zh": {
        "comment.blank": "评论内容不能为空。",
        "comment.too_short": "评论内容太短（至少 {limit} 个字符）。",
        "comment.too_long": "评论内容太长（最多 {limit} 个字符）。",
        "comment.is_spam": "评论内容被判定为垃圾信息。",
    },
    "en": {
        "comment.blank": "Please don't leave your comment blank!",
        "comment.too_short": "Comment is too short ({limit} characters minimum)",
        "comment.too_long": "Comment is too long ({limit} characters maximum)",
        "comment.is_spam": "The content of this comment is considered spam.",
    },
}

DEFAULT_LOCALE = "zh"


def translate(message_key: str, locale: str | None = None, **params) -> str:
    """按 locale 取文案，未命中时回退到默认语言，再回退为 key 本身。"""
    table = MESSAGES.get(locale or DEFAULT_LOCALE) or MESSAGES[DEFAULT_LOCALE]
    template = table.get(message_key) or MESSAGES[DEFAULT_LOCALE].get(message_key)
    if template is None:
        return message_key
    return template.format(**params)


# -------- 序列化分组 --------
GROUP_READ = "read:comment"
GROUP_READ_FULL = "read:full:comment"

SERIALIZATION_GROUPS = {
    GROUP_READ: ("id", "content", "published_at", "author", "post"),
    GROUP_READ_FULL: ("id", "content", "published_at", "author", "post"),
}

COLLECTION_GROUPS = (GROUP_READ,)
ITEM_GROUPS = (GROUP_READ, GROUP_READ_FULL)

# -------- 列表 --------
DEFAULT_ITEMS_PER_PAGE = 2
MAX_ITEMS_PER_PAGE = 30
