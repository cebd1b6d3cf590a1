# utils/validators.py
"""
评论约束与校验执行器。

约束是按顺序排列的纯函数 (Comment) -> list[ConstraintViolation]，
执行器会跑完全部约束并汇总所有违规，不会在第一条失败时短路。
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence

from constants.comment import (
    CONTENT_MAX_LENGTH,
    CONTENT_MIN_LENGTH,
    ViolationKind,
    translate,
)
from utils.exceptions import ValidationError


@dataclass(frozen=True)
class ConstraintViolation:
    field: Optional[str]  # None 表示对象级约束
    kind: ViolationKind
    limit: Optional[int] = None
    locale: Optional[str] = None

    @property
    def message_key(self) -> str:
        return self.kind.message_key

    @property
    def message(self) -> str:
        return translate(self.message_key, self.locale, limit=self.limit)

    def to_dict(self) -> dict:
        return {
            "field": self.field,
            "kind": self.kind.value,
            "message_key": self.message_key,
            "message": self.message,
        }


Constraint = Callable[[object], List[ConstraintViolation]]


def content_not_blank(comment) -> List[ConstraintViolation]:
    content = comment.content
    if content is None or not content.strip():
        return [ConstraintViolation("content", ViolationKind.BLANK)]
    return []


def content_length(comment) -> List[ConstraintViolation]:
    content = comment.content
    if content is None:
        return []
    # 按字符（code point）计数
    if len(content) < CONTENT_MIN_LENGTH:
        return [ConstraintViolation("content", ViolationKind.TOO_SHORT, limit=CONTENT_MIN_LENGTH)]
    if len(content) > CONTENT_MAX_LENGTH:
        return [ConstraintViolation("content", ViolationKind.TOO_LONG, limit=CONTENT_MAX_LENGTH)]
    return []


def legit_comment(comment) -> List[ConstraintViolation]:
    if not comment.is_legit_comment():
        return [ConstraintViolation(None, ViolationKind.SPAM_DETECTED)]
    return []


COMMENT_CONSTRAINTS: Sequence[Constraint] = (
    content_not_blank,
    content_length,
    legit_comment,
)


def validate(obj, constraints: Iterable[Constraint] = COMMENT_CONSTRAINTS,
             locale: Optional[str] = None) -> List[ConstraintViolation]:
    """依次执行全部约束，返回汇总后的违规列表（空列表表示通过）。"""
    violations: List[ConstraintViolation] = []
    for constraint in constraints:
        for v in constraint(obj):
            violations.append(
                ConstraintViolation(v.field, v.kind, limit=v.limit, locale=locale)
            )
    return violations


def assert_valid(obj, constraints: Iterable[Constraint] = COMMENT_CONSTRAINTS,
                 locale: Optional[str] = None):
    """
    :raises ValidationError: 存在任一违规时，携带全部违规明细。
    """
    violations = validate(obj, constraints, locale=locale)
    if violations:
        raise ValidationError(violations)
