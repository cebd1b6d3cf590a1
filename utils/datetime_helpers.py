# -*- coding: utf-8 -*-
"""Datetime helpers for the persistence and API layers.

数据库中的 ``datetime`` 一律按 UTC 存储（无时区信息）。
接口层输出带 ``+00:00`` 偏移的 ISO 8601 字符串，输入则接受任意时区，
统一转换回 naive UTC 后再落库。
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from utils.exceptions import BizError


def utcnow() -> datetime:
    """当前 UTC 时间（naive），与数据库字段保持一致。"""

    return datetime.now(timezone.utc).replace(tzinfo=None)


def _ensure_utc(dt: datetime) -> datetime:
    """将给定 ``datetime`` 统一转换为带 UTC 时区的对象。"""

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_naive_utc(dt: datetime) -> datetime:
    return _ensure_utc(dt).replace(tzinfo=None)


def datetime_to_utc_iso(dt: Optional[datetime]) -> Optional[str]:
    """将 ``datetime`` 格式化为 UTC ISO 字符串。

    :param dt: 需要转换的时间; ``None`` 时直接返回 ``None``。
    :return: 带 ``+00:00`` 时区偏移的 ISO 8601 格式字符串。
    """

    if dt is None:
        return None
    return _ensure_utc(dt).isoformat()


def parse_iso_datetime(value) -> datetime:
    """解析前端传入的 ISO 8601 时间，返回 naive UTC。

    :raises BizError: 格式不正确时。
    """

    if isinstance(value, datetime):
        return to_naive_utc(value)
    if not isinstance(value, str) or not value.strip():
        raise BizError("时间格式不正确，需为 ISO 8601 字符串", 400)
    raw = value.strip()
    # fromisoformat 在 3.11 之前不认识结尾的 Z
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise BizError("时间格式不正确，需为 ISO 8601 字符串", 400) from exc
    return to_naive_utc(parsed)
