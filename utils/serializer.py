# utils/serializer.py
from typing import Dict, Iterable, Sequence


def fields_for_groups(groups: Iterable[str], group_map: Dict[str, Sequence[str]]) -> list[str]:
    """按分组顺序合并字段，去重且保持首次出现的顺序。"""
    fields: list[str] = []
    for group in groups:
        if group not in group_map:
            raise KeyError(f"未知序列化分组: {group}")
        for name in group_map[group]:
            if name not in fields:
                fields.append(name)
    return fields


def normalize(obj, groups: Iterable[str], group_map: Dict[str, Sequence[str]]) -> dict:
    """
    把实体按分组输出为 dict。
    实体若实现 serialize_field(name) 则由其负责取值（引用、时间格式化等），
    否则直接 getattr。
    """
    getter = getattr(obj, "serialize_field", None)
    out = {}
    for name in fields_for_groups(groups, group_map):
        out[name] = getter(name) if getter else getattr(obj, name)
    return out
