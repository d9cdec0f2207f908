#!/usr/bin/env python3

from gitmeta.models.snapshot import MetadataSnapshot


def format_value(value: object) -> str:
    """格式化单个字段，None 输出为空字符串"""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_snapshot(snapshot: MetadataSnapshot) -> str:
    """格式化为按字段名对齐的多行文本

    Args:
        snapshot: 解析出的仓库信息

    Returns:
        形如 "pr_number    : 9001" 的多行文本，缺失的字段显示为 "-"
    """
    data = snapshot.model_dump()
    width = max(len(key) for key in data)
    lines = []
    for key, value in data.items():
        text = format_value(value) or "-"
        lines.append(f"{key:{width}} : {text}")
    return "\n".join(lines)
