from __future__ import annotations

from typing import Any

from ..utils.errors import InvalidArgumentError


def normalize_bytes(value: Any) -> bytes:
    """str 按 UTF-8 编码，bytes-like 复制为 bytes，其他类型拒绝。"""
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise InvalidArgumentError(
        "expected str or bytes-like object.",
        detail={"value_type": type(value).__name__},
    )
