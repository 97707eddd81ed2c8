from __future__ import annotations

import base64
import binascii

from ..utils.errors import DataUrlErrorCode, MalformedInputError
from .normalize import normalize_bytes
from .patterns import BASE64_RE


def base64_decode(value: str) -> bytes:
    """base64 => bytes 同时校验 value 是否有效"""
    # 手动校验长度与字母表，不依赖解码器本身的容错行为。
    if (
        not isinstance(value, str)
        or len(value) % 4 != 0
        or not BASE64_RE.fullmatch(value)
    ):
        raise MalformedInputError(
            DataUrlErrorCode.MALFORMED_BASE64,
            "malformed data",
            detail={"checkpoint": "base64", "value": value},
        )
    try:
        return base64.b64decode(value, validate=True)
    except (ValueError, binascii.Error) as exc:
        raise MalformedInputError(
            DataUrlErrorCode.MALFORMED_BASE64,
            "malformed data",
            detail={"checkpoint": "base64", "value": value},
        ) from exc


def base64_encode(data: bytes | str) -> str:
    """bytes => base64"""
    raw = normalize_bytes(data)
    return base64.b64encode(raw).decode("ascii")
