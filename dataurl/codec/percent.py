from __future__ import annotations

from urllib.parse import unquote_to_bytes

from ..utils.errors import DataUrlErrorCode, MalformedInputError
from .normalize import normalize_bytes
from .patterns import PERCENT_ENCODED_RE, UNRESERVED_RE


def percent_decode(value: str) -> bytes:
    """百分号编码 => bytes，解码前先整体校验。

    只允许 unreserved 字符与 `%XX` 三元组，任何其他字符（包括不完整的
    `%X`）都会使整个输入被拒绝，不做部分解码。
    """
    if not isinstance(value, str) or not PERCENT_ENCODED_RE.fullmatch(value):
        raise MalformedInputError(
            DataUrlErrorCode.MALFORMED_PERCENT_ENCODING,
            "malformed data",
            detail={"checkpoint": "percent-encoding", "value": value},
        )
    # 校验通过后只剩 unreserved 与合法三元组，unquote_to_bytes 的结果与逐段解码一致。
    return unquote_to_bytes(value)


def percent_encode(data: bytes | str) -> str:
    """bytes => 百分号编码，非 unreserved 字节输出为小写 `%xx`。"""
    raw = normalize_bytes(data)
    parts: list[str] = []
    for byte in raw:
        char = chr(byte)
        if UNRESERVED_RE.fullmatch(char):
            parts.append(char)
        else:
            parts.append(f"%{byte:02x}")
    return "".join(parts)
