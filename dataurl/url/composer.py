from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..codec import base64_encode, percent_encode
from ..utils.errors import InvalidArgumentError
from ..utils.log import StructuredLogEmitter
from .schema import ParsedDataUrl

structured_log = StructuredLogEmitter(logger=logging.getLogger(__name__))

_BYTES_TYPES = (bytes, bytearray, memoryview)


def _as_record(record: ParsedDataUrl | Mapping[str, Any]) -> ParsedDataUrl:
    if isinstance(record, ParsedDataUrl):
        return record
    return ParsedDataUrl.from_mapping(record)


def compose(record: ParsedDataUrl | Mapping[str, Any]) -> str:
    """根据结构化记录组装 data URL；仅在 payload 不是字节序列时失败。"""
    info = _as_record(record)
    if not isinstance(info.payload, _BYTES_TYPES):
        raise InvalidArgumentError(
            "expected payload to be a bytes-like object.",
            detail={"payload_type": type(info.payload).__name__},
        )

    mediatype = [info.mime or ""]
    # 参数的键和值都按百分号编码输出，编码对任意输入都成立。
    for key, value in (info.parameters or {}).items():
        mediatype.append(f"{percent_encode(key)}={percent_encode(value)}")

    base64_marker = ""
    encode = percent_encode
    if info.is_base64:
        base64_marker = ";base64"
        encode = base64_encode

    data_url = f"data:{';'.join(mediatype)}{base64_marker},{encode(info.payload)}"
    structured_log.debug(
        "dataurl.compose",
        {
            "mime": info.mime,
            "parameters": dict(info.parameters or {}),
            "is_base64": info.is_base64,
            "data_url": data_url,
        },
    )
    return data_url


async def compose_async(record: ParsedDataUrl | Mapping[str, Any]) -> str:
    return compose(record)
