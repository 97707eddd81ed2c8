from __future__ import annotations

import logging

from ..codec import base64_decode, percent_decode
from ..codec.patterns import DATA_URL_RE
from ..utils.errors import DataUrlErrorCode, MalformedInputError
from ..utils.log import StructuredLogEmitter
from .schema import DEFAULT_CHARSET, DEFAULT_MIME, ParsedDataUrl

structured_log = StructuredLogEmitter(logger=logging.getLogger(__name__))


def _decode_parameters(tokens: list[str]) -> dict[str, str]:
    """解析 `attribute=value` 片段，两侧均按百分号编码解码，重复键保留首个。"""
    parameters: dict[str, str] = {}
    for token in tokens:
        parts = token.split("=")
        if len(parts) != 2:
            raise MalformedInputError(
                DataUrlErrorCode.INVALID_PARAMETER,
                "invalid dataurl parameter",
                detail={"checkpoint": "parameter", "parameter": token},
            )
        attribute = percent_decode(parts[0]).decode("utf-8", errors="replace")
        value = percent_decode(parts[1]).decode("utf-8", errors="replace")
        if attribute not in parameters:
            parameters[attribute] = value
    return parameters


def parse(data_url: str) -> ParsedDataUrl:
    """
    解析 data URL：`data:[<mediatype>][;base64],<data>`。

    规则：
    - 第一个逗号分隔头部与负载
    - 头部最后一段为 `base64` 时负载按 base64 解码，否则按百分号编码解码
    - MIME 原样保留，参数的键和值均做百分号解码
    - 省略 MIME 且无参数 => `text/plain;charset=US-ASCII`
    - 省略 MIME 但给出 charset => `text/plain`
    """
    match = DATA_URL_RE.fullmatch(data_url) if isinstance(data_url, str) else None
    if not match:
        raise MalformedInputError(
            DataUrlErrorCode.MALFORMED_DATA_URL,
            "malformed dataurl",
            detail={"checkpoint": "structure", "data_url": data_url},
        )

    mediatype = match.group(1).split(";")
    payload = match.group(2)

    # base64 只可能是最后一段，需在提取 MIME 之前剔除。
    is_base64 = mediatype[-1] == "base64"
    if is_base64:
        mediatype.pop()

    mime = mediatype[0] if mediatype else ""
    parameters = _decode_parameters(mediatype[1:])

    mime_omitted = not mime
    if mime_omitted and not parameters:
        mime = DEFAULT_MIME
        parameters["charset"] = DEFAULT_CHARSET
    elif mime_omitted and "charset" in parameters:
        mime = DEFAULT_MIME

    data = base64_decode(payload) if is_base64 else percent_decode(payload)

    result = ParsedDataUrl(
        mime=mime,
        parameters=parameters,
        payload=data,
        is_base64=is_base64,
    )
    structured_log.debug("dataurl.parse", result.to_dict())
    return result


async def parse_async(data_url: str) -> ParsedDataUrl:
    return parse(data_url)
