from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum
from typing import Any

from .log import summarize_log_value


class DataUrlErrorCode(str, Enum):
    MALFORMED_DATA_URL = "MALFORMED_DATA_URL"
    INVALID_PARAMETER = "INVALID_PARAMETER"
    MALFORMED_PERCENT_ENCODING = "MALFORMED_PERCENT_ENCODING"
    MALFORMED_BASE64 = "MALFORMED_BASE64"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


class DataUrlException(Exception):
    """data URL 编解码异常基类，`detail` 记录失败的校验点与输入摘要。"""

    def __init__(
        self,
        code: DataUrlErrorCode,
        message: str,
        detail: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.detail = dict(detail) if detail else {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "message": self.message,
            "detail": self.detail,
        }

    def __str__(self) -> str:
        base = f"[{self.code.value}] {self.message}"
        if not self.detail:
            return base
        detail_json = json.dumps(
            summarize_log_value(self.detail), ensure_ascii=False, default=str
        )
        return f"{base} detail={detail_json}"


class MalformedInputError(DataUrlException, ValueError):
    """输入文本不符合 data URL / 百分号编码 / base64 语法。"""


class InvalidArgumentError(DataUrlException, TypeError):
    """组装 data URL 时收到了类型不正确的参数。"""

    def __init__(
        self,
        message: str,
        detail: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(DataUrlErrorCode.INVALID_ARGUMENT, message, detail)
