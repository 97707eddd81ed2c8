from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..utils.errors import InvalidArgumentError

DEFAULT_MIME = "text/plain"
DEFAULT_CHARSET = "US-ASCII"


@dataclass(slots=True, frozen=True)
class ParsedDataUrl:
    mime: str = ""
    """媒体类型原文，解析成功后不为空"""
    parameters: dict[str, str] = field(default_factory=dict)
    """已解码的参数，重复键仅保留首次出现的值"""
    payload: bytes = b""
    """解码后的原始字节"""
    is_base64: bool = False
    """负载是否为 base64 编码"""

    @classmethod
    def from_mapping(cls, raw: Any) -> ParsedDataUrl:
        """从键值映射构造记录；缺失字段取默认值，payload 原样透传。"""
        if not isinstance(raw, Mapping):
            raise InvalidArgumentError(
                "data url record must be a mapping object.",
                detail={"record_type": type(raw).__name__},
            )
        parameters = raw.get("parameters")
        return cls(
            mime=raw.get("mime") or "",
            parameters=dict(parameters) if parameters else {},
            payload=raw.get("payload", b""),
            is_base64=bool(raw.get("is_base64", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "mime": self.mime,
            "parameters": dict(self.parameters),
            "payload": self.payload,
            "is_base64": self.is_base64,
        }
