from .codec import base64_decode, base64_encode, percent_decode, percent_encode
from .url import (
    DEFAULT_CHARSET,
    DEFAULT_MIME,
    ParsedDataUrl,
    compose,
    compose_async,
    parse,
    parse_async,
)
from .utils.errors import (
    DataUrlErrorCode,
    DataUrlException,
    InvalidArgumentError,
    MalformedInputError,
)

__all__ = [
    "DEFAULT_CHARSET",
    "DEFAULT_MIME",
    "DataUrlErrorCode",
    "DataUrlException",
    "InvalidArgumentError",
    "MalformedInputError",
    "ParsedDataUrl",
    "base64_decode",
    "base64_encode",
    "compose",
    "compose_async",
    "parse",
    "parse_async",
    "percent_decode",
    "percent_encode",
]
