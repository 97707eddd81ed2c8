from .composer import compose, compose_async
from .parser import parse, parse_async
from .schema import DEFAULT_CHARSET, DEFAULT_MIME, ParsedDataUrl

__all__ = [
    "DEFAULT_CHARSET",
    "DEFAULT_MIME",
    "ParsedDataUrl",
    "compose",
    "compose_async",
    "parse",
    "parse_async",
]
