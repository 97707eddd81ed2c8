from .b64 import base64_decode, base64_encode
from .percent import percent_decode, percent_encode

__all__ = [
    "base64_decode",
    "base64_encode",
    "percent_decode",
    "percent_encode",
]
