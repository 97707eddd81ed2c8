from __future__ import annotations

import pytest
from dataurl.codec import percent_decode, percent_encode
from dataurl.utils.errors import (
    DataUrlErrorCode,
    InvalidArgumentError,
    MalformedInputError,
)


def test_percent_encode_keeps_unreserved_and_escapes_others() -> None:
    """验证：unreserved 字符原样输出，其余字节编码为小写 `%xx`。"""
    assert percent_encode(b"AZaz09-._~") == "AZaz09-._~"
    assert percent_encode(b"hello world") == "hello%20world"
    assert percent_encode(b"\x01") == "%01"
    assert percent_encode(b"\xff/+") == "%ff%2f%2b"


def test_percent_encode_accepts_text_as_utf8() -> None:
    """验证：str 输入按 UTF-8 编码后再做百分号编码。"""
    assert percent_encode("vé") == "v%c3%a9"


def test_percent_encode_rejects_non_bytes() -> None:
    """验证：既不是 str 也不是 bytes-like 的输入会抛出 InvalidArgumentError。"""
    with pytest.raises(InvalidArgumentError, match="expected str or bytes-like"):
        percent_encode(5)  # type: ignore[arg-type]


def test_percent_decode_mixed_runs_and_triplets() -> None:
    """验证：unreserved 片段与 `%XX` 三元组按原顺序拼接为字节。"""
    assert percent_decode("hello%20world") == b"hello world"
    assert percent_decode("%C3%a9x") == b"\xc3\xa9x"
    assert percent_decode("%00%ff%80") == b"\x00\xff\x80"
    assert percent_decode("") == b""


@pytest.mark.parametrize(
    "value",
    ["not%2", "%zz", "a b", "a+b", "é", "100%", "%%41", "a,b"],
)
def test_percent_decode_rejects_malformed_input(value: str) -> None:
    """验证：出现非法字符或不完整三元组时整体拒绝。"""
    with pytest.raises(MalformedInputError) as exc_info:
        percent_decode(value)

    assert exc_info.value.code is DataUrlErrorCode.MALFORMED_PERCENT_ENCODING


def test_percent_round_trip_for_binary_data() -> None:
    """验证：任意字节序列编码后都能被解码回原值。"""
    samples = [b"", bytes(range(256)), b"\x00" * 3, "中文 text".encode("utf-8")]
    for sample in samples:
        assert percent_decode(percent_encode(sample)) == sample
