"""RFC 3986 / RFC 4648 相关正则。

参见 https://tools.ietf.org/html/rfc3986#appendix-A
"""

from __future__ import annotations

import re

UNRESERVED = r"[A-Za-z0-9\-._~]"
ESCAPED = r"%[A-Fa-f0-9]{2}"

UNRESERVED_RE = re.compile(UNRESERVED)
PERCENT_ENCODED_RE = re.compile(rf"(?:{UNRESERVED}|{ESCAPED})*")

# 标准字母表，结尾最多两个 `=`，不允许中间出现填充。
BASE64_RE = re.compile(r"[A-Za-z0-9+/]*={0,2}")

# 分组 1：[mediatype][;base64]，分组 2：data
DATA_URL_RE = re.compile(r"data:(.*?),(.*)")
