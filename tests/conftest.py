from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import load_dotenv

bootstrap_package_root = Path(__file__).resolve().parents[1]
if str(bootstrap_package_root) not in sys.path:
    # 将仓库根目录放到导入搜索路径最前面，确保测试能直接导入 dataurl 包。
    sys.path.insert(0, str(bootstrap_package_root))

load_dotenv(bootstrap_package_root / ".env", override=False)


def pytest_configure(config) -> None:
    """测试时开启日志输出，级别可由 DATAURL_TEST_LOG_LEVEL 覆盖。"""
    config.option.log_cli = True
    config.option.log_cli_level = (
        os.getenv("DATAURL_TEST_LOG_LEVEL", "").strip().upper() or "DEBUG"
    )
