# engine/log.py
from __future__ import annotations

import os
import logging
from typing import Optional

LOGGER_NAME = "mini_dbase"
DEFAULT_LOG_DIR = "__logs__"
DEFAULT_LOG_FILE = "mini_dbase.log"

_handler: Optional[logging.Handler] = None

# 未启用文件日志时保持静默
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str = "") -> logging.Logger:
    """返回 mini_dbase 命名空间下的子 logger，例如 get_logger("table") -> mini_dbase.table"""
    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def enable_log(path: Optional[str] = None, level: int = logging.DEBUG) -> str:
    """
    开启文件日志（仅初始化一次）：
    - 默认写入 __logs__/mini_dbase.log
    - 记录建表、插入、查询以及被忽略的 WHERE 子句
    返回实际使用的日志路径。
    """
    global _handler
    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        return getattr(_handler, "baseFilename", path or "")
    if path is None:
        os.makedirs(DEFAULT_LOG_DIR, exist_ok=True)
        path = os.path.join(DEFAULT_LOG_DIR, DEFAULT_LOG_FILE)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    _handler = handler
    return handler.baseFilename


def disable_log() -> None:
    """关闭文件日志（移除并关闭 handler）"""
    global _handler
    if _handler is None:
        return
    logger = logging.getLogger(LOGGER_NAME)
    logger.removeHandler(_handler)
    _handler.close()
    _handler = None
    logger.setLevel(logging.NOTSET)
