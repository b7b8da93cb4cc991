"""
工具模块

提供日志、敏感信息脱敏等通用工具函数。
"""

from .logger import get_logger, setup_logging, LogContext
from .security import mask_secret

__all__ = [
    "get_logger", "setup_logging", "LogContext",
    "mask_secret"
]
