"""
配置管理模块

提供属性表、解析后的通知配置模型以及进程级运行设置。
"""

from .properties import (
    COMPUTED,
    NOTIFY_WITH,
    PROPERTIES_FILE_NAME,
    PROPERTY_TABLE,
    Property,
    ValueType,
    lookup,
)
from .settings import Configuration, LoggingConfig, RuntimeSettings

__all__ = [
    "COMPUTED", "NOTIFY_WITH", "PROPERTIES_FILE_NAME", "PROPERTY_TABLE",
    "Property", "ValueType", "lookup",
    "Configuration", "LoggingConfig", "RuntimeSettings"
]
