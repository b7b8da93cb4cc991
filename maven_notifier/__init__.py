"""
Maven 通知插件配置

解析通知插件的运行时配置：读取与制品同目录的 maven-notifier.properties，
与默认值合并，应用 notifyWith 覆盖，生成类型化的通知配置。
"""

from .config import Configuration, RuntimeSettings
from .core import InvalidPropertyValueError, resolve, resolve_configuration
from .main import ConfigurationParser, load_configuration

__version__ = "1.0.0"

__all__ = [
    "Configuration", "RuntimeSettings",
    "InvalidPropertyValueError", "resolve", "resolve_configuration",
    "ConfigurationParser", "load_configuration",
    "__version__"
]
