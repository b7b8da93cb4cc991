"""
核心模块

包含配置文件定位、属性加载、操作系统识别和配置构建。
"""

from .builder import ConfigurationBuilder, InvalidPropertyValueError
from .loader import LoadResult, PropertyLoader, read_properties
from .os_classifier import OperatingSystem, classify, default_implementation
from .properties_format import PropertiesFormatError, load_properties, parse_properties
from .resolver import Resolution, resolve, resolve_configuration
from .source import ConfigurationSource

__all__ = [
    "ConfigurationBuilder", "InvalidPropertyValueError",
    "LoadResult", "PropertyLoader", "read_properties",
    "OperatingSystem", "classify", "default_implementation",
    "PropertiesFormatError", "load_properties", "parse_properties",
    "Resolution", "resolve", "resolve_configuration",
    "ConfigurationSource"
]
