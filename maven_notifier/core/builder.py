"""
配置构建模块

将合并后的属性映射按属性表转换为类型化的Configuration。
数值格式错误会直接抛出，不会静默回退到默认值。
"""

import re
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from ..config.properties import PROPERTY_TABLE, Property, ValueType
from ..config.settings import Configuration
from .os_classifier import HOST_OS_NAME, classify, default_implementation

_INTEGER = re.compile(r'[+-]?[0-9]+')


class InvalidPropertyValueError(ValueError):
    """属性值无法转换为声明的类型"""

    def __init__(self, key: str, value: Optional[str], reason: str):
        self.key = key
        self.value = value
        super().__init__(f"属性 {key} 的值无效 ({value!r}): {reason}")


def parse_integer(prop: Property, raw: Optional[str]) -> int:
    """按十进制解析整数"""
    if raw is None or not _INTEGER.fullmatch(raw):
        raise InvalidPropertyValueError(prop.key, raw, "不是有效的十进制整数")
    return int(raw, 10)


def parse_boolean(raw: Optional[str]) -> bool:
    """只有不区分大小写的 "true" 为真，其余一律为假"""
    return raw is not None and raw.lower() == "true"


class ConfigurationBuilder:
    """配置构建器"""

    def __init__(self, os_name: Optional[str] = None):
        """初始化配置构建器

        Args:
            os_name: 操作系统名称，None时使用进程启动时读取的主机名称
        """
        self.os_name = os_name if os_name is not None else HOST_OS_NAME
        self.operating_system = classify(self.os_name)
        self.default_implementation = default_implementation(self.operating_system)

    def raw_value(self, prop: Property, properties: Mapping[str, str]) -> Optional[str]:
        """获取属性的原始字符串值：文件或覆盖值优先，其次为默认值"""
        if prop.key in properties:
            return properties[prop.key]
        if prop.computed:
            return self.default_implementation
        return prop.static_default()

    def convert(self, prop: Property, raw: Optional[str]) -> Any:
        """将原始值转换为声明的类型"""
        if prop.value_type is ValueType.INTEGER:
            return parse_integer(prop, raw)
        if prop.value_type is ValueType.BOOLEAN:
            return parse_boolean(raw)
        if prop.value_type is ValueType.OPTIONAL_TEXT:
            return raw or None
        return raw

    def build(self, properties: Mapping[str, str]) -> Configuration:
        """构建配置，空映射得到完全默认的配置"""
        values: Dict[str, Any] = {}
        for name, prop in PROPERTY_TABLE.items():
            values[name] = self.convert(prop, self.raw_value(prop, properties))

        try:
            return Configuration(**values)
        except ValidationError as e:
            error = e.errors()[0]
            prop = PROPERTY_TABLE[error['loc'][0]]
            raise InvalidPropertyValueError(
                prop.key, self.raw_value(prop, properties), error['msg']
            ) from e
