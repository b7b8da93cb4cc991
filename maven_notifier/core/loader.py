"""
属性加载模块

读取配置文件并应用 notifyWith 覆盖。
文件缺失或无法读取时回退为空映射，调用方始终得到可用的结果。
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from ..config.properties import Property, lookup
from ..utils.logger import get_logger
from .properties_format import PropertiesFormatError, load_properties
from .source import ConfigurationSource


@dataclass(frozen=True)
class LoadResult:
    """属性加载结果"""
    properties: Dict[str, str] = field(default_factory=dict)
    location: Optional[Path] = None
    error: Optional[str] = None

    @property
    def fell_back(self) -> bool:
        """配置文件存在位置但读取失败，使用了默认值"""
        return self.error is not None


class PropertyLoader:
    """属性加载器"""

    def __init__(self):
        self.logger = get_logger(__name__)

    def load(self, location: Optional[Path], override: Optional[str] = None) -> LoadResult:
        """加载属性并应用覆盖

        Args:
            location: 配置文件路径，None表示没有配置文件
            override: notifyWith 覆盖值

        Returns:
            LoadResult: 合并后的属性映射
        """
        properties: Dict[str, str] = {}
        error = None

        if location is not None:
            try:
                properties = load_properties(location)
            except FileNotFoundError:
                self.logger.debug(f"配置文件不存在，使用默认配置: {location}")
            except (OSError, PropertiesFormatError) as e:
                self.logger.debug(f"无法读取配置文件: {location}", exc_info=True)
                error = f"{type(e).__name__}: {e}"
            else:
                self._report_unknown(location, properties)

        if override is not None:
            properties[Property.IMPLEMENTATION.key] = override

        return LoadResult(properties=properties, location=location, error=error)

    def _report_unknown(self, location: Path, properties: Dict[str, str]):
        """记录无法识别的属性键，通常是拼写错误"""
        unknown = sorted(key for key in properties if lookup(key) is None)
        if unknown:
            self.logger.debug(f"配置文件 {location} 中有无法识别的属性: {', '.join(unknown)}")


def read_properties(location: Optional[Path] = None, override: Optional[str] = None) -> Dict[str, str]:
    """读取合并后的原始属性映射，未指定位置时使用默认配置文件"""
    if location is None:
        location = ConfigurationSource().locate()
    return PropertyLoader().load(location, override).properties
