"""
配置解析流程

定位配置文件 → 加载属性 → 构建配置。
"""

from dataclasses import dataclass
from typing import Optional

from ..config.settings import Configuration
from .builder import ConfigurationBuilder
from .loader import LoadResult, PropertyLoader
from .source import ConfigurationSource


@dataclass(frozen=True)
class Resolution:
    """一次配置解析的结果"""
    configuration: Configuration
    load_result: LoadResult

    @property
    def fell_back(self) -> bool:
        """配置文件读取失败，已回退到默认配置"""
        return self.load_result.fell_back


def resolve(
    override: Optional[str] = None,
    source: Optional[ConfigurationSource] = None,
    loader: Optional[PropertyLoader] = None,
    builder: Optional[ConfigurationBuilder] = None
) -> Resolution:
    """解析配置

    Args:
        override: notifyWith 覆盖值
        source: 配置文件位置解析器
        loader: 属性加载器
        builder: 配置构建器

    Raises:
        InvalidPropertyValueError: 数值类属性格式错误
    """
    source = source or ConfigurationSource()
    loader = loader or PropertyLoader()
    builder = builder or ConfigurationBuilder()

    load_result = loader.load(source.locate(), override)
    return Resolution(
        configuration=builder.build(load_result.properties),
        load_result=load_result
    )


def resolve_configuration(override: Optional[str] = None, **kwargs) -> Configuration:
    """解析配置并只返回Configuration"""
    return resolve(override, **kwargs).configuration
