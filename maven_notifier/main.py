"""
Maven 通知插件配置解析入口

构建生命周期钩子通过 ConfigurationParser 获取本次构建使用的通知配置。
配置文件缺失或损坏时静默使用默认配置，数值配置错误则直接抛出。
"""

from pathlib import Path
from typing import Dict, Mapping, Optional

from .config import Configuration, RuntimeSettings
from .core import (
    ConfigurationBuilder,
    ConfigurationSource,
    PropertyLoader,
    Resolution,
    resolve,
)
from .utils import LogContext, get_logger, setup_logging


class ConfigurationParser:
    """通知配置解析器"""

    def __init__(
        self,
        settings: Optional[RuntimeSettings] = None,
        source: Optional[ConfigurationSource] = None,
        builder: Optional[ConfigurationBuilder] = None
    ):
        """初始化配置解析器

        Args:
            settings: 运行设置，None时从环境变量加载
            source: 配置文件位置解析器
            builder: 配置构建器
        """
        self.settings = settings if settings is not None else RuntimeSettings()
        self.source = source or ConfigurationSource()
        self.loader = PropertyLoader()
        self.builder = builder or ConfigurationBuilder()
        self.logger = get_logger(__name__)
        self.last_resolution: Optional[Resolution] = None

    def get(self, properties: Optional[Mapping[str, str]] = None) -> Configuration:
        """获取通知配置

        Args:
            properties: 已合并的属性映射，为None时读取配置文件

        Raises:
            InvalidPropertyValueError: 数值类属性格式错误
        """
        if properties is not None:
            configuration = self.builder.build(properties)
        else:
            self.last_resolution = resolve(
                override=self.settings.notify_with,
                source=self.source,
                loader=self.loader,
                builder=self.builder
            )
            configuration = self.last_resolution.configuration

        self.logger.debug(f"Notifier will use configuration: {configuration}")
        return configuration

    def read_properties(self) -> Dict[str, str]:
        """读取合并了覆盖值的原始属性映射"""
        location = self.source.locate()
        return self.loader.load(location, self.settings.notify_with).properties

    @property
    def location(self) -> Optional[Path]:
        """配置文件路径"""
        return self.source.locate()


def load_configuration(settings: Optional[RuntimeSettings] = None, configure_logging: bool = False) -> Configuration:
    """独立运行时的便捷入口，可选地按运行设置初始化日志"""
    settings = settings if settings is not None else RuntimeSettings()
    if configure_logging:
        setup_logging(level=settings.logging.level, log_format=settings.logging.format)

    parser = ConfigurationParser(settings=settings)
    with LogContext(parser.logger, notify_with=settings.notify_with) as logger:
        configuration = parser.get()
        if parser.last_resolution.fell_back:
            logger.debug(f"配置文件读取失败，已使用默认配置: {parser.last_resolution.load_result.error}")
    return configuration
