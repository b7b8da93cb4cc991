"""
配置文件定位模块

配置文件与运行中的制品放在同一目录，无法确定位置时视为没有配置文件。
"""

import importlib.util
from pathlib import Path
from typing import Optional

from ..config.properties import PROPERTIES_FILE_NAME
from ..utils.logger import get_logger

_PACKAGE = __name__.split('.')[0]


class ConfigurationSource:
    """配置文件位置解析器"""

    def __init__(self, anchor: Optional[Path] = None, file_name: str = PROPERTIES_FILE_NAME):
        """初始化配置文件位置解析器

        Args:
            anchor: 制品所在目录，为None时根据已安装的包位置推断
            file_name: 配置文件名
        """
        self.anchor = Path(anchor) if anchor is not None else None
        self.file_name = file_name
        self.logger = get_logger(__name__)

    def locate(self) -> Optional[Path]:
        """计算配置文件路径，无法确定时返回None"""
        anchor = self.anchor if self.anchor is not None else self._artifact_directory()
        if anchor is None:
            return None
        return anchor / self.file_name

    def _artifact_directory(self) -> Optional[Path]:
        """包目录所在的目录，即制品所在位置"""
        try:
            spec = importlib.util.find_spec(_PACKAGE)
        except (ImportError, ValueError) as e:
            self.logger.debug(f"无法获取制品位置: {e}")
            return None

        origin = spec.origin if spec is not None else None
        if not origin or origin in ("built-in", "frozen"):
            self.logger.debug("无法获取制品位置，运行环境不明确")
            return None

        try:
            return Path(origin).resolve().parent.parent
        except (OSError, RuntimeError) as e:
            self.logger.debug(f"无法解析制品路径 {origin}: {e}")
            return None
