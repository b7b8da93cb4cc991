"""
日志工具模块

基于标准库logging，提供JSON和文本两种输出格式以及附加字段支持。
"""

import json
import sys
import logging
import logging.handlers
from pathlib import Path
from typing import Any, Dict, Optional, Union

# LogRecord上附加字段的属性名
EXTRA_FIELDS = "extra_fields"


class JSONFormatter(logging.Formatter):
    """JSON格式化器，每条日志一行"""

    def format(self, record):
        log_entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "source": f"{record.module}:{record.lineno}",
        }
        log_entry.update(getattr(record, EXTRA_FIELDS, {}))

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """文本格式化器"""

    def __init__(self):
        fmt = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        super().__init__(fmt, datefmt='%Y-%m-%d %H:%M:%S')


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format.lower() == 'json':
        return JSONFormatter()
    return TextFormatter()


def setup_logging(
    level: str = "INFO",
    log_format: str = "text",
    log_file: Optional[str] = None,
    max_bytes: int = 1024 * 1024,  # 1MB
    backup_count: int = 3
) -> None:
    """设置日志配置

    构建工具通常已有自己的日志体系，只有独立运行时才需要调用。
    """
    numeric_level = getattr(logging, level.upper())

    # 获取根logger
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # 清除现有处理器
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # 控制台处理器，输出到stderr以免污染构建输出
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(_build_formatter(log_format))
    console_handler.setLevel(numeric_level)
    root_logger.addHandler(console_handler)

    # 文件处理器（如果指定了日志文件）
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setFormatter(_build_formatter(log_format))
        file_handler.setLevel(numeric_level)
        root_logger.addHandler(file_handler)


def _with_fields(logger: Union[logging.Logger, logging.LoggerAdapter], fields: Dict[str, Any]) -> logging.LoggerAdapter:
    """返回携带附加字段的适配器，已有字段会被合并"""
    if isinstance(logger, logging.LoggerAdapter):
        fields = {**logger.extra.get(EXTRA_FIELDS, {}), **fields}
        logger = logger.logger
    return logging.LoggerAdapter(logger, {EXTRA_FIELDS: fields})


def get_logger(name: str, extra_fields: Optional[Dict[str, Any]] = None):
    """获取logger实例，指定extra_fields时返回适配器"""
    logger = logging.getLogger(name)
    if extra_fields:
        return _with_fields(logger, extra_fields)
    return logger


class LogContext:
    """在with块内为日志附加字段，例如本次解析使用的覆盖值"""

    def __init__(self, logger, **extra_fields):
        self.logger = logger
        self.extra_fields = extra_fields

    def __enter__(self) -> logging.LoggerAdapter:
        return _with_fields(self.logger, self.extra_fields)

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False
