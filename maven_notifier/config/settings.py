"""
配置设置模型定义

使用Pydantic定义解析后的通知配置以及进程级运行设置。
运行设置支持从环境变量加载，其中 notifyWith 作为实现选择的覆盖通道。
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..utils.security import mask_secret
from .properties import NOTIFY_WITH


class Configuration(BaseModel):
    """解析完成的通知配置，构建后不可修改"""

    model_config = ConfigDict(frozen=True)

    implementation: str = Field(..., description="通知实现，例如 growl、notifysend")
    notify_send_path: str = Field(..., description="notify-send 可执行文件路径")
    notify_send_timeout: int = Field(..., ge=0, description="notify-send 超时时间(毫秒)")
    notification_center_path: str = Field(..., description="terminal-notifier 可执行文件路径")
    notification_center_activate: str = Field(..., description="点击通知时激活的应用标识")
    notification_center_sound: Optional[str] = None
    growl_host: Optional[str] = None
    growl_port: int = Field(..., ge=1, le=65535)
    growl_password: Optional[str] = None
    system_tray_wait_before_end: int = Field(..., ge=0, description="系统托盘结束前等待时间(毫秒)")
    snarl_host: str
    snarl_port: int = Field(..., ge=1, le=65535)
    snarl_password: Optional[str] = None
    short_description: bool = False
    pushbullet_api_key: Optional[str] = None
    pushbullet_device: Optional[str] = None

    @field_validator(
        'notification_center_sound', 'growl_host', 'growl_password',
        'snarl_password', 'pushbullet_api_key', 'pushbullet_device',
        mode='before'
    )
    @classmethod
    def empty_as_unset(cls, v):
        # 空字符串与未设置等价
        if v == "":
            return None
        return v

    def masked(self) -> dict:
        """返回隐藏敏感信息后的字段字典"""
        data = self.model_dump()
        for name in ('growl_password', 'snarl_password', 'pushbullet_api_key'):
            if data[name] is not None:
                data[name] = mask_secret(data[name])
        return data

    def __str__(self):
        fields = ", ".join(f"{name}={value!r}" for name, value in self.masked().items())
        return f"Configuration({fields})"


class LoggingConfig(BaseModel):
    """日志配置"""
    level: str = Field(default="INFO", description="日志级别")
    format: str = Field(default="text", description="日志格式")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'日志级别必须是以下之一: {valid_levels}')
        return v.upper()

    @field_validator('format')
    @classmethod
    def validate_format(cls, v):
        if v not in ['json', 'text']:
            raise ValueError('日志格式必须是json或text')
        return v


class RuntimeSettings(BaseSettings):
    """进程级运行设置"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # 覆盖通道，优先级高于配置文件
    notify_with: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(NOTIFY_WITH, "notify_with"),
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
