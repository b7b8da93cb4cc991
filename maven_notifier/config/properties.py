"""
属性表定义

列出配置文件中的全部属性键、默认值以及对应的值类型。
属性表在进程内只构建一次，之后只读。
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


# 配置文件名，与运行中的制品放在同一目录
PROPERTIES_FILE_NAME = "maven-notifier.properties"

# 覆盖通道：存在时无条件替换 notifier.implementation
NOTIFY_WITH = "notifyWith"


class ValueType(Enum):
    """属性值类型"""
    TEXT = "text"
    OPTIONAL_TEXT = "optional_text"
    INTEGER = "integer"
    BOOLEAN = "boolean"


class _Computed:
    """默认值由运行环境计算的标记"""

    def __repr__(self):
        return "COMPUTED"


COMPUTED = _Computed()


class Property(Enum):
    """配置属性"""

    IMPLEMENTATION = ("implementation", "notifier.implementation", COMPUTED, ValueType.TEXT)
    NOTIFY_SEND_PATH = ("notify_send_path", "notifier.notify-send.path", "notify-send", ValueType.TEXT)
    NOTIFY_SEND_TIMEOUT = ("notify_send_timeout", "notifier.notify-send.timeout", "2000", ValueType.INTEGER)
    NOTIFICATION_CENTER_PATH = ("notification_center_path", "notifier.notification-center.path", "terminal-notifier", ValueType.TEXT)
    NOTIFICATION_CENTER_ACTIVATE = ("notification_center_activate", "notifier.notification-center.activate", "com.apple.Terminal", ValueType.TEXT)
    NOTIFICATION_CENTER_SOUND = ("notification_center_sound", "notifier.notification-center.sound", None, ValueType.OPTIONAL_TEXT)
    GROWL_PORT = ("growl_port", "notifier.growl.port", "23053", ValueType.INTEGER)
    GROWL_HOST = ("growl_host", "notifier.growl.host", None, ValueType.OPTIONAL_TEXT)
    GROWL_PASSWORD = ("growl_password", "notifier.growl.password", None, ValueType.OPTIONAL_TEXT)
    SYSTEM_TRAY_WAIT = ("system_tray_wait_before_end", "notifier.system-tray.wait", "2000", ValueType.INTEGER)
    SNARL_PORT = ("snarl_port", "notifier.snarl.port", "9887", ValueType.INTEGER)
    SNARL_HOST = ("snarl_host", "notifier.snarl.host", "localhost", ValueType.TEXT)
    SNARL_PASSWORD = ("snarl_password", "notifier.snarl.password", None, ValueType.OPTIONAL_TEXT)
    SHORT_DESCRIPTION = ("short_description", "notifier.message.short", "false", ValueType.BOOLEAN)
    PUSHBULLET_API_KEY = ("pushbullet_api_key", "notifier.pushbullet.apikey", None, ValueType.OPTIONAL_TEXT)
    PUSHBULLET_DEVICE = ("pushbullet_device", "notifier.pushbullet.device", None, ValueType.OPTIONAL_TEXT)

    def __init__(self, field: str, key: str, default, value_type: ValueType):
        self.field = field
        self.key = key
        self.default = default
        self.value_type = value_type

    @property
    def computed(self) -> bool:
        """默认值是否需要根据运行环境计算"""
        return self.default is COMPUTED

    def static_default(self) -> Optional[str]:
        """静态默认值，计算型属性返回None"""
        if self.computed:
            return None
        return self.default


# 按Configuration字段名索引的只读属性表
PROPERTY_TABLE: Mapping[str, Property] = MappingProxyType({prop.field: prop for prop in Property})

_BY_KEY: Mapping[str, Property] = MappingProxyType({prop.key: prop for prop in Property})


def lookup(key: str) -> Optional[Property]:
    """根据配置文件中的键查找属性"""
    return _BY_KEY.get(key)
