"""
操作系统识别模块

根据操作系统名称推断默认的通知实现。
"""

import platform
from enum import Enum


class OperatingSystem(Enum):
    """操作系统分类"""
    MACOS = "macos"
    WINDOWS = "windows"
    OTHER = "other"


def classify(os_name: str) -> OperatingSystem:
    """根据名称识别操作系统，不区分大小写的子串匹配"""
    name = (os_name or "").lower()
    if "mac" in name:
        return OperatingSystem.MACOS
    if "win" in name:
        return OperatingSystem.WINDOWS
    return OperatingSystem.OTHER


def default_implementation(operating_system: OperatingSystem) -> str:
    """获取操作系统对应的默认通知实现"""
    if operating_system in (OperatingSystem.MACOS, OperatingSystem.WINDOWS):
        return "growl"
    return "notifysend"


def host_os_name() -> str:
    """读取当前主机的操作系统名称，例如 Linux、Windows

    macOS 上 platform.system() 返回 Darwin，其中含有 "win"，因此换成 Mac OS X。
    """
    system = platform.system()
    if system == "Darwin":
        return "Mac OS X"
    return system


# 进程启动时读取一次，保证同一进程内的解析结果一致
HOST_OS_NAME = host_os_name()
