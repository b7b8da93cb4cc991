"""
安全工具模块

提供敏感配置值的脱敏功能，避免在日志中输出密码和API Key。
"""

from typing import Optional


def mask_secret(secret: Optional[str], visible: int = 4) -> Optional[str]:
    """脱敏敏感字符串

    Args:
        secret: 原始值
        visible: 首尾各保留的字符数

    Returns:
        Optional[str]: 脱敏后的值，长度不足时全部替换为星号
    """
    if secret is None:
        return None

    if len(secret) > visible * 2:
        return secret[:visible] + '*' * (len(secret) - visible * 2) + secret[-visible:]
    return '*' * len(secret)
