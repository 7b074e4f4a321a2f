"""配置模块"""

from .base import (
    # 枚举
    LogLevel,
    # 配置类
    ShippingConfig,
    LoggingConfig,
    AppSettings,
    # 全局函数
    get_settings,
    reload_settings,
)

__all__ = [
    "LogLevel",
    "ShippingConfig",
    "LoggingConfig",
    "AppSettings",
    "get_settings",
    "reload_settings",
]
