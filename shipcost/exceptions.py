"""异常定义"""

from typing import List, Optional


class ShippingError(Exception):
    """运费计算基础异常"""
    pass


class ConfigurationError(ShippingError):
    """策略注册表配置错误"""
    pass


class NotFoundError(ShippingError, LookupError):
    """策略未注册"""

    def __init__(self, name: str, available: Optional[List[str]] = None):
        self.name = name
        self.available = list(available or [])
        super().__init__(f"strategy not found: {name}")
