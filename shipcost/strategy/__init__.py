"""策略系统"""

from .base import ShippingStrategy
from .registry import StrategyRegistry

__all__ = ["ShippingStrategy", "StrategyRegistry"]
