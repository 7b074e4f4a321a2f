"""运费策略基类"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from shipcost.models import Order


class ShippingStrategy(ABC):
    """运费策略基类

    子类只声明常量和计算公式，不持有跨调用的可变状态。
    """

    name: str = ""  # 为空时注册中心使用类名
    description: str = ""

    def __init__(self, params: Optional[Dict[str, Any]] = None):
        """
        初始化策略

        Args:
            params: 策略参数
        """
        self.params = dict(params or {})

    @abstractmethod
    def calculate(self, order: Order) -> float:
        """
        计算运费

        Args:
            order: 订单，cost >= 0 且必须有目的地

        Returns:
            运费，与 order.cost 同一货币单位
        """
        pass

    def get_param(self, key: str, default: Any = None) -> Any:
        """获取策略参数"""
        return self.params.get(key, default)

    def __str__(self) -> str:
        return self.name or self.__class__.__name__

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}({self})>"
