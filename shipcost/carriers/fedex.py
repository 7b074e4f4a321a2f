"""FedEx 运费策略"""

from typing import FrozenSet

from shipcost.models import Order
from shipcost.strategy.base import ShippingStrategy


class FedExStrategy(ShippingStrategy):
    """
    FedEx 运费策略

    发往俄罗斯和美国按货值的 1/7 收费，其他国家按 1/5。
    国家名精确匹配，不做大小写或代码归一化。
    """

    name = "FedEx"
    description = "Russia/USA 货值 1/7，其他国家 1/5"

    DISCOUNTED_COUNTRIES: FrozenSet[str] = frozenset({"Russia", "USA"})
    DISCOUNTED_DIVISOR = 7.0
    DEFAULT_DIVISOR = 5.0

    def calculate(self, order: Order) -> float:
        if order.destination.country in self.DISCOUNTED_COUNTRIES:
            return order.cost / self.DISCOUNTED_DIVISOR
        return order.cost / self.DEFAULT_DIVISOR
