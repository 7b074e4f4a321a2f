"""UPS 运费策略"""

from shipcost.models import Order
from shipcost.strategy.base import ShippingStrategy


class UPSStrategy(ShippingStrategy):
    """UPS: 按货值固定比例收费，与目的地无关"""

    name = "UPS"
    description = "货值的 30%"

    SHIPPING_COST_RATIO = 0.3

    def calculate(self, order: Order) -> float:
        return order.cost * self.SHIPPING_COST_RATIO
