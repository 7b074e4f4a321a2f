"""多承运商运费比较"""

from dataclasses import dataclass
from typing import Iterable, List

from shipcost.models import Order
from shipcost.strategy.base import ShippingStrategy


@dataclass(frozen=True)
class Quote:
    """单个承运商报价"""

    carrier: str
    cost: float

    def format(self) -> str:
        return f"Shipping cost from {self.carrier} is: {self.cost}"


def compare_costs(strategies: Iterable[ShippingStrategy], order: Order) -> List[Quote]:
    """按给定顺序计算每个策略的运费"""
    return [
        Quote(carrier=str(strategy), cost=strategy.calculate(order))
        for strategy in strategies
    ]


def cheapest(quotes: Iterable[Quote]) -> Quote:
    """最低报价，并列时取先出现者"""
    quotes = list(quotes)
    if not quotes:
        raise ValueError("没有可比较的报价")
    return min(quotes, key=lambda q: q.cost)
