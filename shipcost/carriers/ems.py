"""EMS 运费策略"""

import random
from typing import Any, Dict, Optional

from shipcost.models import Order
from shipcost.strategy.base import ShippingStrategy


class EMSStrategy(ShippingStrategy):
    """
    EMS 运费策略

    运费 = 货值 * r，r 每次调用从 [0, 1) 均匀抽取，结果不可复现。
    测试或演示需要固定结果时，传入 rng 或 params={"seed": n}。
    """

    name = "EMS"
    description = "货值乘以 [0, 1) 随机系数"

    def __init__(
        self,
        params: Optional[Dict[str, Any]] = None,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(params)
        # 每个实例独占一个随机源
        self._rng = rng if rng is not None else random.Random(self.get_param("seed"))

    def calculate(self, order: Order) -> float:
        return order.cost * self._rng.random()
