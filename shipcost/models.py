"""订单与地址"""

import math
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Address:
    """收发货地址"""

    country: str = ""
    region: str = ""
    city: str = ""
    postal_code: str = ""
    contact_name: str = ""


@dataclass(frozen=True)
class Order:
    """待计算运费的订单"""

    cost: float  # 货值
    destination: Address  # 目的地
    origin: Optional[Address] = None  # 发货地，运费计算不使用

    def __post_init__(self):
        if self.destination is None:
            raise ValueError("订单必须指定目的地")
        if not math.isfinite(self.cost) or self.cost < 0:
            raise ValueError(f"订单金额必须为非负有限数: {self.cost}")

    @property
    def country(self) -> str:
        return self.destination.country
