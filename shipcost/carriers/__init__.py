"""承运商策略实现"""

from typing import Dict, Optional, Tuple, Type

from shipcost.config.base import ShippingConfig
from shipcost.exceptions import ConfigurationError
from shipcost.strategy.base import ShippingStrategy
from shipcost.strategy.registry import StrategyRegistry

from .ems import EMSStrategy
from .fedex import FedExStrategy
from .ups import UPSStrategy

# 静态注册表，顺序即 list_all 的返回顺序
DEFAULT_CARRIERS: Tuple[Type[ShippingStrategy], ...] = (
    UPSStrategy,
    FedExStrategy,
    EMSStrategy,
)

CARRIER_NAMES: Tuple[str, ...] = tuple(cls.name for cls in DEFAULT_CARRIERS)


def create_registry(config: Optional[ShippingConfig] = None) -> StrategyRegistry:
    """
    按配置创建注册中心

    Args:
        config: 运费配置，None 则启用全部内置承运商

    Raises:
        ConfigurationError: 配置中包含未知承运商
    """
    if config is None:
        return StrategyRegistry(DEFAULT_CARRIERS)

    unknown = [name for name in config.enabled_carriers if name not in CARRIER_NAMES]
    if unknown:
        raise ConfigurationError(
            f"未知承运商: {', '.join(unknown)}, 可选: {', '.join(CARRIER_NAMES)}"
        )

    enabled = [cls for cls in DEFAULT_CARRIERS if cls.name in config.enabled_carriers]

    params: Dict[str, dict] = {}
    if config.ems_seed is not None:
        params[EMSStrategy.name] = {"seed": config.ems_seed}

    return StrategyRegistry(enabled, params=params)


__all__ = [
    "UPSStrategy",
    "FedExStrategy",
    "EMSStrategy",
    "DEFAULT_CARRIERS",
    "CARRIER_NAMES",
    "create_registry",
]
