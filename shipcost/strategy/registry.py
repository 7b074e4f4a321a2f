"""策略注册中心"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type

from shipcost.exceptions import ConfigurationError, NotFoundError
from shipcost.strategy.base import ShippingStrategy

logger = logging.getLogger(__name__)


class StrategyRegistry:
    """策略注册中心

    构造时一次性建立 名称 -> 策略类 的映射，此后只读。
    每次 get / list_all 都返回新建的策略实例。

    Usage:
        registry = StrategyRegistry([UPSStrategy, FedExStrategy])
        cost = registry.get("FedEx").calculate(order)
    """

    def __init__(
        self,
        strategies: Optional[Iterable[Type[ShippingStrategy]]] = None,
        params: Optional[Mapping[str, Dict[str, Any]]] = None,
    ):
        """
        Args:
            strategies: 策略类列表，None 则使用内置承运商
            params: 策略名 -> 默认构造参数
        """
        if strategies is None:
            from shipcost.carriers import DEFAULT_CARRIERS

            strategies = DEFAULT_CARRIERS

        table: Dict[str, Type[ShippingStrategy]] = {}
        for strategy_cls in strategies:
            if not (isinstance(strategy_cls, type) and issubclass(strategy_cls, ShippingStrategy)):
                raise ConfigurationError(f"不是运费策略类: {strategy_cls!r}")

            strategy_name = strategy_cls.name or strategy_cls.__name__
            if not strategy_name.strip():
                raise ConfigurationError(f"策略名称为空: {strategy_cls.__name__}")
            if strategy_name in table:
                raise ConfigurationError(
                    f"策略名称重复: {strategy_name} "
                    f"({table[strategy_name].__name__}, {strategy_cls.__name__})"
                )
            table[strategy_name] = strategy_cls

        self._strategies: Mapping[str, Type[ShippingStrategy]] = MappingProxyType(table)
        self._params: Mapping[str, Dict[str, Any]] = MappingProxyType(
            {name: dict(value) for name, value in (params or {}).items()}
        )

        logger.info(f"已注册 {len(table)} 个运费策略: {', '.join(table)}")

    def get(
        self,
        name: str,
        params: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> ShippingStrategy:
        """
        按名称创建策略实例（精确匹配，区分大小写）

        Args:
            name: 策略名称
            params: 覆盖默认参数
            **kwargs: 透传给策略构造函数

        Raises:
            NotFoundError: 策略未注册
        """
        strategy_cls = self._strategies.get(name)
        if strategy_cls is None:
            logger.warning(f"策略未注册: {name}")
            raise NotFoundError(name, self.list_strategies())

        logger.debug(f"创建策略: {name}")
        return strategy_cls(self._merge_params(name, params), **kwargs)

    def list_all(self) -> List[ShippingStrategy]:
        """
        为每个已注册策略创建一个实例

        Raises:
            ConfigurationError: 没有任何注册的策略
        """
        if not self._strategies:
            raise ConfigurationError("no strategies registered")

        return [
            strategy_cls(self._merge_params(name))
            for name, strategy_cls in self._strategies.items()
        ]

    def list_strategies(self) -> List[str]:
        """列出所有已注册策略名称"""
        return list(self._strategies.keys())

    def describe(self) -> Dict[str, str]:
        """策略名称 -> 描述"""
        return {
            name: strategy_cls.description
            for name, strategy_cls in self._strategies.items()
        }

    def _merge_params(
        self, name: str, params: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        merged = dict(self._params.get(name, {}))
        merged.update(params or {})
        return merged

    def __contains__(self, name: object) -> bool:
        return name in self._strategies

    def __len__(self) -> int:
        return len(self._strategies)

    def __repr__(self) -> str:
        return f"<StrategyRegistry({', '.join(self._strategies)})>"
