"""Pytest配置和fixtures"""

import sys
from pathlib import Path

import pytest

# 添加项目根目录
sys.path.insert(0, str(Path(__file__).parent.parent))

from shipcost.carriers import DEFAULT_CARRIERS
from shipcost.config import base as config_base
from shipcost.config.base import AppSettings, LoggingConfig, ShippingConfig
from shipcost.models import Address, Order
from shipcost.strategy.registry import StrategyRegistry


def make_order(cost: float = 1000.0, country: str = "Russia") -> Order:
    """构造只带目的地国家的订单"""
    return Order(cost=cost, destination=Address(country=country))


@pytest.fixture
def russia_order() -> Order:
    """发往俄罗斯的 1000 元订单"""
    return make_order(1000.0, "Russia")


@pytest.fixture
def usa_order() -> Order:
    return make_order(1000.0, "USA")


@pytest.fixture
def germany_order() -> Order:
    return make_order(1000.0, "Germany")


@pytest.fixture
def registry() -> StrategyRegistry:
    """内置承运商注册中心"""
    return StrategyRegistry(DEFAULT_CARRIERS)


@pytest.fixture
def app_settings(monkeypatch) -> AppSettings:
    """替换全局配置，避免读取环境变量和 .env"""
    settings = AppSettings(
        shipping=ShippingConfig(),
        logging=LoggingConfig(console=False),
    )
    monkeypatch.setattr(config_base, "_settings", settings)
    return settings
