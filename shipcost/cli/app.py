"""ShipCost CLI 主入口

使用 Typer 构建命令行接口
"""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from shipcost import __version__
from shipcost.carriers import create_registry
from shipcost.comparison import cheapest, compare_costs
from shipcost.config.base import get_settings
from shipcost.exceptions import ConfigurationError, NotFoundError
from shipcost.models import Address, Order
from shipcost.strategy.registry import StrategyRegistry
from shipcost.utils.logging import setup_logging_from_config

# 创建 Typer 应用
app = typer.Typer(
    name="shipcost",
    help="ShipCost - 多承运商运费估算",
    add_completion=False,
)

console = Console()


def _build_registry() -> StrategyRegistry:
    try:
        return create_registry(get_settings().shipping)
    except ConfigurationError as e:
        console.print(f"[red]承运商配置错误: {e}[/red]")
        raise typer.Exit(code=1)


def _build_order(cost: float, country: str) -> Order:
    try:
        return Order(cost=cost, destination=Address(country=country))
    except ValueError as e:
        console.print(f"[red]订单无效: {e}[/red]")
        raise typer.Exit(code=1)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="输出调试日志"),
):
    """ShipCost - 多承运商运费估算"""
    settings = get_settings()
    setup_logging_from_config(
        settings.logging, level=logging.DEBUG if verbose else None
    )


# ============================================================
# 运费命令
# ============================================================


@app.command("quote")
def quote(
    carrier: str = typer.Argument(..., help="承运商名称，区分大小写"),
    cost: Optional[float] = typer.Option(None, "--cost", "-c", min=0, help="订单金额"),
    country: Optional[str] = typer.Option(None, "--country", "-C", help="目的地国家"),
):
    """计算单个承运商运费"""
    shipping = get_settings().shipping
    order = _build_order(
        shipping.default_cost if cost is None else cost,
        shipping.default_country if country is None else country,
    )

    registry = _build_registry()
    try:
        strategy = registry.get(carrier)
    except NotFoundError as e:
        console.print(f"[red]承运商不存在: {e.name}[/red]")
        console.print(f"可选: {', '.join(e.available)}")
        raise typer.Exit(code=1)

    result = compare_costs([strategy], order)[0]
    console.print(result.format(), highlight=False, soft_wrap=True)


@app.command("compare")
def compare(
    cost: Optional[float] = typer.Option(None, "--cost", "-c", min=0, help="订单金额"),
    country: Optional[str] = typer.Option(None, "--country", "-C", help="目的地国家"),
    table: bool = typer.Option(False, "--table", "-t", help="以表格显示"),
):
    """比较所有承运商运费"""
    shipping = get_settings().shipping
    order = _build_order(
        shipping.default_cost if cost is None else cost,
        shipping.default_country if country is None else country,
    )

    registry = _build_registry()
    try:
        quotes = compare_costs(registry.list_all(), order)
    except ConfigurationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    if not table:
        for item in quotes:
            console.print(item.format(), highlight=False, soft_wrap=True)
        return

    best = cheapest(quotes)
    result_table = Table(title=f"运费比较 ({order.cost:,.2f} -> {order.country or '-'})")
    result_table.add_column("承运商", style="cyan")
    result_table.add_column("运费", style="green", justify="right")

    for item in quotes:
        marker = " *" if item is best else ""
        result_table.add_row(item.carrier, f"{item.cost:,.2f}{marker}")

    console.print(result_table)


@app.command("list")
def list_carriers():
    """列出可用承运商"""
    registry = _build_registry()

    if not len(registry):
        console.print("[yellow]没有注册的承运商[/yellow]")
        return

    table = Table(title="可用承运商")
    table.add_column("名称", style="cyan")
    table.add_column("描述")

    for name, description in registry.describe().items():
        table.add_row(name, description or "-")

    console.print(table)


@app.command("demo")
def demo():
    """演示：默认订单的单个承运商报价和全部比较"""
    shipping = get_settings().shipping
    order = _build_order(shipping.default_cost, shipping.default_country)
    registry = _build_registry()

    strategy = registry.get(shipping.default_carrier)
    first = compare_costs([strategy], order)[0]
    console.print(first.format(), highlight=False, soft_wrap=True)

    for item in compare_costs(registry.list_all(), order):
        console.print(item.format(), highlight=False, soft_wrap=True)


# ============================================================
# 系统命令
# ============================================================


@app.command("version")
def version():
    """显示版本信息"""
    console.print(f"[bold]ShipCost[/bold] v{__version__}")
    console.print("多承运商运费估算")


@app.command("config")
def show_config():
    """显示当前配置"""
    settings = get_settings()

    table = Table(title="当前配置")
    table.add_column("配置项", style="cyan")
    table.add_column("值", style="green")

    table.add_row("启用承运商", ", ".join(settings.shipping.enabled_carriers))
    table.add_row("默认承运商", settings.shipping.default_carrier)
    table.add_row("默认目的地", settings.shipping.default_country)
    table.add_row("默认金额", f"{settings.shipping.default_cost:,.2f}")
    table.add_row(
        "EMS 种子",
        "-" if settings.shipping.ems_seed is None else str(settings.shipping.ems_seed),
    )
    table.add_row("日志级别", settings.logging.level.value)
    table.add_row("日志目录", str(settings.logging.log_dir or "-"))

    console.print(table)


# ============================================================
# 入口点
# ============================================================


def main():
    """CLI 入口点"""
    app()


if __name__ == "__main__":
    main()
