"""命令行测试"""

import pytest
from typer.testing import CliRunner

from shipcost.cli.app import app, console
from shipcost.config.base import ShippingConfig

runner = CliRunner()


class TestQuoteCommand:
    """quote 命令测试"""

    def test_quote_fedex(self, app_settings):
        result = runner.invoke(app, ["quote", "FedEx", "--cost", "1000", "--country", "Russia"])

        assert result.exit_code == 0
        assert result.stdout.strip() == f"Shipping cost from FedEx is: {1000 / 7}"

    def test_quote_uses_defaults(self, app_settings):
        result = runner.invoke(app, ["quote", "UPS"])

        assert result.exit_code == 0
        assert "Shipping cost from UPS is: 300.0" in result.stdout

    def test_quote_other_country(self, app_settings):
        result = runner.invoke(app, ["quote", "FedEx", "-c", "1000", "-C", "Germany"])

        assert result.exit_code == 0
        assert "Shipping cost from FedEx is: 200.0" in result.stdout

    def test_quote_unknown_carrier(self, app_settings):
        result = runner.invoke(app, ["quote", "DHL"])

        assert result.exit_code == 1
        assert "DHL" in result.stdout
        assert "UPS, FedEx, EMS" in result.stdout

    def test_quote_negative_cost(self, app_settings):
        result = runner.invoke(app, ["quote", "UPS", "--cost", "-5"])
        assert result.exit_code != 0

    @pytest.mark.parametrize("cost", ["nan", "inf"])
    def test_quote_non_finite_cost(self, app_settings, cost):
        result = runner.invoke(app, ["quote", "UPS", "--cost", cost])

        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)
        assert "订单无效" in result.stdout

    def test_quote_narrow_terminal_single_line(self, app_settings, monkeypatch):
        monkeypatch.setattr(console, "width", 20)
        result = runner.invoke(app, ["quote", "FedEx"])

        assert result.exit_code == 0
        assert result.stdout.strip() == f"Shipping cost from FedEx is: {1000 / 7}"


class TestCompareCommand:
    """compare 命令测试"""

    def test_compare_lines(self, app_settings):
        result = runner.invoke(app, ["compare", "--cost", "1000", "--country", "USA"])

        assert result.exit_code == 0
        lines = result.stdout.strip().splitlines()
        assert len(lines) == 3
        assert lines[0] == "Shipping cost from UPS is: 300.0"
        assert lines[1] == f"Shipping cost from FedEx is: {1000 / 7}"
        assert lines[2].startswith("Shipping cost from EMS is: ")

    @pytest.mark.parametrize("cost", ["nan", "inf"])
    def test_compare_non_finite_cost(self, app_settings, cost):
        result = runner.invoke(app, ["compare", "--cost", cost])

        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)

    def test_compare_table(self, app_settings):
        result = runner.invoke(app, ["compare", "--table"])

        assert result.exit_code == 0
        for name in ("UPS", "FedEx", "EMS"):
            assert name in result.stdout

    def test_compare_respects_enabled_carriers(self, app_settings):
        app_settings.shipping = ShippingConfig(
            enabled_carriers=["UPS"], default_carrier="UPS"
        )
        result = runner.invoke(app, ["compare"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "Shipping cost from UPS is: 300.0"


class TestDemoCommand:
    """demo 命令测试"""

    def test_demo(self, app_settings):
        result = runner.invoke(app, ["demo"])

        assert result.exit_code == 0
        lines = result.stdout.strip().splitlines()
        assert len(lines) == 4
        assert lines[0] == f"Shipping cost from FedEx is: {1000 / 7}"
        assert lines[1] == "Shipping cost from UPS is: 300.0"
        assert lines[2] == f"Shipping cost from FedEx is: {1000 / 7}"

    def test_demo_seeded_ems(self, app_settings):
        app_settings.shipping = ShippingConfig(ems_seed=5)

        first = runner.invoke(app, ["demo"])
        second = runner.invoke(app, ["demo"])
        assert first.stdout == second.stdout


class TestSystemCommands:
    """系统命令测试"""

    def test_list(self, app_settings):
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        for name in ("UPS", "FedEx", "EMS"):
            assert name in result.stdout

    def test_version(self, app_settings):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "ShipCost" in result.stdout

    def test_config(self, app_settings):
        result = runner.invoke(app, ["config"])

        assert result.exit_code == 0
        assert "Russia" in result.stdout
        assert "FedEx" in result.stdout
