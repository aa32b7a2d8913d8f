"""End-to-end tests for the click CLI against the lunch menu."""

import pytest
from click.testing import CliRunner

from lunchtray.infrastructure.cli.main import cli


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.delenv("LUNCHTRAY_TAX_RATE", raising=False)
    return CliRunner()


class TestMenuList:

    def test_lists_all_items(self, runner):
        result = runner.invoke(cli, ["menu", "list"])
        assert result.exit_code == 0
        assert "Cauliflower" in result.output
        assert "Coconut Rice" in result.output
        assert "Pickled Veggies" in result.output

    def test_filters_by_course(self, runner):
        result = runner.invoke(cli, ["menu", "list", "--type", "side"])
        assert result.exit_code == 0
        assert "Summer Salad" in result.output
        assert "Cauliflower" not in result.output

    def test_rejects_unknown_course(self, runner):
        result = runner.invoke(cli, ["menu", "list", "--type", "dessert"])
        assert result.exit_code != 0


class TestOrderCheckout:

    def test_prints_summary(self, runner):
        result = runner.invoke(
            cli, ["order", "checkout", "--entree", "cauliflower", "--side", "salad"]
        )
        assert result.exit_code == 0
        assert "Cauliflower" in result.output
        assert "Summer Salad" in result.output
        assert "$9.50" in result.output
        assert "$0.76" in result.output
        assert "$10.26" in result.output

    def test_tax_rate_option(self, runner):
        result = runner.invoke(
            cli, ["order", "checkout", "--entree", "cauliflower", "--tax-rate", "0.10"]
        )
        assert result.exit_code == 0
        assert "$7.70" in result.output

    def test_tax_rate_from_environment(self, runner, monkeypatch):
        monkeypatch.setenv("LUNCHTRAY_TAX_RATE", "0")
        result = runner.invoke(cli, ["order", "checkout", "--entree", "chili"])
        assert result.exit_code == 0
        assert "$0.00" in result.output

    def test_invalid_tax_rate(self, runner):
        result = runner.invoke(
            cli, ["order", "checkout", "--entree", "chili", "--tax-rate", "lots"]
        )
        assert result.exit_code == 2
        assert "Invalid tax rate" in result.output

    def test_invalid_tax_rate_in_environment(self, runner, monkeypatch):
        monkeypatch.setenv("LUNCHTRAY_TAX_RATE", "lots")
        result = runner.invoke(cli, ["order", "checkout", "--entree", "chili"])
        assert result.exit_code == 1
        assert "Invalid tax rate" in result.output
        assert "--tax-rate" not in result.output

    def test_unknown_item(self, runner):
        result = runner.invoke(cli, ["order", "checkout", "--entree", "lobster"])
        assert result.exit_code == 1
        assert "Unknown menu item: 'lobster'" in result.output


class TestOrderStart:

    def test_interactive_order_submitted(self, runner):
        result = runner.invoke(
            cli, ["order", "start"], input="cauliflower\nsalad\nbread\ny\n"
        )
        assert result.exit_code == 0
        assert "Subtotal: $7.00" in result.output
        assert "Subtotal: $9.50" in result.output
        assert "Subtotal: $10.00" in result.output
        assert "$10.80" in result.output
        assert "Order submitted." in result.output

    def test_interactive_order_cancelled(self, runner):
        result = runner.invoke(
            cli, ["order", "start"], input="chili\nrice\npickles\nn\n"
        )
        assert result.exit_code == 0
        assert "Subtotal: $6.00" in result.output
        assert "Order cancelled." in result.output

    def test_reprompts_on_item_from_wrong_course(self, runner):
        result = runner.invoke(
            cli, ["order", "start"], input="salad\npasta\nsoup\nberries\ny\n"
        )
        assert result.exit_code == 0
        assert "Subtotal: $5.50" in result.output
        assert "Subtotal: $8.50" in result.output
        assert "Subtotal: $9.50" in result.output
        assert "Order submitted." in result.output
