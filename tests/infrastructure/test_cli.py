"""End-to-end tests for the click CLI against a temporary data directory."""

import logging

import pytest
from click.testing import CliRunner

from bakery.infrastructure.cli.main import cli


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("BAKERY_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("BAKERY_ENV", "test")
    return tmp_path


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def runner():
    return CliRunner()


def _invoke(runner, *args):
    result = runner.invoke(cli, list(args))
    assert result.exit_code == 0, result.output
    return result


def _stock_shop(runner):
    _invoke(runner, "product", "add", "--name", "Sourdough", "--price", "150.00", "--stock", "5")
    _invoke(runner, "product", "add", "--name", "Baguette", "--price", "80.00", "--stock", "1")
    _invoke(runner, "cart", "add", "--user", "1", "--product", "1", "--quantity", "2")
    _invoke(runner, "cart", "add", "--user", "1", "--product", "2")


class TestProductCommands:

    def test_add_and_list(self, runner):
        _invoke(runner, "product", "add", "--name", "Sourdough", "--price", "150.00", "--stock", "5")
        result = _invoke(runner, "product", "list")
        assert "Sourdough" in result.output
        assert "₱150.00" in result.output

    def test_list_empty(self, runner):
        result = _invoke(runner, "product", "list")
        assert "No products found." in result.output

    def test_duplicate_is_an_error(self, runner):
        _invoke(runner, "product", "add", "--name", "Sourdough", "--price", "150.00")
        result = runner.invoke(cli, ["product", "add", "--name", "Sourdough", "--price", "1"])
        assert result.exit_code != 0
        assert "already exists" in result.output

    def test_list_search(self, runner):
        _stock_shop(runner)
        result = _invoke(runner, "product", "list", "--q", "BAG")
        assert "Baguette" in result.output
        assert "Sourdough" not in result.output

    def test_show(self, runner):
        _stock_shop(runner)
        result = _invoke(runner, "product", "show", "--id", "1")
        assert "Product #1: Sourdough" in result.output
        assert "Price: ₱150.00" in result.output

    def test_show_unknown_is_an_error(self, runner):
        result = runner.invoke(cli, ["product", "show", "--id", "9"])
        assert result.exit_code != 0
        assert "not found" in result.output

    def test_delete(self, runner):
        _stock_shop(runner)
        _invoke(runner, "product", "delete", "--id", "2")

        assert "Baguette" not in _invoke(runner, "product", "list").output
        assert "Baguette" not in _invoke(runner, "cart", "show", "--user", "1").output


class TestOrderCommands:

    def test_checkout_show_cancel(self, runner):
        _stock_shop(runner)

        created = _invoke(
            runner, "order", "create", "--user", "1",
            "--payment", "cash_on_delivery", "--shipping", "pickup",
            "--address", "Store counter",
        )
        assert "Order placed successfully." in created.output
        assert "₱380.00" in created.output

        listing = _invoke(runner, "order", "list", "--user", "1")
        assert "pending" in listing.output

        _invoke(runner, "order", "cancel", "--user", "1", "--id", "1")
        shown = _invoke(runner, "order", "show", "--user", "1", "--id", "1")
        assert "status=cancelled" in shown.output

        products = _invoke(runner, "product", "list")
        assert "5" in products.output

    def test_out_of_stock_is_an_error(self, runner):
        _stock_shop(runner)
        _invoke(runner, "product", "stock", "--product", "Baguette", "--quantity", "0")

        result = runner.invoke(cli, [
            "order", "create", "--user", "1",
            "--payment", "gcash", "--shipping", "express", "--address", "Pasig",
        ])

        assert result.exit_code != 0
        assert "Insufficient stock for Baguette. Available: 0" in result.output

    def test_unknown_payment_choice_rejected(self, runner):
        result = runner.invoke(cli, [
            "order", "create", "--user", "1",
            "--payment", "bitcoin", "--shipping", "express", "--address", "Pasig",
        ])
        assert result.exit_code == 2

    def test_show_foreign_order(self, runner):
        _stock_shop(runner)
        _invoke(
            runner, "order", "create", "--user", "1",
            "--payment", "maya", "--shipping", "standard", "--address", "Pasig",
        )
        result = runner.invoke(cli, ["order", "show", "--user", "2", "--id", "1"])
        assert result.exit_code != 0
        assert "Order not found" in result.output

    def test_complete(self, runner):
        _stock_shop(runner)
        _invoke(
            runner, "order", "create", "--user", "1", "--items", "1",
            "--payment", "maya", "--shipping", "standard", "--address", "Pasig",
        )
        result = _invoke(runner, "order", "complete", "--id", "1")
        assert "Order #1 completed." in result.output

        cart = _invoke(runner, "cart", "show", "--user", "1")
        assert "Baguette" in cart.output
        assert "Sourdough" not in cart.output


class TestCartAndAddressCommands:

    def test_update_to_zero_removes(self, runner):
        _stock_shop(runner)
        result = _invoke(runner, "cart", "update", "--user", "1", "--id", "1", "--quantity", "0")
        assert "removed" in result.output

    def test_saved_address_used_for_order(self, runner):
        _stock_shop(runner)
        _invoke(runner, "address", "add", "--user", "1", "--text", "12 Mabini St", "--label", "Home")
        result = _invoke(
            runner, "order", "create", "--user", "1", "--address-id", "1",
            "--payment", "paypal", "--shipping", "same_day", "--address", "fallback",
        )
        assert "same_day to 12 Mabini St" in result.output
