"""End-to-end tests for the click CLI against a temporary data dir."""

import pytest
from click.testing import CliRunner

from shopping.infrastructure.bootstrap import DATA_DIR_ENV
from shopping.infrastructure.cli.main import cli


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path))
    return CliRunner()


def _add(runner, name, count):
    result = runner.invoke(cli, ["product", "add", "--name", name, "--count", str(count)])
    assert result.exit_code == 0, result.output
    return result


class TestProductCommands:

    def test_add_and_list(self, runner):
        _add(runner, "milk", 3)
        result = runner.invoke(cli, ["product", "list"])
        assert result.exit_code == 0
        assert "milk" in result.output
        assert "3" in result.output

    def test_list_empty(self, runner):
        result = runner.invoke(cli, ["product", "list"])
        assert "No products found." in result.output

    def test_show_unknown(self, runner):
        result = runner.invoke(cli, ["product", "show", "--name", "caviar"])
        assert result.exit_code != 0
        assert "Product not found" in result.output

    def test_add_duplicate(self, runner):
        _add(runner, "milk", 3)
        result = runner.invoke(cli, ["product", "add", "--name", "milk", "--count", "1"])
        assert result.exit_code != 0
        assert "already exists" in result.output


class TestBuyCommand:

    def test_buy_decrements_stock(self, runner):
        _add(runner, "milk", 3)
        result = runner.invoke(
            cli, ["buy", "--customer-id", "0", "--phone", "11-11-11", "--item", "milk=2"]
        )
        assert result.exit_code == 0, result.output
        assert "Bought 2 x milk (1 left)" in result.output

        show = runner.invoke(cli, ["product", "show", "--name", "milk"])
        assert "milk: 1 in stock" in show.output

    def test_buy_nothing(self, runner):
        result = runner.invoke(cli, ["buy", "--customer-id", "0", "--phone", "11-11-11"])
        assert result.exit_code == 0
        assert "Nothing to buy." in result.output

    def test_buy_more_than_stock(self, runner):
        _add(runner, "milk", 1)
        result = runner.invoke(
            cli, ["buy", "--customer-id", "0", "--phone", "11-11-11", "--item", "milk=2"]
        )
        assert result.exit_code != 0
        assert "insufficient stock" in result.output

    def test_buy_bad_item_format(self, runner):
        result = runner.invoke(
            cli, ["buy", "--customer-id", "0", "--phone", "11-11-11", "--item", "milk"]
        )
        assert result.exit_code != 0
        assert "NAME=QTY" in result.output
