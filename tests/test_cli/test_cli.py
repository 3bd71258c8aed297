"""Tests for the cssbuilder CLI commands."""
from __future__ import annotations

from click.testing import CliRunner

from cssbuilder import __version__
from cssbuilder.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_cli_group_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "compose CSS selectors" in result.output

    def test_cli_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert "build" in result.output
        assert "inspect" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_single_chain(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["build", "element=div", "id=main", "class=container", "class=draggable"]
        )
        assert result.exit_code == 0
        assert result.output == "div#main.container.draggable\n"

    def test_attr_value_keeps_equals(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["build", "element=a", 'attr=href$=".png"', "pseudo-class=focus"]
        )
        assert result.exit_code == 0
        assert result.output == 'a[href$=".png"]:focus\n'

    def test_combinators(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["build", "element=div", "+", "element=table", " ", "element=td"]
        )
        assert result.exit_code == 0
        assert result.output == "div + table   td\n"

    def test_duplicate_exits_1(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "id=a", "id=b"])
        assert result.exit_code == 1
        assert "should not occur more then one time" in result.output

    def test_order_exits_1(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "class=a", "element=b"])
        assert result.exit_code == 1
        assert "Selector parts should be arranged" in result.output

    def test_unknown_kind_is_usage_error(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "tag=div"])
        assert result.exit_code == 2

    def test_leading_combinator_is_usage_error(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", ">", "element=p"])
        assert result.exit_code == 2

    def test_trailing_combinator_is_usage_error(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "element=p", "~"])
        assert result.exit_code == 2

    def test_requires_tokens(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_lists_parts(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["inspect", "element=ul", ">", "element=li", "class=item"])
        assert result.exit_code == 0
        assert "Chain 1: ul" in result.output
        assert "Combinator: '>'" in result.output
        assert "Chain 2: li.item" in result.output
        assert "'item'" in result.output
        assert "Selector: ul > li.item" in result.output
        assert "rank=" not in result.output

    def test_ranks(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["inspect", "--ranks", "element=p", "pseudo-element=after"])
        assert result.exit_code == 0
        assert "rank=0" in result.output
        assert "rank=5" in result.output

    def test_validation_error(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["inspect", "pseudo-element=after", "id=x"])
        assert result.exit_code == 1

    def test_log_level_option(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--log-level", "debug", "build", "element=p"])
        assert result.exit_code == 0
        assert result.output.endswith("p\n")
