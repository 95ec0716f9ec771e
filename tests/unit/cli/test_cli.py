"""Tests for the command line interface."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from revlink.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.mark.unit
class TestCLI:
    """Tests for the revlink command group."""

    def test_decode(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["decode", "~/repo::main::README.md::Usage"])
        assert result.exit_code == 0
        assert "Revision:   main" in result.output
        assert "Search:     Usage" in result.output

    def test_decode_strict_failure(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["decode", "--strict", "~/repo::main"])
        assert result.exit_code == 1
        assert "Broken link" in result.output

    def test_store_and_export(self, runner: CliRunner, git_repo: Path, head: str) -> None:
        stored = runner.invoke(cli, ["store", str(git_repo / "src" / "main.c")])
        assert stored.exit_code == 0
        address = stored.output.splitlines()[0]
        assert address.endswith(f"::{head}::src/main.c")

        exported = runner.invoke(cli, ["export", "--url-only", address])
        assert exported.exit_code == 0
        assert exported.output.strip() == f"https://github.com/org/repo/blob/{head}/src/main.c"

    def test_open(self, runner: CliRunner, git_repo: Path, head: str) -> None:
        stored = runner.invoke(cli, ["store", str(git_repo / "src" / "main.c")])
        address = stored.output.splitlines()[0]
        result = runner.invoke(cli, ["open", "-C", "0", f"{address}::puts"])
        assert result.exit_code == 0
        assert result.output.strip() == '>     5      puts("hello");'

    def test_export_broken_link(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["export", f"{tmp_path}::v::f"])
        assert result.exit_code == 1
        assert "Broken link: Not a git repository" in result.output
