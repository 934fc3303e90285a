"""Tests for the top-level omnizm command group."""

import runpy
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from omnizm.cli.cli import cli
from omnizm.core.context import OmnizmContext
from omnizm.core.installer.fake import FakeDependencyInstaller
from omnizm.version import __version__
from tests.test_utils.env_helpers import simulated_project_env


def test_unknown_command_exits_1() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["remove", "button"], obj=OmnizmContext.for_test())

    assert result.exit_code == 1
    assert "Unknown command. Use `init` or `add [component-name]`" in result.output


def test_no_command_exits_1() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, [], obj=OmnizmContext.for_test())

    assert result.exit_code == 1
    assert "Unknown command" in result.output


def test_help_lists_commands() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "init" in result.output
    assert "add" in result.output


def test_version_option() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_project_root_option_threads_explicit_root() -> None:
    runner = CliRunner()
    with simulated_project_env(runner) as env:
        other_root = env.project_root.parent / "other"
        (other_root / "ui").mkdir(parents=True)
        (other_root / "ui" / "card.tsx").write_text("// card\n", encoding="utf-8")

        installer = FakeDependencyInstaller()

        def fake_create_context(*, project_root: Path | None, debug: bool) -> OmnizmContext:
            assert project_root is not None
            return OmnizmContext(installer=installer, project_root=project_root, debug=debug)

        with patch("omnizm.cli.cli.create_context", fake_create_context):
            result = runner.invoke(cli, ["-C", str(other_root), "add", "card"])

        assert result.exit_code == 0, result.output
        assert (other_root / "components" / "ui" / "card.tsx").exists()
        assert not (env.project_root / "components").exists()
        assert installer.install_calls[0][0] == other_root


def test_debug_flag_reraises_unexpected_errors() -> None:
    runner = CliRunner()
    with simulated_project_env(runner) as env:
        env.ui_dir.rmdir()
        test_ctx = env.build_context(debug=True)

        result = runner.invoke(cli, ["add", "card"], obj=test_ctx)

        assert result.exit_code == 1
        assert isinstance(result.exception, OSError)


def test_debug_env_zero_leaves_debug_logging_off() -> None:
    runner = CliRunner()
    with simulated_project_env(runner) as env:
        seen: list[bool] = []

        with patch("omnizm.cli.cli.configure_logging", lambda *, debug: seen.append(debug)):
            result = runner.invoke(
                cli,
                ["init", "--stack", "nextjs"],
                obj=env.build_context(),
                env={"OMNIZM_DEBUG": "0"},
            )

        assert result.exit_code == 0, result.output
        assert seen == [False]


def test_debug_env_one_turns_debug_logging_on() -> None:
    runner = CliRunner()
    with simulated_project_env(runner) as env:
        seen: list[bool] = []

        with patch("omnizm.cli.cli.configure_logging", lambda *, debug: seen.append(debug)):
            result = runner.invoke(
                cli,
                ["init", "--stack", "nextjs"],
                obj=env.build_context(),
                env={"OMNIZM_DEBUG": "1"},
            )

        assert result.exit_code == 0, result.output
        assert seen == [True]


def test_python_dash_m_runs_cli_main() -> None:
    with patch("omnizm.cli.cli.main") as main:
        runpy.run_module("omnizm", run_name="__main__")

    main.assert_called_once_with()
