"""Tests for the init command."""

from pathlib import Path
from unittest.mock import patch

import click
from click.testing import CliRunner

from omnizm.cli.cli import cli
from omnizm.core.project_config import render_default_config
from tests.test_utils.env_helpers import simulated_project_env


def test_init_prompts_for_stack_and_writes_config() -> None:
    runner = CliRunner()
    with simulated_project_env(runner) as env:
        test_ctx = env.build_context()

        result = runner.invoke(cli, ["init"], obj=test_ctx, input="2\n")

        assert result.exit_code == 0, result.output
        config = env.project_root / "components.yml"
        assert config.read_text(encoding="utf-8") == render_default_config("svelte")
        assert "Created components.yml" in result.output
        assert "Stack selected: svelte" in result.output


def test_init_accepts_stack_name_at_prompt() -> None:
    runner = CliRunner()
    with simulated_project_env(runner) as env:
        result = runner.invoke(cli, ["init"], obj=env.build_context(), input="astro\n")

        assert result.exit_code == 0, result.output
        assert "stack: astro" in (env.project_root / "components.yml").read_text(encoding="utf-8")


def test_init_reprompts_on_invalid_choice() -> None:
    runner = CliRunner()
    with simulated_project_env(runner) as env:
        result = runner.invoke(cli, ["init"], obj=env.build_context(), input="angular\n1\n")

        assert result.exit_code == 0, result.output
        assert "'angular' is not one of the listed options" in result.output
        assert "stack: nextjs" in (env.project_root / "components.yml").read_text(encoding="utf-8")


def test_init_with_stack_option_skips_prompt() -> None:
    runner = CliRunner()
    with simulated_project_env(runner) as env:
        result = runner.invoke(cli, ["init", "--stack", "remix"], obj=env.build_context())

        assert result.exit_code == 0, result.output
        assert "Choose your framework" not in result.output
        assert "stack: remix" in (env.project_root / "components.yml").read_text(encoding="utf-8")


def test_init_existing_config_is_noop() -> None:
    runner = CliRunner()
    with simulated_project_env(runner) as env:
        config = env.project_root / "components.yml"
        config.write_text("stack: custom\n", encoding="utf-8")
        mtime_before = config.stat().st_mtime_ns

        result = runner.invoke(cli, ["init", "--stack", "nextjs"], obj=env.build_context())

        assert result.exit_code == 0, result.output
        assert "components.yml already exists" in result.output
        assert config.read_text(encoding="utf-8") == "stack: custom\n"
        assert config.stat().st_mtime_ns == mtime_before


def test_init_cancelled_prompt_exits_1() -> None:
    runner = CliRunner()
    with simulated_project_env(runner) as env:
        with patch("omnizm.cli.prompts.click.prompt", side_effect=click.Abort()):
            result = runner.invoke(cli, ["init"], obj=env.build_context())

        assert result.exit_code == 1
        assert "Operation cancelled" in result.output
        assert not (env.project_root / "components.yml").exists()


def test_init_write_failure_exits_1() -> None:
    runner = CliRunner()
    with simulated_project_env(runner) as env:
        with patch.object(Path, "write_text", side_effect=PermissionError("Permission denied")):
            result = runner.invoke(cli, ["init", "--stack", "nextjs"], obj=env.build_context())

        assert result.exit_code == 1
        assert "Failed to create components.yml" in result.output
        assert "An error occurred during initialization" in result.output


def test_init_rejects_unknown_stack_option() -> None:
    runner = CliRunner()
    with simulated_project_env(runner) as env:
        result = runner.invoke(cli, ["init", "--stack", "angular"], obj=env.build_context())

        assert result.exit_code != 0
        assert not (env.project_root / "components.yml").exists()
