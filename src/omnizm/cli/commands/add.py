"""Add command: install UI components and their dependencies into the project."""

import logging

import click

from omnizm.cli.error_boundary import cli_error_boundary
from omnizm.cli.output import (
    cancel,
    intro,
    outro,
    print_installation_summary,
    user_output,
    warn,
)
from omnizm.cli.prompts import multiselect_components
from omnizm.core.component_repository import ComponentRepository
from omnizm.core.context import OmnizmContext
from omnizm.core.errors import InstallationError
from omnizm.core.installation import InstallationResult, install_components

logger = logging.getLogger(__name__)


def _validate_component_names(names: list[str], available: list[str]) -> None:
    """Exit with status 1 if any requested name is not an available component."""
    invalid = [name for name in names if name not in available]
    if not invalid:
        return

    user_output(click.style("\nThe following components are not available:", fg="red"))
    for name in invalid:
        user_output(f"- {name}")
    user_output("\nAvailable components:")
    for name in available:
        user_output(f"- {click.style(name, fg='cyan')}")
    raise SystemExit(1)


def _report_failures(result: InstallationResult) -> None:
    if result.install_error is not None:
        warn(result.install_error, "Continuing with component files.")
    for name in result.failed:
        warn(f"Failed to add {name}", result.errors.get(name))


@click.command("add")
@click.argument("components", nargs=-1)
@click.option(
    "--fail-on-install-error",
    is_flag=True,
    envvar="OMNIZM_FAIL_ON_INSTALL_ERROR",
    help="Stop before copying files if the package manager fails",
)
@click.pass_obj
@cli_error_boundary
def add_cmd(ctx: OmnizmContext, components: tuple[str, ...], fail_on_install_error: bool) -> None:
    """Add components from ui/ to components/ui/.

    With COMPONENTS, installs exactly those components. Without arguments,
    prompts for a selection from the ui/ directory.

    Examples:

        # Choose interactively
        omnizm add

        # Install two components directly
        omnizm add button card
    """
    intro("omnizm - Add Components")

    repository: ComponentRepository = ctx.component_repository()
    available = repository.list_available()

    if components:
        selection = list(components)
        _validate_component_names(selection, available)
    else:
        if not available:
            cancel("No components found in the ui directory")
        selection = multiselect_components(available)

    logger.debug("Selected components: %s", ", ".join(selection))

    try:
        result = install_components(
            ctx,
            selection,
            repository=repository,
            continue_on_install_failure=not fail_on_install_error,
        )
    except InstallationError as e:
        user_output(click.style(f"Error: {e}", fg="red"))
        cancel("Installation failed")

    _report_failures(result)
    print_installation_summary(result)
    if result.failed:
        outro(f"Component installation completed ({len(result.failed)} failed)")
    elif result.has_failures:
        outro("Component installation completed with dependency errors")
    else:
        outro("Component installation completed successfully!")
