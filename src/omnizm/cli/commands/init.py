"""Init command for creating components.yml."""

import click

from omnizm.cli.error_boundary import cli_error_boundary
from omnizm.cli.output import cancel, intro, outro, user_output
from omnizm.cli.prompts import select_stack
from omnizm.core.context import OmnizmContext
from omnizm.core.paths import CONFIG_FILE
from omnizm.core.project_config import STACK_VALUES, write_default_config


@click.command("init")
@click.option(
    "--stack",
    type=click.Choice(STACK_VALUES),
    default=None,
    help="Framework to configure (prompted for when omitted)",
)
@click.pass_obj
@cli_error_boundary
def init_cmd(ctx: OmnizmContext, stack: str | None) -> None:
    """Create components.yml for this project.

    Prompts for the framework unless --stack is given. An existing
    components.yml is left untouched.
    """
    intro("omnizm - UI Component CLI")

    selected_stack = stack if stack is not None else select_stack()

    try:
        created = write_default_config(ctx.project_root, selected_stack)
    except OSError as e:
        user_output(click.style(f"Failed to create {CONFIG_FILE}", fg="red"))
        user_output(click.style(str(e), dim=True))
        cancel("An error occurred during initialization")

    if not created:
        user_output(f"{CONFIG_FILE} already exists")
        return

    user_output(f"Created {CONFIG_FILE}")
    outro(
        f"Installation complete! Stack selected: {click.style(selected_stack, fg='cyan')}\n"
        f"You can now start adding components with {click.style('`omnizm add`', fg='green')}"
        f" or {click.style('`omnizm add <component-name>`', fg='green')}"
    )
