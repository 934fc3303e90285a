from pathlib import Path

import click

from omnizm.cli.commands.add import add_cmd
from omnizm.cli.commands.init import init_cmd
from omnizm.cli.output import cancel
from omnizm.core.context import DEBUG_ENV_VAR, configure_logging, create_context
from omnizm.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

UNKNOWN_COMMAND_MESSAGE = "Unknown command. Use `init` or `add [component-name]`"


class OmnizmGroup(click.Group):
    """Group that reports unknown or missing commands with exit status 1."""

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if not ctx.resilient_parsing and self.get_command(ctx, args[0]) is None:
            cancel(UNKNOWN_COMMAND_MESSAGE)
        return super().resolve_command(ctx, args)


@click.group(cls=OmnizmGroup, invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="omnizm")
@click.option(
    "--debug",
    is_flag=True,
    envvar=DEBUG_ENV_VAR,
    help="Show debug logging and full stack traces for errors",
)
@click.option(
    "-C",
    "--project-root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project directory to operate on (defaults to the current directory)",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, project_root: Path | None) -> None:
    """Add UI components to your project."""
    configure_logging(debug=debug)
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(project_root=project_root, debug=debug)

    if ctx.invoked_subcommand is None:
        cancel(UNKNOWN_COMMAND_MESSAGE)


cli.add_command(init_cmd)
cli.add_command(add_cmd)


def main() -> None:
    """CLI entry point used by the `omnizm` console script."""
    cli()


if __name__ == "__main__":
    main()
