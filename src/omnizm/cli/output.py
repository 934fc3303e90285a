"""Output utilities for CLI commands with clear intent.

user_output is for messages addressed to the user and goes to stderr.
The installation summary is rendered as a rich Panel on stdout.
"""

from typing import NoReturn

import click
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from omnizm.core.installation import InstallationResult


def user_output(message: str = "", nl: bool = True) -> None:
    """Output informational message for the user (stderr)."""
    click.echo(message, err=True, nl=nl)


def intro(title: str) -> None:
    user_output(click.style(f" {title} ", fg="black", bg="cyan"))


def outro(message: str) -> None:
    user_output(click.style(message, fg="green"))


def warn(message: str, detail: str | None = None) -> None:
    user_output(click.style(f"Warning: {message}", fg="yellow"))
    if detail:
        user_output(click.style(detail, dim=True))


def cancel(message: str) -> NoReturn:
    """Print a cancellation message and exit with status 1."""
    user_output(click.style(message, fg="red"))
    raise SystemExit(1)


def _bullets(items: list[str], style: str | None = None) -> list[Text]:
    return [Text.assemble("- ", (item, style or "")) for item in items]


def format_installation_summary(result: InstallationResult) -> Panel:
    """Format the summary box listing installed and failed components and packages.

    Example:
        >>> panel = format_installation_summary(result)
        >>> Console().print(panel)
    """
    lines: list[Text] = []

    if result.installed:
        lines.append(Text("Successfully installed components:", style="green"))
        lines.extend(_bullets(result.installed, "cyan"))

    if result.failed:
        if lines:
            lines.append(Text(""))
        lines.append(Text("Failed to install components:", style="yellow"))
        lines.extend(_bullets(result.failed, "red"))

    general = result.dependencies.sorted_general()
    if general:
        if lines:
            lines.append(Text(""))
        if result.install_error is None:
            heading = f"Installed dependencies ({result.package_manager}):"
        else:
            heading = "Dependencies (installation failed, install them manually):"
        lines.append(Text(heading, style="yellow"))
        lines.extend(_bullets(general))

    special = result.dependencies.sorted_special()
    if special:
        lines.append(Text(""))
        lines.append(Text("Component-specific packages:", style="green"))
        lines.extend(_bullets(special))

    success = not result.has_failures
    if success:
        title = "Component installation completed"
    else:
        title = "Component installation finished with errors"
    return Panel(
        Text("\n").join(lines),
        title=title,
        border_style="green" if success else "yellow",
        padding=(1, 2),
    )


def print_installation_summary(result: InstallationResult, console: Console | None = None) -> None:
    if console is None:
        console = Console()
    console.print(format_installation_summary(result))
