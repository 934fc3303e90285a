"""Interactive prompts.

questionary widgets are used when stdin and stdout are a terminal. Otherwise
a numbered list is printed and click.prompt reads the answer, so piped input
and CI runs still work.

Ctrl-C or end of input at any prompt cancels the whole run.
"""

import sys
from collections.abc import Sequence

import click
import questionary

from omnizm.cli.output import cancel, user_output
from omnizm.core.paths import COMPONENT_EXTENSION, UI_SOURCE_DIR
from omnizm.core.project_config import SUPPORTED_STACKS

CANCELLED_MESSAGE = "Operation cancelled"
EMPTY_SELECTION_MESSAGE = "select at least one component"


def _is_interactive() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def _component_hint(name: str) -> str:
    return f"{UI_SOURCE_DIR}/{name}{COMPONENT_EXTENSION}"


def _resolve_token(token: str, options: Sequence[str]) -> str:
    if token in options:
        return token
    if token.isdigit():
        index = int(token)
        if 1 <= index <= len(options):
            return options[index - 1]
        raise click.BadParameter(f"{index} is not between 1 and {len(options)}")
    raise click.BadParameter(f"'{token}' is not one of the listed options")


def parse_multiselect(value: str, options: Sequence[str]) -> list[str]:
    """Parse comma or space separated option numbers or names.

    Exact names win over positions, so a component called "2" is picked by
    name. Returns selected options in the order given, without duplicates.

    Raises:
        click.BadParameter: If a token matches no option or nothing was selected
    """
    tokens = value.replace(",", " ").split()
    if not tokens:
        raise click.BadParameter(EMPTY_SELECTION_MESSAGE)
    return list(dict.fromkeys(_resolve_token(token, options) for token in tokens))


def _validate_checkbox(selected: list[str]) -> bool | str:
    return bool(selected) or EMPTY_SELECTION_MESSAGE


def select_stack() -> str:
    """Prompt for the target framework."""
    if _is_interactive():
        choices = [
            questionary.Choice(title=f"{stack.label} ({stack.hint})", value=stack.value)
            for stack in SUPPORTED_STACKS
        ]
        selected = questionary.select("Choose your framework:", choices=choices).ask()
        if selected is None:
            cancel(CANCELLED_MESSAGE)
        return selected

    values = [stack.value for stack in SUPPORTED_STACKS]
    user_output("Choose your framework:")
    for index, stack in enumerate(SUPPORTED_STACKS, start=1):
        user_output(f"  {index}. {stack.label} " + click.style(f"({stack.hint})", dim=True))

    try:
        return click.prompt(
            "Framework",
            value_proc=lambda value: _resolve_token(value.strip(), values),
            err=True,
        )
    except click.Abort:
        cancel(CANCELLED_MESSAGE)


def multiselect_components(available: Sequence[str]) -> list[str]:
    """Prompt for one or more components from the available names."""
    if _is_interactive():
        choices = [
            questionary.Choice(title=f"{name} ({_component_hint(name)})", value=name)
            for name in available
        ]
        selected = questionary.checkbox(
            "Select components to add:",
            choices=choices,
            validate=_validate_checkbox,
        ).ask()
        if selected is None:
            cancel(CANCELLED_MESSAGE)
        return selected

    user_output("Select components to add:")
    for index, name in enumerate(available, start=1):
        hint = click.style(_component_hint(name), dim=True)
        user_output(f"  {index}. {click.style(name, fg='cyan')} {hint}")

    try:
        return click.prompt(
            "Components (numbers or names, comma separated)",
            value_proc=lambda value: parse_multiselect(value, available),
            err=True,
        )
    except click.Abort:
        cancel(CANCELLED_MESSAGE)
