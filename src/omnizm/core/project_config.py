"""components.yml template written by `omnizm init`.

The file records the selected stack, style and path aliases for the consumer
project. omnizm writes it once and never reads it back.
"""

from dataclasses import dataclass
from pathlib import Path

from omnizm.core.paths import config_path


@dataclass(frozen=True)
class Stack:
    value: str
    label: str
    hint: str


SUPPORTED_STACKS: tuple[Stack, ...] = (
    Stack(value="nextjs", label="Next.js", hint="React framework by Vercel"),
    Stack(value="svelte", label="SvelteKit", hint="Svelte meta-framework"),
    Stack(value="remix", label="Remix", hint="Full stack React framework"),
    Stack(value="astro", label="Astro", hint="Static site builder"),
)

STACK_VALUES: tuple[str, ...] = tuple(stack.value for stack in SUPPORTED_STACKS)


def render_default_config(stack: str) -> str:
    return (
        "# UI Component Configuration\n"
        f"stack: {stack}\n"
        "style: default\n"
        "tailwind:\n"
        "  config: tailwind.config.js\n"
        "  css: src/styles/globals.css\n"
        "aliases:\n"
        "  components: src/components\n"
        "  utils: src/lib/utils\n"
    )


def write_default_config(project_root: Path, stack: str) -> bool:
    """Write components.yml unless it already exists.

    Returns:
        True if the file was created, False if one was already present

    Raises:
        ValueError: If stack is not a supported stack
        OSError: If the file cannot be written
    """
    if stack not in STACK_VALUES:
        raise ValueError(f"Unsupported stack: {stack}")

    path = config_path(project_root)
    if path.exists():
        return False

    path.write_text(render_default_config(stack), encoding="utf-8")
    return True
