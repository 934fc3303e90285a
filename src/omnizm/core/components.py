"""Component data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ComponentFile:
    """A single source file belonging to a component."""

    name: str
    content: str


@dataclass(frozen=True)
class Component:
    """A UI component read from the ui directory.

    Attributes:
        name: Component name (file name without extension)
        files: Files to copy into the project, at least one
        dependencies: External packages the component needs, baseline first
    """

    name: str
    files: tuple[ComponentFile, ...]
    dependencies: tuple[str, ...]
