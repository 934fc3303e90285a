"""Exceptions raised by the component installation pipeline.

Each exception subclasses the builtin that callers already handle, so the CLI
error boundary can report them without knowing about omnizm types:

- ComponentNotFoundError: FileNotFoundError (no ui/<name>.tsx)
- ComponentSourceError: OSError (source exists but cannot be listed or read)
- InstallationError: RuntimeError (package manager exited non-zero)
- ManifestError: ValueError (ui/manifest.yml is malformed)
"""

from pathlib import Path

from omnizm.core.package_manager import PackageManagerName


class ComponentNotFoundError(FileNotFoundError):
    """Raised when a component has no source file in the ui directory."""

    def __init__(self, name: str, path: Path) -> None:
        super().__init__(f"Component file not found at {path}")
        self.name = name
        self.path = path


class ComponentSourceError(OSError):
    """Raised when the component source directory or file cannot be read."""


class InstallationError(RuntimeError):
    """Raised when the package manager fails to install dependencies."""

    def __init__(self, package_manager: PackageManagerName, dependencies: list[str]) -> None:
        super().__init__(f"Failed to install dependencies using {package_manager}")
        self.package_manager = package_manager
        self.dependencies = dependencies


class ManifestError(ValueError):
    """Raised when the component manifest cannot be parsed."""
