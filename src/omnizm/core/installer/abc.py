"""Dependency installer abstraction.

Real implementations shell out to a package manager. Fake implementations
record calls in memory so the add pipeline can be tested without npm, yarn or pnpm.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from omnizm.core.package_manager import PackageManagerName


class DependencyInstaller(ABC):
    """Abstract interface for installing packages into a project."""

    @abstractmethod
    def install(
        self,
        project_root: Path,
        package_manager: PackageManagerName,
        dependencies: list[str],
    ) -> None:
        """Install dependencies with the given package manager.

        Runs synchronously in project_root. Output goes straight to the
        user's terminal.

        Args:
            project_root: Directory to run the package manager in
            package_manager: Which manager's install command to use
            dependencies: Package identifiers, at least one

        Raises:
            InstallationError: If the package manager fails
        """
        ...
