"""Fake dependency installer for testing.

FakeDependencyInstaller records install() calls without starting any process.
"""

from pathlib import Path

from omnizm.core.errors import InstallationError
from omnizm.core.installer.abc import DependencyInstaller
from omnizm.core.package_manager import PackageManagerName


class FakeDependencyInstaller(DependencyInstaller):
    """In-memory fake that tracks install calls.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.

    Examples:
        >>> installer = FakeDependencyInstaller()
        >>> installer.install(Path("/project"), "npm", ["clsx"])
        >>> installer.install_calls
        [(PosixPath('/project'), 'npm', ['clsx'])]

        >>> failing = FakeDependencyInstaller(fail=True)
        >>> failing.install(Path("/project"), "yarn", ["clsx"])
        Traceback (most recent call last):
        ...
        omnizm.core.errors.InstallationError: Failed to install dependencies using yarn
    """

    def __init__(self, *, fail: bool = False) -> None:
        """Create fake installer.

        Args:
            fail: If True, every install() call is recorded and then raises
                InstallationError, as a non-zero package manager exit would
        """
        self._fail = fail
        self._install_calls: list[tuple[Path, PackageManagerName, list[str]]] = []

    @property
    def install_calls(self) -> list[tuple[Path, PackageManagerName, list[str]]]:
        """Get the list of install() calls that were made.

        Returns list of (project_root, package_manager, dependencies) tuples.

        This property is for test assertions only.
        """
        return self._install_calls.copy()

    def install(
        self,
        project_root: Path,
        package_manager: PackageManagerName,
        dependencies: list[str],
    ) -> None:
        self._install_calls.append((project_root, package_manager, list(dependencies)))
        if self._fail:
            raise InstallationError(package_manager, list(dependencies))
