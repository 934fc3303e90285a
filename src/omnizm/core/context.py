"""Application context with dependency injection."""

import logging
from dataclasses import dataclass
from pathlib import Path

from omnizm.core.component_repository import ComponentRepository
from omnizm.core.installer.abc import DependencyInstaller

DEBUG_ENV_VAR = "OMNIZM_DEBUG"


@dataclass(frozen=True)
class OmnizmContext:
    """Immutable context holding all dependencies for omnizm operations.

    Created at CLI entry point and threaded through the application via
    Click's context object. Nothing below the CLI reads the process working
    directory; every path is derived from project_root.

    Attributes:
        installer: Package manager integration used by the add pipeline
        project_root: Consumer project directory (holds ui/ and components.yml)
        debug: Whether to show full stack traces and debug logging
    """

    installer: DependencyInstaller
    project_root: Path
    debug: bool

    def component_repository(self) -> ComponentRepository:
        """Create a repository for the project's ui/ directory.

        Raises:
            ManifestError: If ui/manifest.yml is malformed
        """
        return ComponentRepository.for_project(self.project_root)

    @staticmethod
    def for_test(
        installer: DependencyInstaller | None = None,
        project_root: Path | None = None,
        debug: bool = False,
    ) -> "OmnizmContext":
        """Create test context with optional pre-configured implementations.

        Uses a FakeDependencyInstaller by default so tests never run a
        package manager.

        Args:
            installer: Optional DependencyInstaller. If None, creates FakeDependencyInstaller.
            project_root: Project directory (defaults to Path("/test/project"))
            debug: Whether to enable debug mode (default False)

        Example:
            >>> from omnizm.core.installer.fake import FakeDependencyInstaller
            >>> installer = FakeDependencyInstaller()
            >>> ctx = OmnizmContext.for_test(installer=installer, project_root=tmp_path)
        """
        from omnizm.core.installer.fake import FakeDependencyInstaller

        resolved_installer: DependencyInstaller = (
            installer if installer is not None else FakeDependencyInstaller()
        )
        resolved_project_root = project_root if project_root is not None else Path("/test/project")

        return OmnizmContext(
            installer=resolved_installer,
            project_root=resolved_project_root,
            debug=debug,
        )


def configure_logging(*, debug: bool) -> None:
    """Enable debug logging when --debug (or OMNIZM_DEBUG, read by click) is set."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


def create_context(*, project_root: Path | None, debug: bool) -> OmnizmContext:
    """Create production context with real implementations.

    Called once at CLI entry point. This is the only place the process
    working directory is consulted.

    Args:
        project_root: Explicit project directory, or None for the current directory
        debug: If True, enable debug mode (full stack traces in error handling)
    """
    from omnizm.core.installer.real import RealDependencyInstaller

    resolved_root = project_root if project_root is not None else Path.cwd()

    return OmnizmContext(
        installer=RealDependencyInstaller(),
        project_root=resolved_root.resolve(),
        debug=debug,
    )
