"""Production dependency installer using the package manager CLI."""

import logging
import shlex
from pathlib import Path

from omnizm.core.errors import InstallationError
from omnizm.core.installer.abc import DependencyInstaller
from omnizm.core.package_manager import PackageManagerName, build_install_command
from omnizm.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)


class RealDependencyInstaller(DependencyInstaller):
    """Runs `npm install --save`, `yarn add` or `pnpm add` with inherited stdio."""

    def install(
        self,
        project_root: Path,
        package_manager: PackageManagerName,
        dependencies: list[str],
    ) -> None:
        cmd = build_install_command(package_manager, dependencies)
        logger.debug("Running %s in %s", shlex.join(cmd), project_root)
        try:
            run_subprocess_with_context(
                cmd,
                operation_context=f"install dependencies using {package_manager}",
                cwd=project_root,
                capture_output=False,
            )
        except RuntimeError as e:
            logger.debug("Install failed: %s", e)
            raise InstallationError(package_manager, dependencies) from e
