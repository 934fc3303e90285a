"""Component installation pipeline.

aggregate dependencies -> install them -> copy component files.

Dependency installation failures are governed by continue_on_install_failure:
when True the error is recorded on the result and copying proceeds, when False
it propagates before any file is written.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from omnizm.core.component_repository import ComponentRepository
from omnizm.core.context import OmnizmContext
from omnizm.core.copy_stage import copy_components
from omnizm.core.dependencies import DependencySet, aggregate_dependencies
from omnizm.core.errors import InstallationError
from omnizm.core.installer.abc import DependencyInstaller
from omnizm.core.package_manager import PackageManagerName, detect_package_manager
from omnizm.core.paths import components_target_dir

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallationResult:
    """Outcome of installing a batch of components.

    Attributes:
        installed: Components copied successfully, in selection order
        failed: Components that could not be copied, in selection order
        errors: Failure reason for each failed component
        dependencies: Aggregated dependencies of the batch
        package_manager: Manager used for installation, or None if nothing was installed
        install_error: Message of a tolerated installation failure, if any
    """

    installed: list[str]
    failed: list[str]
    errors: dict[str, str]
    dependencies: DependencySet
    package_manager: PackageManagerName | None
    install_error: str | None

    @property
    def has_failures(self) -> bool:
        return bool(self.failed) or self.install_error is not None


def install_dependencies(
    installer: DependencyInstaller, project_root: Path, dependencies: DependencySet
) -> PackageManagerName | None:
    """Install the batch's dependencies with the project's package manager.

    Returns:
        The package manager used, or None when there was nothing to install

    Raises:
        InstallationError: If the package manager fails
    """
    if dependencies.is_empty:
        return None

    manager = detect_package_manager(project_root)
    installer.install(project_root, manager, dependencies.sorted_general())
    return manager


def install_components(
    ctx: OmnizmContext,
    names: list[str],
    *,
    repository: ComponentRepository | None = None,
    continue_on_install_failure: bool = True,
) -> InstallationResult:
    """Install dependencies for the named components, then copy them into the project.

    Duplicate names are collapsed, keeping the first occurrence.

    Args:
        ctx: Application context
        names: Component names, already validated against the ui directory
        repository: Repository the names were validated against; built from
            ctx when omitted
        continue_on_install_failure: Whether a failed package install still
            lets the components be copied

    Raises:
        ComponentNotFoundError: If a component disappears before aggregation
        InstallationError: If installation fails and continue_on_install_failure is False
    """
    selection = list(dict.fromkeys(names))
    if repository is None:
        repository = ctx.component_repository()

    logger.debug("Aggregating dependencies for %s", ", ".join(selection))
    dependencies = aggregate_dependencies(repository, selection)

    package_manager: PackageManagerName | None = None
    install_error: str | None = None
    try:
        package_manager = install_dependencies(ctx.installer, ctx.project_root, dependencies)
    except InstallationError as e:
        if not continue_on_install_failure:
            raise
        logger.debug("Continuing after install failure: %s", e)
        package_manager = e.package_manager
        install_error = str(e)

    target_dir = components_target_dir(ctx.project_root)
    logger.debug("Copying %d component(s) to %s", len(selection), target_dir)
    copied = copy_components(repository, selection, target_dir)

    return InstallationResult(
        installed=copied.installed,
        failed=copied.failed,
        errors=copied.errors,
        dependencies=dependencies,
        package_manager=package_manager,
        install_error=install_error,
    )
