"""Package manager detection and install command templates."""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Literal

from omnizm.core.paths import PNPM_LOCKFILE, YARN_LOCKFILE

logger = logging.getLogger(__name__)

PackageManagerName = Literal["npm", "yarn", "pnpm"]

INSTALL_COMMANDS: dict[PackageManagerName, tuple[str, ...]] = {
    "npm": ("npm", "install", "--save"),
    "yarn": ("yarn", "add"),
    "pnpm": ("pnpm", "add"),
}


def detect_package_manager(project_root: Path) -> PackageManagerName:
    """Choose the package manager from lockfiles in the project root.

    yarn.lock wins over pnpm-lock.yaml; with neither present npm is used
    without looking for package-lock.json. Lockfiles are checked for existence only.
    """
    if (project_root / YARN_LOCKFILE).exists():
        manager: PackageManagerName = "yarn"
    elif (project_root / PNPM_LOCKFILE).exists():
        manager = "pnpm"
    else:
        manager = "npm"

    logger.debug("Detected package manager %s in %s", manager, project_root)
    return manager


def build_install_command(manager: PackageManagerName, dependencies: Iterable[str]) -> list[str]:
    """Build the install command for a manager followed by every dependency."""
    return [*INSTALL_COMMANDS[manager], *dependencies]
