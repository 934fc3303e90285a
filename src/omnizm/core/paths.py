"""File system layout of a consumer project.

All locations are relative to the project root carried by OmnizmContext.
"""

from pathlib import Path

# Component sources shipped alongside the project
UI_SOURCE_DIR = "ui"
COMPONENT_EXTENSION = ".tsx"
MANIFEST_FILE = "manifest.yml"

# Installed components
COMPONENTS_TARGET_DIR = Path("components") / "ui"

CONFIG_FILE = "components.yml"

YARN_LOCKFILE = "yarn.lock"
PNPM_LOCKFILE = "pnpm-lock.yaml"


def ui_source_dir(project_root: Path) -> Path:
    return project_root / UI_SOURCE_DIR


def components_target_dir(project_root: Path) -> Path:
    return project_root / COMPONENTS_TARGET_DIR


def config_path(project_root: Path) -> Path:
    return project_root / CONFIG_FILE
