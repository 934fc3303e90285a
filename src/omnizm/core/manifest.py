"""Declarative per-component dependency manifest.

Every component needs the baseline packages. Some components need extra
packages on top; those are listed by component name in BUILTIN_COMPONENT_DEPENDENCIES
and may be extended by an optional ui/manifest.yml:

    components:
      dialog:
        - "@radix-ui/react-dialog"

Name lookups are case-insensitive.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from omnizm.core.errors import ManifestError
from omnizm.core.paths import MANIFEST_FILE

logger = logging.getLogger(__name__)

BASELINE_DEPENDENCIES: tuple[str, ...] = (
    "class-variance-authority",
    "tailwind-merge",
    "clsx",
)

BUILTIN_COMPONENT_DEPENDENCIES: Mapping[str, tuple[str, ...]] = {
    "button": ("@radix-ui/react-slot",),
}


def _dedupe(items: list[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(items))


@dataclass(frozen=True)
class DependencyManifest:
    """Baseline dependencies plus extra dependencies keyed by component name."""

    baseline: tuple[str, ...] = BASELINE_DEPENDENCIES
    extras: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: dict(BUILTIN_COMPONENT_DEPENDENCIES)
    )

    def extra_dependencies(self, component_name: str) -> tuple[str, ...]:
        """Return the extra dependencies for a component (case-insensitive)."""
        return self.extras.get(component_name.lower(), ())

    def dependencies_for(self, component_name: str) -> tuple[str, ...]:
        """Return baseline dependencies followed by the component's extras."""
        return _dedupe([*self.baseline, *self.extra_dependencies(component_name)])

    def merged_with(self, extras: Mapping[str, list[str]]) -> "DependencyManifest":
        """Return a new manifest with additional per-component entries."""
        merged: dict[str, tuple[str, ...]] = dict(self.extras)
        for name, dependencies in extras.items():
            key = name.lower()
            merged[key] = _dedupe([*merged.get(key, ()), *dependencies])
        return DependencyManifest(baseline=self.baseline, extras=merged)


def _parse_components(data: object, manifest_path: Path) -> dict[str, list[str]]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ManifestError(f"{manifest_path}: expected a mapping at the top level")

    components = data.get("components")
    if components is None:
        return {}
    if not isinstance(components, dict):
        raise ManifestError(f"{manifest_path}: 'components' must be a mapping")

    parsed: dict[str, list[str]] = {}
    for name, dependencies in components.items():
        if dependencies is None:
            parsed[str(name)] = []
            continue
        if not isinstance(dependencies, list) or not all(
            isinstance(dep, str) for dep in dependencies
        ):
            raise ManifestError(
                f"{manifest_path}: dependencies for '{name}' must be a list of strings"
            )
        parsed[str(name)] = dependencies
    return parsed


def load_manifest(source_dir: Path) -> DependencyManifest:
    """Load the dependency manifest for a ui source directory.

    Returns the built-in manifest when ui/manifest.yml does not exist.

    Raises:
        ManifestError: If the manifest is not valid YAML or has the wrong shape
    """
    manifest = DependencyManifest()
    manifest_path = source_dir / MANIFEST_FILE
    if not manifest_path.exists():
        return manifest

    try:
        with open(manifest_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ManifestError(f"{manifest_path}: invalid YAML: {e}") from e

    extras = _parse_components(data, manifest_path)
    logger.debug("Loaded %d manifest entries from %s", len(extras), manifest_path)
    return manifest.merged_with(extras)
