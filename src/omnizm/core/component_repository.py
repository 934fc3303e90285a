"""Filesystem-based component repository."""

import logging
from pathlib import Path

from omnizm.core.components import Component, ComponentFile
from omnizm.core.errors import ComponentNotFoundError, ComponentSourceError
from omnizm.core.manifest import DependencyManifest, load_manifest
from omnizm.core.paths import COMPONENT_EXTENSION, ui_source_dir

logger = logging.getLogger(__name__)


class ComponentRepository:
    """Reads component sources from a project's ui/ directory.

    Reads are side-effect free, so the same component may be read any number
    of times (once while aggregating dependencies and again while copying).
    """

    def __init__(self, source_dir: Path, manifest: DependencyManifest | None = None) -> None:
        """Initialize repository.

        Args:
            source_dir: Directory holding <name>.tsx component sources
            manifest: Dependency manifest. If None, uses the built-in manifest.
        """
        self._source_dir = source_dir
        self._manifest = manifest if manifest is not None else DependencyManifest()

    @classmethod
    def for_project(cls, project_root: Path) -> "ComponentRepository":
        """Create a repository for <project_root>/ui, loading ui/manifest.yml if present."""
        source_dir = ui_source_dir(project_root)
        return cls(source_dir, load_manifest(source_dir))

    @property
    def source_dir(self) -> Path:
        return self._source_dir

    @property
    def manifest(self) -> DependencyManifest:
        return self._manifest

    def source_path(self, name: str) -> Path:
        return self._source_dir / f"{name}{COMPONENT_EXTENSION}"

    def list_available(self) -> list[str]:
        """List component names available in the source directory.

        Returns:
            Sorted component names (file names with the extension stripped)

        Raises:
            ComponentSourceError: If the source directory cannot be read
        """
        try:
            entries = list(self._source_dir.iterdir())
        except OSError as e:
            raise ComponentSourceError("Unable to read UI components directory") from e

        return sorted(
            entry.name.removesuffix(COMPONENT_EXTENSION)
            for entry in entries
            if entry.is_file() and entry.name.endswith(COMPONENT_EXTENSION)
        )

    def read(self, name: str) -> Component:
        """Read a component and its declared dependencies.

        Raises:
            ComponentNotFoundError: If ui/<name>.tsx does not exist
            ComponentSourceError: If the file exists but cannot be read
        """
        path = self.source_path(name)
        if not path.is_file():
            raise ComponentNotFoundError(name, path)

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ComponentSourceError(f"Failed to read component {name}: {e}") from e

        logger.debug("Read component %s from %s", name, path)
        return Component(
            name=name,
            files=(ComponentFile(name=path.name, content=content),),
            dependencies=self._manifest.dependencies_for(name),
        )
