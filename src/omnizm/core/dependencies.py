"""Dependency aggregation across a batch of selected components."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from omnizm.core.component_repository import ComponentRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DependencySet:
    """Deduplicated dependencies for a batch of components.

    Attributes:
        general: Every dependency needed by the batch (baseline and extras)
        special: Extras contributed by the manifest for specific components;
            always a subset of general
    """

    general: frozenset[str]
    special: frozenset[str]

    @property
    def is_empty(self) -> bool:
        return not self.general

    def sorted_general(self) -> list[str]:
        return sorted(self.general)

    def sorted_special(self) -> list[str]:
        return sorted(self.special)


def aggregate_dependencies(repository: ComponentRepository, names: Iterable[str]) -> DependencySet:
    """Union the dependencies of all named components.

    Order and repetition of names do not affect the result.

    Raises:
        ComponentNotFoundError: If a named component has no source file
        ComponentSourceError: If a component source cannot be read
    """
    general: set[str] = set()
    special: set[str] = set()

    for name in names:
        component = repository.read(name)
        general.update(component.dependencies)
        special.update(repository.manifest.extra_dependencies(name))

    logger.debug("Aggregated %d dependencies (%d special)", len(general), len(special))
    return DependencySet(general=frozenset(general), special=frozenset(special))
