"""Copy component sources into the consumer project."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from omnizm.core.component_repository import ComponentRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CopyResult:
    """Per-component outcome of a copy batch.

    installed and failed keep selection order and together cover the batch.
    errors maps each failed name to the reason it failed.
    """

    installed: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)


def copy_components(
    repository: ComponentRepository, names: list[str], target_dir: Path
) -> CopyResult:
    """Write every file of every named component into target_dir.

    Each component is attempted independently: a missing source, an unreadable
    file or a failed write marks that component failed and the batch moves on.
    Existing files in target_dir are overwritten.
    """
    result = CopyResult()
    target_dir.mkdir(parents=True, exist_ok=True)

    for name in names:
        try:
            component = repository.read(name)
            for component_file in component.files:
                destination = target_dir / component_file.name
                if destination.exists():
                    logger.debug("Overwriting %s", destination)
                destination.write_text(component_file.content, encoding="utf-8")
                logger.debug("Wrote %s", destination)
        except OSError as e:
            logger.debug("Failed to copy %s: %s", name, e)
            result.failed.append(name)
            result.errors[name] = str(e)
            continue
        result.installed.append(name)

    return result
