"""Dependency injection container for CLI commands."""

from typing import Any

from ..adapters.introspection.runtime_inspector import RuntimeInspector
from ..adapters.io.writer_overwrite import WriterOverwriteAdapter
from ..application.rendering import ScaffoldRenderer
from ..application.scaffold_usecase import TestScriptGenerator
from ..config.models import ScaffoldConfig
from ..domain.models import ScaffoldError


class DependencyError(ScaffoldError):
    """Raised when dependency injection fails."""

    pass


def create_dependency_container(
    config: ScaffoldConfig, dry_run: bool = False
) -> dict[str, Any]:
    """
    Create a dependency injection container with all required services.

    Args:
        config: testscaffold configuration
        dry_run: Render files without writing them

    Returns:
        Dictionary containing all service instances

    Raises:
        DependencyError: If dependency creation fails
    """
    try:
        container: dict[str, Any] = {"config": config}

        container["inspector"] = RuntimeInspector(
            skip_unintrospectable=config.discovery.skip_unintrospectable
        )
        container["writer_adapter"] = WriterOverwriteAdapter(dry_run=dry_run)
        container["renderer"] = ScaffoldRenderer(config.generation)

        container["generator"] = TestScriptGenerator(
            introspection_port=container["inspector"],
            writer_port=container["writer_adapter"],
            config=config.generation,
            renderer=container["renderer"],
        )

        return container

    except Exception as e:
        raise DependencyError(f"Failed to create services: {e}") from e
