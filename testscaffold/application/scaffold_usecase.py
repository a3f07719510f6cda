"""
Scaffold Use Case - generate skeleton test files from live classes.

This module implements the generator that walks a module catalog, keeps
the concrete classes with public instance methods of their own, and writes
one scaffold test file per class into an output directory.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from types import ModuleType

from ..adapters.introspection.catalog import loaded_modules
from ..config.models import GenerationConfig
from ..domain.models import GeneratedTestFile, TypeDescriptor
from ..ports.introspection_port import IntrospectionPort
from ..ports.writer_port import WriterPort
from .rendering import ScaffoldRenderer

logger = logging.getLogger(__name__)


class TestScriptGenerator:
    """
    Use case for generating scaffold tests.

    Generation is sequential and all-or-nothing: the first introspection or
    write failure propagates and no later type is processed. Files already
    written are left in place.
    """

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        introspection_port: IntrospectionPort,
        writer_port: WriterPort,
        config: GenerationConfig | None = None,
        renderer: ScaffoldRenderer | None = None,
    ):
        """
        Initialize the generator with required ports.

        Args:
            introspection_port: Port for discovering candidate types
            writer_port: Port for writing generated files
            config: Rendering configuration (defaults when None)
            renderer: Renderer override, built from config when None
        """
        self._introspection = introspection_port
        self._writer = writer_port
        self._config = config or GenerationConfig()
        self._renderer = renderer or ScaffoldRenderer(self._config)

    def discover(self, modules: Iterable[ModuleType] | None = None) -> list[TypeDescriptor]:
        """Candidate types for the catalog, every loaded module when None."""
        catalog = list(modules) if modules is not None else loaded_modules()
        return self._introspection.discover_types(catalog)

    def generate_test_scripts(
        self,
        output_directory: str | Path,
        modules: Iterable[ModuleType] | None = None,
    ) -> list[GeneratedTestFile]:
        """
        Generate one scaffold test file per candidate type.

        Args:
            output_directory: Directory receiving the files, created if absent
            modules: Module catalog; every loaded module when None

        Returns:
            Generated files in discovery order

        Raises:
            IntrospectionError: If a module cannot be introspected
            WriterError: If the directory or a file cannot be written
        """
        output_directory = Path(output_directory)
        self._writer.ensure_directory(output_directory)

        candidates = self.discover(modules)
        logger.info(f"Found {len(candidates)} candidate types")

        generated = [
            self.generate_test_for_type(descriptor, output_directory)
            for descriptor in candidates
        ]

        logger.info(f"Generated {len(generated)} test files in {output_directory}")
        return generated

    def generate_test_for_type(
        self, descriptor: TypeDescriptor, output_directory: str | Path
    ) -> GeneratedTestFile:
        """
        Render and write the scaffold for a single type.

        Args:
            descriptor: Candidate type
            output_directory: Directory receiving the file

        Returns:
            The generated file
        """
        file_name = self._renderer.file_name(descriptor)
        file_path = Path(output_directory) / file_name
        content = self._renderer.render(descriptor)

        result = self._writer.write_file(file_path, content)
        logger.debug(
            f"Wrote {file_name} for {descriptor.qualified_name} "
            f"({len(descriptor.methods)} tests)"
        )

        return GeneratedTestFile(
            type_name=descriptor.name,
            file_name=file_name,
            path=str(file_path),
            content=content,
            written=not result.get("dry_run", False),
        )
