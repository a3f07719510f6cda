"""Main CLI entry point for testscaffold."""

import logging
import sys
from pathlib import Path

import click

from ..adapters.introspection.catalog import build_catalog
from ..adapters.io.enhanced_logging import (
    LoggerManager,
    get_operation_logger,
    setup_enhanced_logging,
)
from ..adapters.io.rich_cli import (
    build_candidate_table,
    create_console,
    print_generation_summary,
)
from ..config.loader import ConfigLoader
from ..config.models import ScaffoldConfig
from ..domain.models import ScaffoldError
from .dependency_injection import create_dependency_container

logger = logging.getLogger(__name__)


class ClickContext:
    """Context object for Click commands."""

    def __init__(self) -> None:
        self.config: ScaffoldConfig | None = None
        self.verbose: bool = False
        self.quiet: bool = False


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Reduce output: set log level to WARNING and hide INFO",
)
@click.option(
    "--ui",
    type=click.Choice(["minimal", "classic"], case_sensitive=False),
    help="Log style: 'minimal' for CI/non-TTY, 'classic' for interactive (auto-detected by default)",
)
@click.pass_context
def app(
    ctx: click.Context,
    config: Path | None,
    verbose: bool,
    quiet: bool,
    ui: str | None,
) -> None:
    """testscaffold - generate skeleton pytest files for live Python classes."""
    ctx.ensure_object(ClickContext)
    ctx.obj.verbose = verbose
    ctx.obj.quiet = quiet

    setup_enhanced_logging(create_console(stderr=True))

    try:
        ctx.obj.config = ConfigLoader(config).load_config()
    except ScaffoldError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    LoggerManager.set_log_mode(
        LoggerManager.resolve_log_mode(ui),
        verbose=verbose,
        quiet=quiet,
        default_level=ctx.obj.config.logging.level_number,
    )
    logger.debug("Debug mode enabled - verbose logging active")


@app.command()
@click.option(
    "--module",
    "-m",
    "modules",
    multiple=True,
    help="Module to inspect (repeatable); defaults to every loaded module",
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    help="Output directory (default: ./GeneratedTests)",
)
@click.option(
    "--dry-run", is_flag=True, help="Render scaffolds without writing them"
)
@click.pass_context
def generate(
    ctx: click.Context,
    modules: tuple[str, ...],
    output_dir: Path | None,
    dry_run: bool,
) -> None:
    """Generate one scaffold test file per candidate class."""
    config: ScaffoldConfig = ctx.obj.config
    operation_logger = get_operation_logger("generate")

    output_directory = output_dir or Path.cwd() / config.generation.output_dir_name

    try:
        with operation_logger.operation_context(
            "test_generation",
            output_directory=str(output_directory),
            dry_run=dry_run,
        ):
            container = create_dependency_container(config, dry_run=dry_run)
            catalog = build_catalog(
                modules or config.discovery.modules,
                skip_unimportable=config.discovery.skip_unintrospectable,
            )
            generated = container["generator"].generate_test_scripts(
                output_directory, catalog
            )
            if dry_run:
                operation_logger.info(
                    f"Dry run: {len(generated)} files rendered, none written"
                )
    except ScaffoldError as e:
        logger.error(f"Test generation failed: {e}", exc_info=ctx.obj.verbose)
        sys.exit(1)

    print_generation_summary(create_console(), str(output_directory))


@app.command(name="list")
@click.option(
    "--module",
    "-m",
    "modules",
    multiple=True,
    help="Module to inspect (repeatable); defaults to every loaded module",
)
@click.pass_context
def list_types(ctx: click.Context, modules: tuple[str, ...]) -> None:
    """Show the classes that would receive scaffold files."""
    config: ScaffoldConfig = ctx.obj.config

    try:
        container = create_dependency_container(config, dry_run=True)
        catalog = build_catalog(
            modules or config.discovery.modules,
            skip_unimportable=config.discovery.skip_unintrospectable,
        )
        candidates = container["generator"].discover(catalog)
    except ScaffoldError as e:
        logger.error(f"Discovery failed: {e}", exc_info=ctx.obj.verbose)
        sys.exit(1)

    create_console().print(build_candidate_table(candidates))


if __name__ == "__main__":
    app()
