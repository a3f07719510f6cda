"""Build the module catalog that the inspector walks."""

import importlib
import logging
import sys
from collections.abc import Iterable
from types import ModuleType

from ...domain.models import IntrospectionError

logger = logging.getLogger(__name__)


def loaded_modules() -> list[ModuleType]:
    """
    Snapshot of every module currently loaded in the process.

    Modules are ordered by their ``sys.modules`` key. A module registered
    under several keys (``os.path`` and ``posixpath``) appears once, at its
    first key.
    """
    modules: list[ModuleType] = []
    seen: set[int] = set()

    for _, module in sorted(dict(sys.modules).items()):
        if not isinstance(module, ModuleType) or id(module) in seen:
            continue
        seen.add(id(module))
        modules.append(module)

    return modules


def import_modules(
    module_names: Iterable[str], skip_unimportable: bool = False
) -> list[ModuleType]:
    """
    Import the named modules, preserving the given order.

    Args:
        module_names: Dotted module names
        skip_unimportable: Log and skip modules that fail to import

    Returns:
        Imported modules, without duplicates

    Raises:
        IntrospectionError: If a module fails to import and skipping is disabled
    """
    modules: list[ModuleType] = []
    seen: set[int] = set()

    for name in module_names:
        try:
            module = importlib.import_module(name)
        except Exception as e:
            if not skip_unimportable:
                raise IntrospectionError(f"Failed to import module {name}: {e}") from e
            logger.warning(f"Skipping module {name}: {e}")
            continue
        # Repeated names and aliases resolve to the same module object
        if id(module) not in seen:
            seen.add(id(module))
            modules.append(module)

    return modules


def build_catalog(
    module_names: Iterable[str] | None = None, skip_unimportable: bool = False
) -> list[ModuleType]:
    """Explicit modules when named, otherwise every loaded module."""
    names = list(module_names or [])
    if names:
        logger.debug(f"Building catalog from {len(names)} named modules")
        return import_modules(names, skip_unimportable=skip_unimportable)

    modules = loaded_modules()
    logger.debug(f"Building catalog from {len(modules)} loaded modules")
    return modules
