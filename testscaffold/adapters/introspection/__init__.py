"""
Introspection adapters for testscaffold.

This package contains adapters for walking live modules and describing the
classes that qualify for test scaffolding.
"""

from .catalog import build_catalog, import_modules, loaded_modules
from .runtime_inspector import RuntimeInspector, select_primary_constructor

__all__ = [
    "RuntimeInspector",
    "build_catalog",
    "import_modules",
    "loaded_modules",
    "select_primary_constructor",
]
