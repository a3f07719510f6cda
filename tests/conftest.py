"""Global fixtures and utilities for the testscaffold test suite.

The sample modules under ``scaffold_samples`` are imported by name, so this
directory must be importable (pytest prepends it to ``sys.path``).
"""

import importlib
import os

import pytest

from testscaffold.adapters.introspection.runtime_inspector import RuntimeInspector
from testscaffold.adapters.io.writer_overwrite import WriterOverwriteAdapter
from testscaffold.application.scaffold_usecase import TestScriptGenerator
from testscaffold.config.models import GenerationConfig


# ================================================================================
# Sample Module Fixtures
# ================================================================================

@pytest.fixture
def sample_module():
    """Module holding one class per discovery branch."""
    return importlib.import_module("scaffold_samples.sample_types")


@pytest.fixture
def other_module():
    """Second sample module with a single candidate."""
    return importlib.import_module("scaffold_samples.other_types")


# ================================================================================
# Service Fixtures
# ================================================================================

@pytest.fixture
def inspector():
    """Inspector with the fail-fast error policy."""
    return RuntimeInspector()


@pytest.fixture
def generator(inspector):
    """Generator wired to a real writer with default rendering."""
    return TestScriptGenerator(
        introspection_port=inspector,
        writer_port=WriterOverwriteAdapter(),
        config=GenerationConfig(),
    )


@pytest.fixture
def describe(inspector, sample_module):
    """Factory returning the descriptor of a sample class by name."""

    def _describe(class_name: str):
        return inspector.describe_type(getattr(sample_module, class_name))

    return _describe


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep developer TESTSCAFFOLD_* settings out of the tests."""
    for key in list(os.environ):
        if key.startswith("TESTSCAFFOLD_"):
            monkeypatch.delenv(key, raising=False)
