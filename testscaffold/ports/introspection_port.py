from abc import abstractmethod
from collections.abc import Iterable
from types import ModuleType
from typing import Protocol

from ..domain.models import TypeDescriptor

"""Port for discovering candidate types in a module catalog."""


class IntrospectionPort(Protocol):
    """Port interface for type discovery operations."""

    @abstractmethod
    def discover_types(self, modules: Iterable[ModuleType]) -> list[TypeDescriptor]:
        """Return candidate types from the given modules, in catalog order."""
        pass
