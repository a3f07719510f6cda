"""
Port interfaces for the testscaffold system.

This module contains the interface definitions using Python Protocols
to define contracts between the application layer and adapters.
"""

from .introspection_port import IntrospectionPort
from .writer_port import WriterPort

__all__ = [
    "IntrospectionPort",
    "WriterPort",
]
