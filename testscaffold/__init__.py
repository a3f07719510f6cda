"""testscaffold - skeleton pytest generation for live Python classes."""

__version__ = "0.1.0"
