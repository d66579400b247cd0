"""An in-memory hierarchical file system with a small interactive shell."""

__version__ = "0.1.0"
__all__ = ["filesystem", "shell"]