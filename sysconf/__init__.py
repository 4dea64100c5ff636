"""List, query and change key/value entries in configuration files."""

__version__ = "0.0.1"

__all__ = ["errors", "parser", "writer", "cli"]