"""Maven dependency license checker."""

__version__ = "0.1.0"
