"""taskroom - kanban board client with shared rooms."""

__version__ = "0.1.0"
