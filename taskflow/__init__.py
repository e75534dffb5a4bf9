"""TaskFlow: ownership-scoped task boards."""

__version__ = "1.0.0"
