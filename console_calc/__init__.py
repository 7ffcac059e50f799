"""Interactive menu-driven console calculator."""

__version__ = "1.0.0"
