"""Install the OpenCode context-update skill and command into a project."""

__version__ = "1.0.0"
