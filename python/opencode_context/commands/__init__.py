"""CLI commands for opencode-context."""
