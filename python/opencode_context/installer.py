"""Copy bundled assets into a target project."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .fs_atomic import atomic_copy_file
from .logging_config import setup_logger
from .prompts import should_overwrite

logger = setup_logger("opencode_context.installer")

console = Console(highlight=False, soft_wrap=True)


class AssetNotFoundError(FileNotFoundError):
    """A bundled asset is missing from the installed package."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"Source file not found: {self.path}")


def install_asset(source: Path, destination: Path, force: bool = False) -> bool:
    """Copy a bundled asset to `destination`.

    Args:
        source: Bundled file to copy
        destination: Where to put it; parent directories are created
        force: Overwrite an existing destination without asking

    Returns:
        True if the file was written, False if the user declined.

    Raises:
        AssetNotFoundError: `source` does not exist (broken package).
    """
    source = Path(source)
    destination = Path(destination)

    if not source.is_file():
        logger.error("Bundled asset missing: %s", source)
        raise AssetNotFoundError(source)

    if not should_overwrite(destination, force):
        console.print(f"[dim]  Skipped: {escape(str(destination))}[/dim]")
        return False

    atomic_copy_file(source, destination)
    logger.info("Installed %s -> %s", source, destination)
    console.print(f"[green]  Created: {escape(str(destination))}[/green]")
    return True
