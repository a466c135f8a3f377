"""Interactive yes/no confirmation used before anything is overwritten."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .logging_config import setup_logger

logger = setup_logger("opencode_context.prompts")

console = Console(highlight=False, soft_wrap=True)

_AFFIRMATIVE = ("y", "yes")


def ask_yes_no(question: str) -> bool:
    """Ask a (y/N) question; anything but y/yes, including EOF, means no."""
    try:
        answer = console.input(f"[yellow]?[/yellow] {question} (y/N) ")
    except (EOFError, KeyboardInterrupt):
        console.print()
        logger.debug("Prompt closed without an answer: %s", question)
        return False
    return answer.strip().lower() in _AFFIRMATIVE


def should_overwrite(path: Path, force: bool) -> bool:
    """
    Decide whether `path` may be written.

    Missing files are always writable, and `force` skips the question.
    """
    path = Path(path)
    # A dangling symlink still belongs to the user.
    if not (path.exists() or path.is_symlink()):
        return True
    if force:
        logger.debug("Overwriting %s (forced)", path)
        return True
    allowed = ask_yes_no(f"{escape(str(path))} already exists. Overwrite?")
    logger.debug("Overwrite %s: %s", path, "accepted" if allowed else "declined")
    return allowed
