"""Register the context file in a project's opencode.json."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape

from .config import CONFIG_FILENAME, CONTEXT_INSTRUCTION_PATH, OPENCODE_SCHEMA_URL
from .fs_atomic import atomic_write_text
from .logging_config import setup_logger
from .prompts import ask_yes_no

logger = setup_logger("opencode_context.config_merge")

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


class ConfigParseError(ValueError):
    """opencode.json exists but does not hold a JSON object."""


def load_config_document(config_path: Path) -> Optional[dict[str, Any]]:
    """
    Read opencode.json as a plain dict, keeping unknown keys and their order.

    Returns:
        The parsed object, or None if the file does not exist.

    Raises:
        ConfigParseError: The file is not valid JSON or not a JSON object.
    """
    try:
        raw = config_path.read_bytes()
    except FileNotFoundError:
        return None

    try:
        document = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigParseError(str(e)) from e

    if not isinstance(document, dict):
        raise ConfigParseError(
            f"expected a JSON object at top level, got {type(document).__name__}"
        )
    return document


def add_context_instruction(document: dict[str, Any]) -> bool:
    """
    Add the context instruction (and a default $schema) to `document` in place.

    Returns:
        False if the instruction was already present (document unchanged).
    """
    instructions = document.get("instructions")
    if not isinstance(instructions, list):
        instructions = []
        document["instructions"] = instructions

    if CONTEXT_INSTRUCTION_PATH in instructions:
        return False

    instructions.append(CONTEXT_INSTRUCTION_PATH)

    # Never replace a schema the user picked.
    if "$schema" not in document:
        document["$schema"] = OPENCODE_SCHEMA_URL
    return True


def render_config_document(document: dict[str, Any]) -> str:
    return json.dumps(document, ensure_ascii=False, indent=2) + "\n"


def merge_config(target_dir: Path, force: bool = False) -> bool:
    """Merge the context instruction into <target_dir>/opencode.json.

    Args:
        target_dir: Project root holding opencode.json
        force: Replace an unparsable config without asking

    Returns:
        True if opencode.json was written.
    """
    config_path = Path(target_dir) / CONFIG_FILENAME
    existed = config_path.exists()

    try:
        document = load_config_document(config_path)
    except ConfigParseError as e:
        logger.warning("Unparsable config %s: %s", config_path, e)
        err_console.print(
            f"[red]Error parsing {escape(str(config_path))}: {escape(str(e))}[/red]"
        )
        if not force and not ask_yes_no(f"Create a new {CONFIG_FILENAME}?"):
            console.print(f"[dim]  Skipped: {CONFIG_FILENAME} update[/dim]")
            return False
        document = {}

    if document is None:
        document = {}

    if not add_context_instruction(document):
        console.print(
            f"[dim]  Already configured: {CONTEXT_INSTRUCTION_PATH} in instructions[/dim]"
        )
        return False

    atomic_write_text(config_path, render_config_document(document))
    logger.info("Wrote %s", config_path)

    if existed:
        console.print(
            f"[green]  Updated: {CONFIG_FILENAME} (added context to instructions)[/green]"
        )
    else:
        console.print(f"[green]  Created: {CONFIG_FILENAME}[/green]")
    return True
