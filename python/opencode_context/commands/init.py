"""opencode-context init command - install the context-update skill and command."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import ASSETS, CONFIG_FILENAME, CONTEXT_INSTRUCTION_PATH, InitOptions
from ..config_merge import merge_config
from ..installer import install_asset
from ..logging_config import setup_logger

logger = setup_logger("opencode_context.commands.init")

console = Console(highlight=False, soft_wrap=True)


@dataclass
class InitResult:
    """Which steps wrote something during a run."""

    target_dir: Path
    steps: dict[str, bool] = field(default_factory=dict)

    @property
    def changed(self) -> bool:
        return any(self.steps.values())


def _print_banner() -> None:
    console.print()
    console.print("[cyan]OpenCode Context Manager[/cyan]")
    console.print("[dim]Installing skill and command files...[/dim]")
    console.print()


def _print_summary(result: InitResult) -> None:
    console.print()
    if result.changed:
        console.print("[green]Done![/green]")
        console.print()
        console.print("Next steps:")
        console.print(
            "  1. Run [cyan]/context-update[/cyan] in OpenCode to generate your context file"
        )
        console.print("  2. The context will be automatically included in every prompt")
        console.print()
        console.print(f"[dim]Output location: {CONTEXT_INSTRUCTION_PATH}[/dim]")
    else:
        console.print("[dim]Nothing to do - everything is already set up.[/dim]")
    console.print()


def run_init(target_dir: Path, options: Optional[InitOptions] = None) -> InitResult:
    """
    Install both assets and, for local installs, register the context file.

    Steps run one after another; a declined prompt only skips its own step.
    AssetNotFoundError is not caught here and aborts the whole run.

    Args:
        target_dir: Install root (project directory or global config dir)
        options: force / global flags

    Returns:
        InitResult with per-step outcomes
    """
    options = options or InitOptions()
    target_dir = Path(target_dir)
    result = InitResult(target_dir=target_dir)

    logger.info(
        "init target=%s force=%s global=%s", target_dir, options.force, options.is_global
    )
    _print_banner()

    for asset in ASSETS:
        result.steps[asset.name] = install_asset(
            asset.source_path,
            asset.destination_path(target_dir),
            options.force,
        )

    # Global installs have no project config to edit.
    if not options.is_global:
        result.steps[CONFIG_FILENAME] = merge_config(target_dir, options.force)

    _print_summary(result)
    return result
