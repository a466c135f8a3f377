"""opencode-context CLI entry point."""

from __future__ import annotations

from typing import Annotated, NoReturn, Optional

import click
import typer
from rich.console import Console
from rich.markup import escape
from typer.core import TyperCommand

from .commands.init import run_init
from .config import InitOptions, resolve_target_directory
from .logging_config import setup_logger

logger = setup_logger("opencode_context.cli")

err_console = Console(stderr=True, highlight=False, soft_wrap=True)

PROG_NAME = "opencode-context"

_EPILOG = (
    "Examples:\n\n"
    f"  {PROG_NAME} init\n\n"
    f"  {PROG_NAME} init --force\n\n"
    f"  {PROG_NAME} init --global"
)

app = typer.Typer(name=PROG_NAME, add_completion=False)


def _fail(message: str, *, hint: bool = False) -> NoReturn:
    err_console.print(f"[red]{escape(message)}[/red]")
    if hint:
        err_console.print(f"Run [cyan]{PROG_NAME} --help[/cyan] for usage.")
    raise typer.Exit(1)


class _InitCommand(TyperCommand):
    """Report bad flags or stray arguments with exit code 1 instead of click's 2."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            _fail(e.format_message(), hint=True)


@app.command(
    cls=_InitCommand,
    epilog=_EPILOG,
    context_settings={"help_option_names": ["-h", "--help"]},
)
def cli(
    ctx: typer.Context,
    command: Annotated[
        Optional[str],
        typer.Argument(
            metavar="COMMAND",
            help="init: install the context-update skill and command",
            show_default=False,
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing files without asking"),
    ] = False,
    global_install: Annotated[
        bool,
        typer.Option(
            "--global",
            "-g",
            help="Install to ~/.config/opencode/ instead of current directory",
        ),
    ] = False,
) -> None:
    """OpenCode Context Manager.

    Installs the context-update skill and command into a project and registers
    the generated context file in opencode.json.
    """
    if command is None:
        if not (force or global_install):
            typer.echo(ctx.get_help())
            raise typer.Exit(0)
        _fail("No command given", hint=True)

    if command != "init":
        _fail(f"Unknown command: {command}", hint=True)

    options = InitOptions(force=force, is_global=global_install)
    try:
        target_dir = resolve_target_directory(options.is_global)
        run_init(target_dir, options)
    except Exception as e:
        logger.exception("init failed")
        _fail(f"Error: {e}")


def main() -> None:
    app(prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
