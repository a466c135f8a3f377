"""Static configuration for the OpenCode context installer.

Everything here is fixed at import time: asset locations, the instruction entry
registered in opencode.json, and how the install target is resolved.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

# Bundled assets live next to this module (package data).
ASSETS_DIR = Path(__file__).parent / "assets"

CONFIG_FILENAME = "opencode.json"
CONTEXT_INSTRUCTION_PATH = ".opencode/context/repo-structure.md"
OPENCODE_SCHEMA_URL = "https://opencode.ai/config.json"

# Overrides ~/.config/opencode for --global installs.
GLOBAL_DIR_ENV = "OPENCODE_CONFIG_DIR"


class HomeDirectoryNotFoundError(RuntimeError):
    """Raised when a global install cannot locate the user's home directory."""


@dataclass(frozen=True)
class Asset:
    """A bundled file and where it goes inside the target directory."""

    name: str
    source: str
    destination: tuple[str, ...]

    @property
    def source_path(self) -> Path:
        return ASSETS_DIR / self.source

    def destination_path(self, target_dir: Path) -> Path:
        return Path(target_dir).joinpath(*self.destination)


# Installed in this order.
ASSETS: tuple[Asset, ...] = (
    Asset(
        name="skill",
        source="skill/context-update/SKILL.md",
        destination=(".opencode", "skill", "context-update", "SKILL.md"),
    ),
    Asset(
        name="command",
        source="command/context-update.md",
        destination=(".opencode", "command", "context-update.md"),
    ),
)


@dataclass(frozen=True)
class InitOptions:
    force: bool = False
    is_global: bool = False


def get_home_directory(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Resolve the home directory from HOME (or USERPROFILE on Windows)."""
    env = os.environ if environ is None else environ
    home = (env.get("HOME") or env.get("USERPROFILE") or "").strip()
    if not home:
        raise HomeDirectoryNotFoundError(
            "Cannot determine home directory for --global install "
            f"(set HOME, USERPROFILE or {GLOBAL_DIR_ENV})"
        )
    return Path(home)


def get_global_directory(environ: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if environ is None else environ
    override = (env.get(GLOBAL_DIR_ENV) or "").strip()
    if override:
        return Path(override).expanduser()
    return get_home_directory(env) / ".config" / "opencode"


def resolve_target_directory(
    is_global: bool,
    *,
    cwd: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """
    Pick the install root for this run.

    Args:
        is_global: Install into the per-user OpenCode config directory
        cwd: Working directory for local installs (defaults to Path.cwd())
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Path: Target directory under which .opencode/ and opencode.json live
    """
    if is_global:
        return get_global_directory(environ)
    return Path(cwd) if cwd is not None else Path.cwd()
