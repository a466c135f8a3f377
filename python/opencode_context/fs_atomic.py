"""Write-to-temp-then-replace helpers so targets never hold a partial file."""

from __future__ import annotations

import os
import shutil
import stat
import tempfile
from pathlib import Path
from typing import Callable, IO


def _default_file_mode() -> int:
    # os.umask can only be read by setting it.
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _resolve_link(target: Path) -> Path:
    """Follow a symlinked target so the link itself survives the replace."""
    if target.is_symlink():
        return target.resolve()
    return target


def _replace_from_temp(target: Path, write: Callable[[IO[bytes]], object], mode: int) -> None:
    target = _resolve_link(target)
    target.parent.mkdir(parents=True, exist_ok=True)
    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=str(target.parent),
            prefix=target.name + ".",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            temp_path = Path(tmp.name)
            write(tmp)
            tmp.flush()
            os.fsync(tmp.fileno())
        # NamedTemporaryFile is always 0600.
        os.chmod(temp_path, mode)
        os.replace(str(temp_path), str(target))
    finally:
        if temp_path is not None and temp_path.exists():
            temp_path.unlink(missing_ok=True)


def atomic_copy_file(source: Path, target: Path) -> None:
    """Copy source to target byte-for-byte (and its permission bits), replacing target in one step."""
    source = Path(source)
    mode = stat.S_IMODE(source.stat().st_mode)

    def _write(tmp: IO[bytes]) -> None:
        with open(source, "rb") as src:
            shutil.copyfileobj(src, tmp)

    _replace_from_temp(Path(target), _write, mode)


def atomic_write_text(path: Path, text: str) -> None:
    """Replace path with UTF-8 text, keeping an existing file's permission bits."""
    path = _resolve_link(Path(path))
    try:
        mode = stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        mode = _default_file_mode()
    payload = text.encode("utf-8")
    _replace_from_temp(path, lambda tmp: tmp.write(payload), mode)
