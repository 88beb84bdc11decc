"""Whole-file text reading and crash-safe writing."""

import os
import time
from pathlib import Path

__all__ = ["read_text_file", "write_text_file", "ensure_dir"]

_TEMP_ATTEMPTS = 100


def read_text_file(path) -> str:
    """Return the whole contents of ``path`` as UTF-8 text, line endings untouched.

    Raises :class:`OSError` when the file cannot be read.
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise OSError(f"Failed to open file for reading: {path}") from exc


def ensure_dir(path) -> None:
    """Create ``path`` and any missing parents; an empty path or an existing directory is fine."""
    if not str(path):
        return
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as exc:
        raise OSError(f"Failed to create directory: {path} ({exc.strerror or exc})") from exc


def _temp_sibling(target: Path) -> Path:
    stamp = time.monotonic_ns()
    base = f"{target.name}.tmp.{stamp}"
    for attempt in range(_TEMP_ATTEMPTS):
        name = base if attempt == 0 else f"{base}.{attempt}"
        candidate = target.with_name(name)
        if not candidate.exists():
            return candidate
    return target.with_name(base)


def write_text_file(path, contents: str) -> None:
    """Write ``contents`` to ``path`` as UTF-8, creating parent directories.

    The text goes to a temporary sibling file first and is then renamed into
    place, so a crash never leaves a truncated file behind.
    """
    target = Path(path)
    if str(target.parent) not in ("", "."):
        ensure_dir(target.parent)

    tmp = _temp_sibling(target)
    try:
        try:
            with open(tmp, "w", encoding="utf-8", newline="") as handle:
                handle.write(contents)
                handle.flush()
        except OSError as exc:
            raise OSError(f"Failed to write file: {tmp}") from exc
        try:
            os.replace(tmp, target)
        except OSError:
            try:
                os.remove(target)
            except OSError:
                pass
            try:
                os.replace(tmp, target)
            except OSError as exc:
                raise OSError(f"Failed to replace file: {path} ({exc.strerror or exc})") from exc
    except BaseException:
        try:
            os.remove(tmp)
        except OSError:
            pass
        raise