"""File helpers: data directory, removal, open commands, types and sizes."""

from __future__ import annotations

import logging
import mimetypes
import os
import re
from pathlib import Path

log = logging.getLogger(__name__)

DATA_FOLDER_NAME = "filescout"

_KEYWORD_RE = re.compile(r"\{\w+\}")

_SI_UNITS = ("kB", "MB", "GB", "TB", "PB", "EB")
_IEC_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def data_dir_path() -> str:
    """Return the directory where the application keeps its data."""
    base = os.environ.get("XDG_DATA_HOME")
    if not base or not os.path.isabs(base):
        base = os.path.join(os.path.expanduser("~"), ".local", "share")
    return f"{base}/{DATA_FOLDER_NAME}"


def create_dir(path: str | os.PathLike) -> None:
    """Create a directory and its parents, accessible to the owner only."""
    os.makedirs(path, mode=0o700, exist_ok=True)


def remove_file(path: str | os.PathLike) -> None:
    """Delete a file or an empty directory; raise OSError on failure."""
    target = Path(path)
    try:
        if target.is_dir() and not target.is_symlink():
            target.rmdir()
        else:
            target.unlink()
    except OSError:
        log.warning("[file_remove] failed removing: %s", path)
        raise
    log.debug("[file_remove] deleted file: %s", path)


def get_extension(name: str | None) -> str | None:
    """Return the text after the last dot of a name, or None if it has none.

    A name whose only dot is its first character (a hidden file) has no
    extension.
    """
    if not name:
        return None
    dot = name.rfind(".")
    if dot <= 0:
        return None
    return name[dot + 1:]


def _shell_quote(text: str) -> str:
    return "'" + text.replace("'", "'\\''") + "'"


def build_open_command(path: str, path_full: str, cmd: str) -> str:
    """Expand the placeholders of a custom open command.

    Known placeholders are {path_raw}, {path_full_raw} and their shell quoted
    forms {path} and {path_full}. Unknown placeholders are removed.
    """
    keywords = {
        "{path_raw}": path,
        "{path_full_raw}": path_full,
        "{path}": _shell_quote(path),
        "{path_full}": _shell_quote(path_full),
    }
    return _KEYWORD_RE.sub(lambda m: keywords.get(m.group(0), ""), cmd)


def get_file_type(name: str | None, is_dir: bool) -> str:
    """Return a description of the type of a file, guessed from its name."""
    if is_dir:
        return "Folder"
    if name:
        mime, _ = mimetypes.guess_type(name, strict=False)
        if mime:
            return mime
    return "Unknown Type"


def get_size_formatted(size: int, show_base_2_units: bool) -> str:
    """Format a byte count in SI units, or in IEC units if asked for."""
    if size < 0:
        raise ValueError("size must not be negative")
    base, units = (1024, _IEC_UNITS) if show_base_2_units else (1000, _SI_UNITS)
    if size < base:
        return "1 byte" if size == 1 else f"{size} bytes"
    factor = base
    for unit in units:
        if size < factor * base or unit == units[-1]:
            return f"{size / factor:.1f} {unit}"
        factor *= base
    raise AssertionError("unreachable")