"""Files and folders stored in the database, and the orders they sort in."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Optional

from filescout.database_index import IndexType
from filescout.file_utils import get_extension, get_file_type

SEPARATOR = "/"

# Character classes and state machine of the GNU version comparison.
_S_N, _S_I, _S_F, _S_Z = 0, 3, 6, 9
_CMP, _LEN = 2, 3

_NEXT_STATE = (
    _S_N, _S_I, _S_Z,
    _S_N, _S_I, _S_I,
    _S_N, _S_F, _S_F,
    _S_N, _S_F, _S_Z,
)

_RESULT_TYPE = (
    _CMP, _CMP, _CMP, _CMP, _LEN, _CMP, _CMP, _CMP, _CMP,
    _CMP, -1, -1, +1, _LEN, _LEN, +1, _LEN, _LEN,
    _CMP, _CMP, _CMP, _CMP, _CMP, _CMP, _CMP, _CMP, _CMP,
    _CMP, +1, +1, -1, _CMP, _CMP, -1, _CMP, _CMP,
)


class EntryType(enum.IntEnum):
    """The kind of a database entry."""

    NONE = 0
    FOLDER = 1
    FILE = 2


@dataclass(eq=False)
class Entry:
    """A file in the database; folders are FolderEntry."""

    name: str = ""
    parent: Optional["FolderEntry"] = field(default=None, repr=False)
    size: int = 0
    mtime: int = 0
    idx: int = 0
    type: EntryType = EntryType.FILE

    def __post_init__(self) -> None:
        if self.name is None:
            self.name = ""

    def path(self) -> str:
        """Return the path of the folder holding this entry."""
        parts: list[str] = []
        folder = self.parent
        while folder is not None:
            if folder.parent is not None:
                parts.append(SEPARATOR + folder.name if folder.name else SEPARATOR)
            elif folder.name:
                parts.append(folder.name)
            folder = folder.parent
        return "".join(reversed(parts))

    def path_full(self) -> str:
        """Return the full path of this entry, its name included."""
        path = self.path()
        if self.name[:1] != SEPARATOR:
            path += SEPARATOR
        return path + self.name

    def extension(self) -> str | None:
        """Return the extension of a file's name; folders have none."""
        if self.type == EntryType.FOLDER:
            return None
        return get_extension(self.name)

    def display_name(self) -> str:
        """Return the name to show; the unnamed root shows as the separator."""
        return self.name if self.name else SEPARATOR

    def depth(self) -> int:
        """Return the number of folders above this entry."""
        depth = 0
        folder = self.parent
        while folder is not None:
            depth += 1
            folder = folder.parent
        return depth

    def update_parent_size(self) -> None:
        """Add this entry's size to every folder above it."""
        folder = self.parent
        while folder is not None:
            folder.size += self.size
            folder = folder.parent


@dataclass(eq=False)
class FolderEntry(Entry):
    """A folder in the database."""

    type: EntryType = EntryType.FOLDER
    db_idx: int = 0


def _char_class(c: int) -> int:
    if c == 0x30:
        return 2
    return 1 if 0x30 <= c <= 0x39 else 0


def _isdigit(c: int) -> bool:
    return 0x30 <= c <= 0x39


def strverscmp(a: str, b: str) -> int:
    """Compare two strings, ordering runs of digits as version numbers.

    The sign of the result tells the order, as with the GNU function.
    """
    if a is b:
        return 0
    s1 = a.encode("utf-8") + b"\0"
    s2 = b.encode("utf-8") + b"\0"
    i = 0
    c1, c2 = s1[0], s2[0]
    state = _S_N + _char_class(c1)
    while (diff := c1 - c2) == 0:
        if c1 == 0:
            return 0
        state = _NEXT_STATE[state]
        i += 1
        c1, c2 = s1[i], s2[i]
        state += _char_class(c1)

    result = _RESULT_TYPE[state * 3 + _char_class(c2)]
    if result == _CMP:
        return diff
    if result == _LEN:
        p1 = p2 = i + 1
        while _isdigit(s1[p1]):
            p1 += 1
            if not _isdigit(s2[p2]):
                return 1
            p2 += 1
        return -1 if _isdigit(s2[p2]) else diff
    return result


def _strcmp(a: str, b: str) -> int:
    return (a > b) - (a < b)


def compare_by_name(a: Entry | None, b: Entry | None) -> int:
    """Order entries by name, with version-aware number handling."""
    if a is None or b is None:
        return 0
    return strverscmp(a.name or "", b.name or "")


def compare_by_size(a: Entry | None, b: Entry | None) -> int:
    """Order entries by size; equal sizes never compare equal."""
    size_a = a.size if a is not None else 0
    size_b = b.size if b is not None else 0
    return 1 if size_a > size_b else -1


def compare_by_modification_time(a: Entry, b: Entry) -> int:
    """Order entries by modification time; equal times never compare equal."""
    return 1 if a.mtime > b.mtime else -1


def compare_by_position(a: Entry, b: Entry) -> int:
    """Keep entries where they are."""
    return 0


def compare_by_type(a: Entry, b: Entry) -> int:
    """Order entries by the description of their file type."""
    if a.type == EntryType.FOLDER and b.type == EntryType.FOLDER:
        return 0
    type_a = get_file_type(a.display_name(), False)
    type_b = get_file_type(b.display_name(), False)
    return _strcmp(type_a, type_b)


def compare_by_extension(a: Entry, b: Entry) -> int:
    """Order entries by extension, then by name."""
    res = _strcmp(a.extension() or "", b.extension() or "")
    if res == 0:
        return compare_by_name(a, b)
    return res


def _nth_parent(folder: FolderEntry | None, nth: int) -> FolderEntry | None:
    while folder is not None and nth > 0:
        folder = folder.parent
        nth -= 1
    return folder


def _compare_folder_paths(a: FolderEntry | None, b: FolderEntry | None) -> int:
    if a is None or b is None:
        return 0
    if a.parent is not None and a.parent is not b.parent:
        res = _compare_folder_paths(a.parent, b.parent)
        if res != 0:
            return res
    return strverscmp(a.name, b.name)


def compare_by_path(a: Entry, b: Entry) -> int:
    """Order entries by the path of their folder, then by name.

    An entry nested deeper than another below the same folder comes after it.
    """
    depth_a = a.depth()
    depth_b = b.depth()
    if depth_a == depth_b:
        res = _compare_folder_paths(a.parent, b.parent)
        return res if res != 0 else compare_by_name(a, b)
    if depth_a > depth_b:
        parent_a = _nth_parent(a.parent, depth_a - depth_b)
        res = _compare_folder_paths(parent_a, b.parent)
        return res if res != 0 else 1
    parent_b = _nth_parent(b.parent, depth_b - depth_a)
    res = _compare_folder_paths(a.parent, parent_b)
    return res if res != 0 else -1


_COMPARE_FUNCTIONS: dict[IndexType, Callable[[Entry, Entry], int]] = {
    IndexType.NAME: compare_by_name,
    IndexType.PATH: compare_by_path,
    IndexType.SIZE: compare_by_size,
    IndexType.EXTENSION: compare_by_extension,
    IndexType.FILETYPE: compare_by_type,
    IndexType.MODIFICATION_TIME: compare_by_modification_time,
}


def compare_function(index_type: IndexType) -> Callable[[Entry, Entry], int]:
    """Return the comparison that sorts entries for an index type."""
    return _COMPARE_FUNCTIONS.get(index_type, compare_by_position)