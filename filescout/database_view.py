"""A view into a database: searching, filtering, sorting and selection."""

from __future__ import annotations

import enum
import functools
import itertools
import logging
import re
import threading
import time
from typing import Callable, Iterable, Optional

from filescout.database_entry import (
    Entry,
    EntryType,
    compare_by_name,
    compare_function,
)
from filescout.database_index import IndexType
from filescout.database_search import Matcher, run_search
from filescout.filter import Filter, FilterFileType, QueryFlags

log = logging.getLogger(__name__)

MatcherFactory = Callable[[str, QueryFlags, Optional[Filter]], Optional[Matcher]]


class ViewNotify(enum.Enum):
    """Events a view reports to its notify callback."""

    CONTENT_CHANGED = 0
    SELECTION_CHANGED = 1
    SEARCH_STARTED = 2
    SEARCH_FINISHED = 3
    SORT_STARTED = 4
    SORT_FINISHED = 5


def _text_predicate(text: str, flags: QueryFlags) -> Optional[Matcher]:
    """Build a predicate on entries for a query text, or None if it is empty."""
    if not text or not text.strip():
        return None
    match_case = bool(flags & QueryFlags.MATCH_CASE) or (
        bool(flags & QueryFlags.AUTO_MATCH_CASE) and any(c.isupper() for c in text)
    )
    in_path = bool(flags & QueryFlags.SEARCH_IN_PATH) or (
        bool(flags & QueryFlags.AUTO_SEARCH_IN_PATH) and "/" in text
    )

    def target(entry: Entry) -> str:
        return entry.path_full() if in_path else entry.name

    if flags & QueryFlags.REGEX:
        pattern = re.compile(text, 0 if match_case else re.IGNORECASE)
        return lambda entry: pattern.search(target(entry)) is not None

    terms = text.split()
    if not match_case:
        terms = [term.casefold() for term in terms]
        return lambda entry: all(term in target(entry).casefold() for term in terms)
    return lambda entry: all(term in target(entry) for term in terms)


def _default_matcher(
    query_text: str, flags: QueryFlags, filter: Optional[Filter]
) -> Optional[Matcher]:
    """Match every whitespace separated term of the query, and the filter.

    Return None when nothing restricts the search, meaning every entry matches.
    """
    predicates: list[Matcher] = []
    text_predicate = _text_predicate(query_text, flags)
    if text_predicate is not None:
        predicates.append(text_predicate)
    if filter is not None:
        if filter.file_type == FilterFileType.FOLDERS:
            predicates.append(lambda entry: entry.type == EntryType.FOLDER)
        elif filter.file_type == FilterFileType.FILES:
            predicates.append(lambda entry: entry.type == EntryType.FILE)
        filter_predicate = _text_predicate(filter.query or "", filter.flags)
        if filter_predicate is not None:
            predicates.append(filter_predicate)
    if not predicates:
        return None
    return lambda entry: all(predicate(entry) for predicate in predicates)


def _sorted(entries: Iterable[Entry], order: IndexType) -> list[Entry]:
    return sorted(entries, key=functools.cmp_to_key(compare_function(order)))


class DatabaseView:
    """A filtered, searched and sorted view of a database's entries.

    Folders come before files: index positions below num_folders() address
    folders, the ones after them address files.
    """

    _ids = itertools.count()

    def __init__(
        self,
        query_text: Optional[str] = "",
        flags: QueryFlags = QueryFlags(0),
        filter: Optional[Filter] = None,
        sort_order: IndexType = IndexType.NAME,
        notify: Optional[Callable[["DatabaseView", ViewNotify], None]] = None,
        matcher_factory: Optional[MatcherFactory] = None,
    ) -> None:
        self._id = next(DatabaseView._ids)
        self._query_text = query_text or ""
        self._flags = QueryFlags(flags)
        self._filter = filter
        self._sort_order = IndexType(sort_order)
        self._notify_func = notify
        self._matcher_factory = matcher_factory or _default_matcher
        self._lock = threading.RLock()
        self._registered = False
        self._sources: dict[IndexType, tuple[list[Entry], list[Entry]]] = {}
        self._folders: list[Entry] = []
        self._files: list[Entry] = []
        self._selection: dict[Entry, None] = {}
        self._matches_everything = True
        self._query_count = 0

    # Properties

    @property
    def lock(self) -> threading.RLock:
        """The lock guarding the view's contents."""
        return self._lock

    @property
    def query_text(self) -> str:
        return self._query_text

    @property
    def query_flags(self) -> QueryFlags:
        return self._flags

    @property
    def filter(self) -> Optional[Filter]:
        return self._filter

    @property
    def sort_order(self) -> IndexType:
        return self._sort_order

    # Registration

    def register(self, folders: Iterable[Entry], files: Iterable[Entry]) -> None:
        """Attach the view to a database's folders and files, then search and sort."""
        with self._lock:
            self._sources = {
                IndexType.NAME: (
                    sorted(folders, key=functools.cmp_to_key(compare_by_name)),
                    sorted(files, key=functools.cmp_to_key(compare_by_name)),
                )
            }
            self._registered = True
            sort_order = self._sort_order
            self._search()
            self._sort(sort_order)

    def unregister(self) -> None:
        """Detach the view from its database, dropping contents and selection."""
        with self._lock:
            self._selection.clear()
            self._folders = []
            self._files = []
            self._sources = {}
            self._registered = False

    # Settings

    def set_filter(self, filter: Optional[Filter]) -> None:
        with self._lock:
            self._filter = filter
            self._search()

    def set_query_flags(self, flags: QueryFlags) -> None:
        with self._lock:
            self._flags = QueryFlags(flags)
            self._search()

    def set_query_text(self, query_text: Optional[str]) -> None:
        with self._lock:
            self._query_text = query_text or ""
            self._search()

    def set_sort_order(self, sort_order: IndexType) -> None:
        with self._lock:
            sort_order = IndexType(sort_order)
            if sort_order != self._sort_order:
                self._sort(sort_order)

    # Internals

    def _notify(self, event: ViewNotify) -> None:
        if self._notify_func is not None:
            self._notify_func(self, event)

    def _sorted_source(self, order: IndexType) -> tuple[list[Entry], list[Entry]]:
        if order not in self._sources:
            folders, files = self._sources[IndexType.NAME]
            self._sources[order] = (_sorted(folders, order), _sorted(files, order))
        folders, files = self._sources[order]
        return list(folders), list(files)

    def _search(self) -> None:
        if not self._registered:
            return
        self._notify(ViewNotify.SEARCH_STARTED)
        query_id = f"query:{self._id:02d}.{self._query_count:04d}"
        self._query_count += 1

        matcher = self._matcher_factory(self._query_text, self._flags, self._filter)
        folders, files = self._sorted_source(self._sort_order)
        started = time.perf_counter()
        result = run_search(matcher, folders, files, self._sort_order)
        log.debug("[%s] finished in %.2f ms", query_id, (time.perf_counter() - started) * 1000)

        self._selection.clear()
        self._folders = list(result.folders)
        self._files = list(result.files)
        self._sort_order = result.sort_type
        self._matches_everything = matcher is None

        self._notify(ViewNotify.SEARCH_FINISHED)
        self._notify(ViewNotify.CONTENT_CHANGED)
        self._notify(ViewNotify.SELECTION_CHANGED)

    def _sort(self, order: IndexType) -> None:
        if not self._registered:
            return
        self._notify(ViewNotify.SORT_STARTED)
        started = time.perf_counter()
        log.debug("[sort] started: %d", order)
        if self._matches_everything:
            folders, files = self._sorted_source(order)
        else:
            folders = _sorted(self._folders, order)
            files = _sorted(self._files, order)
        self._folders = folders
        self._files = files
        self._sort_order = order
        log.debug("[sort] finished in %.2f ms", (time.perf_counter() - started) * 1000)
        self._notify(ViewNotify.SORT_FINISHED)

    # Contents

    def num_folders(self) -> int:
        return len(self._folders)

    def num_files(self) -> int:
        return len(self._files)

    def num_entries(self) -> int:
        return self.num_folders() + self.num_files()

    def entry_at(self, idx: int) -> Optional[Entry]:
        """Return the entry at a position, or None if there is none."""
        if idx < 0:
            return None
        if idx < len(self._folders):
            return self._folders[idx]
        idx -= len(self._folders)
        if idx < len(self._files):
            return self._files[idx]
        return None

    def path_for(self, idx: int) -> Optional[str]:
        entry = self.entry_at(idx)
        return entry.path() if entry is not None else None

    def path_full_for(self, idx: int) -> Optional[str]:
        entry = self.entry_at(idx)
        return entry.path_full() if entry is not None else None

    def mtime_for(self, idx: int) -> int:
        entry = self.entry_at(idx)
        return entry.mtime if entry is not None else 0

    def size_for(self, idx: int) -> int:
        entry = self.entry_at(idx)
        return entry.size if entry is not None else 0

    def extension_for(self, idx: int) -> Optional[str]:
        """Return the extension, "" if it has none, or None if there is no entry."""
        entry = self.entry_at(idx)
        if entry is None:
            return None
        return entry.extension() or ""

    def name_for(self, idx: int) -> Optional[str]:
        entry = self.entry_at(idx)
        return entry.display_name() if entry is not None else None

    def name_raw_for(self, idx: int) -> Optional[str]:
        entry = self.entry_at(idx)
        return entry.name if entry is not None else None

    def parent_idx_for(self, idx: int) -> int:
        """Return the index of the entry's parent folder, or -1."""
        entry = self.entry_at(idx)
        if entry is None or entry.parent is None:
            return -1
        return entry.parent.idx

    def type_for(self, idx: int) -> EntryType:
        entry = self.entry_at(idx)
        return entry.type if entry is not None else EntryType.NONE

    # Selection

    def select_toggle(self, idx: int) -> None:
        with self._lock:
            entry = self.entry_at(idx)
            if entry is not None:
                if entry in self._selection:
                    del self._selection[entry]
                else:
                    self._selection[entry] = None
        self._notify(ViewNotify.SELECTION_CHANGED)

    def select(self, idx: int) -> None:
        with self._lock:
            entry = self.entry_at(idx)
            if entry is not None:
                self._selection[entry] = None
        self._notify(ViewNotify.SELECTION_CHANGED)

    def is_selected(self, idx: int) -> bool:
        with self._lock:
            entry = self.entry_at(idx)
            return entry is not None and entry in self._selection

    def select_range(self, start_idx: int, end_idx: int) -> None:
        """Select every entry from start_idx to end_idx, both included."""
        with self._lock:
            for i in range(start_idx, end_idx + 1):
                entry = self.entry_at(i)
                if entry is not None:
                    self._selection[entry] = None
        self._notify(ViewNotify.SELECTION_CHANGED)

    def select_all(self) -> None:
        with self._lock:
            for entry in itertools.chain(self._folders, self._files):
                self._selection[entry] = None
        self._notify(ViewNotify.SELECTION_CHANGED)

    def unselect_all(self) -> None:
        with self._lock:
            self._selection.clear()
        self._notify(ViewNotify.SELECTION_CHANGED)

    def invert_selection(self) -> None:
        with self._lock:
            for entry in itertools.chain(self._folders, self._files):
                if entry in self._selection:
                    del self._selection[entry]
                else:
                    self._selection[entry] = None
        self._notify(ViewNotify.SELECTION_CHANGED)

    def num_selected(self) -> int:
        with self._lock:
            return len(self._selection)

    def selected_entries(self) -> list[Entry]:
        """Return the selected entries in the order they were selected."""
        with self._lock:
            return list(self._selection)