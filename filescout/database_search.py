"""Searching the database's folders and files with a matcher."""

from __future__ import annotations

import logging
import os
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from filescout.database_entry import Entry
from filescout.database_index import IndexType

log = logging.getLogger(__name__)

THRESHOLD_FOR_PARALLEL_SEARCH = 1000

Matcher = Callable[[Entry], bool]


class SearchCancelled(Exception):
    """Raised when a search is cancelled before it finishes."""


@dataclass(frozen=True)
class SearchResult:
    """The folders and files a search found, in the order they sort in."""

    folders: list[Entry] = field(default_factory=list)
    files: list[Entry] = field(default_factory=list)
    sort_type: IndexType = IndexType.NAME


def _is_cancelled(cancel_event: Optional[threading.Event]) -> bool:
    return cancel_event is not None and cancel_event.is_set()


def _default_num_threads() -> int:
    return os.cpu_count() or 1


def _chunks(num_entries: int, num_threads: int) -> list[tuple[int, int]]:
    """Split a range into num_threads slices; the last one takes the rest."""
    per_thread = num_entries // num_threads
    bounds = []
    start = 0
    for i in range(num_threads):
        end = num_entries if i == num_threads - 1 else start + per_thread
        bounds.append((start, end))
        start = end
    return bounds


def _search_slice(
    matcher: Matcher,
    entries: Sequence[Entry],
    cancel_event: Optional[threading.Event],
    start: int,
    end: int,
) -> list[Entry]:
    found = []
    for entry in entries[start:end]:
        if _is_cancelled(cancel_event):
            break
        if matcher(entry):
            found.append(entry)
    return found


def search_entries(
    matcher: Matcher,
    entries: Sequence[Entry],
    cancel_event: Optional[threading.Event] = None,
    num_threads: Optional[int] = None,
) -> list[Entry]:
    """Return the entries the matcher accepts, keeping their order.

    Large sequences are split between several worker threads. Raise
    SearchCancelled if the cancel event is set while searching.
    """
    if num_threads is None:
        num_threads = _default_num_threads()
    if num_threads < 1:
        raise ValueError("num_threads must be at least 1")

    num_entries = len(entries)
    if num_entries == 0:
        if _is_cancelled(cancel_event):
            raise SearchCancelled()
        return []

    if num_entries < THRESHOLD_FOR_PARALLEL_SEARCH:
        num_threads = 1
    num_threads = min(num_threads, num_entries)

    bounds = _chunks(num_entries, num_threads)
    if num_threads == 1:
        parts = [_search_slice(matcher, entries, cancel_event, *bounds[0])]
    else:
        with ThreadPoolExecutor(max_workers=num_threads) as pool:
            futures = [
                pool.submit(_search_slice, matcher, entries, cancel_event, start, end)
                for start, end in bounds
            ]
            parts = [future.result() for future in futures]

    if _is_cancelled(cancel_event):
        raise SearchCancelled()

    return [entry for part in parts for entry in part]


def run_search(
    matcher: Optional[Matcher],
    folders: Sequence[Entry],
    files: Sequence[Entry],
    sort_type: IndexType = IndexType.NAME,
    cancel_event: Optional[threading.Event] = None,
    num_threads: Optional[int] = None,
) -> SearchResult:
    """Search sorted folders and files and collect the result.

    A matcher of None matches everything, so the entries are taken as they
    are. Raise SearchCancelled if the search is cancelled.
    """
    started = time.perf_counter()
    try:
        if matcher is None:
            result = SearchResult(list(folders), list(files), sort_type)
        else:
            found_folders = search_entries(matcher, folders, cancel_event, num_threads)
            if _is_cancelled(cancel_event):
                raise SearchCancelled()
            found_files = search_entries(matcher, files, cancel_event, num_threads)
            result = SearchResult(found_folders, found_files, sort_type)
    except SearchCancelled:
        elapsed = (time.perf_counter() - started) * 1000
        log.debug("[search] aborted after %.2f ms", elapsed)
        raise
    elapsed = (time.perf_counter() - started) * 1000
    log.debug("[search] finished in %.2f ms", elapsed)
    return result