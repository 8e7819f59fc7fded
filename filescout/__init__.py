"""In-memory file database: entries, filters, threaded search and sortable, selectable views."""

__version__ = "0.1.0"
__all__ = [
    "database_entry",
    "database_index",
    "database_search",
    "database_view",
    "exclude_path",
    "file_utils",
    "filter",
    "index",
]