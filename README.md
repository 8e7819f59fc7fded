# filescout

filescout holds the in-memory core of a file search tool. It models files and folders
as a tree, sorts them, searches them with a matcher across worker threads, and shows the
results through a view that can be filtered, re-sorted and selected.

## Modules

- `filescout.database_entry`
  - `Entry` is a file and `FolderEntry` is a folder. Each has `name`, `parent`, `size`,
    `mtime`, `idx` and `type` (an `EntryType`: `NONE`, `FOLDER` or `FILE`).
  - `path()` returns the path of the folder that holds the entry. `path_full()` returns
    that path with the entry's name added.
  - `extension()` returns the extension of a file. Folders have none.
  - `display_name()` shows the unnamed root folder as `/`.
  - `depth()` counts the folders above the entry.
  - `update_parent_size()` adds the entry's size to every folder above it.
  - Comparison functions: `compare_by_name`, `compare_by_path`, `compare_by_size`,
    `compare_by_type`, `compare_by_modification_time`, `compare_by_extension` and
    `compare_by_position`. `compare_function(index_type)` picks the one for an
    `IndexType`. Unknown types fall back to `compare_by_position`.
  - `strverscmp(a, b)` compares names in natural version order, so `file2` sorts before
    `file10`.
  - `compare_by_size` and `compare_by_modification_time` never return 0. Entries with
    equal values therefore have no fixed order between them.
- `filescout.database_index`
  - `IndexType` lists the sort keys. `label()` gives the column label for name, path,
    size, modification time, type and extension. It raises `ValueError` for the other
    types.
  - `IndexFlags` is a set of bit flags.
- `filescout.filter`
  - `Filter` holds a file type (`FilterFileType`: `NONE`, `FOLDERS`, `FILES`), a name, an
    optional query and `QueryFlags`.
  - `default_filters()` returns All, Folders, Files, Applications, Archives, Audio,
    Documents, Pictures and Videos. The filters from Applications onwards use
    case-sensitive regular expressions on the file extension.
- `filescout.database_search`
  - `search_entries(matcher, entries, cancel_event, num_threads)` returns the entries the
    matcher accepts, in their original order. Lists of 1000 entries or more are split
    across a thread pool.
  - `run_search(...)` searches folders and then files, and returns a `SearchResult`. A
    matcher of `None` matches everything.
  - If the `threading.Event` you pass is set, both functions raise `SearchCancelled`.
- `filescout.database_view`
  - `DatabaseView` holds a query text, `QueryFlags`, an optional `Filter` and a sort order
    over folders and files given to `register()`.
  - Changing the query, the flags or the filter searches again and clears the selection.
    `set_sort_order()` re-sorts the view.
  - Positions address folders first, then files. Use `num_folders()`, `num_files()`,
    `num_entries()`, `entry_at()`, and the `*_for(idx)` accessors for path, name, size,
    mtime, extension, type and parent index.
  - Selection methods: `select`, `select_toggle`, `select_range`, `select_all`,
    `unselect_all`, `invert_selection`, `is_selected`, `num_selected` and
    `selected_entries`.
  - The optional `notify` callback receives `ViewNotify` events.
  - Without a `matcher_factory`, the view builds its own matcher. Every
    whitespace-separated term must appear in the name, or in the full path with
    `SEARCH_IN_PATH`. Matching ignores case unless `MATCH_CASE` is set, or
    `AUTO_MATCH_CASE` is set and the query holds an upper-case letter. `REGEX` treats the
    query as one regular expression. A filter also restricts matches to folders or files
    and applies its own query.
- `filescout.index` and `filescout.exclude_path`
  - `Index` (with `IndexKind`) describes a location to index. `ExcludePath` describes a
    path to leave out. Both have `copy()`.
- `filescout.file_utils`
  - `data_dir_path()`, `create_dir()` and `remove_file()`.
  - `get_extension()`.
  - `get_file_type()` returns a MIME type guessed from the name, `"Folder"` or
    `"Unknown Type"`.
  - `get_size_formatted()` formats sizes in SI or IEC units.
  - `build_open_command(path, path_full, cmd)` expands `{path_raw}`, `{path_full_raw}`,
    `{path}` and `{path_full}` in a command template. The last two are shell-quoted.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from filescout.database_entry import Entry, EntryType, FolderEntry, compare_by_name
from filescout.database_index import IndexType
from filescout.database_view import DatabaseView

root = FolderEntry(name="", parent=None)
home = FolderEntry(name="home", parent=root)
notes = Entry(name="notes10.txt", parent=home, size=120, type=EntryType.FILE)
todo = Entry(name="notes2.txt", parent=home, size=80, type=EntryType.FILE)

print(notes.path_full())                  # /home/notes10.txt
print(compare_by_name(todo, notes) < 0)   # True: 2 sorts before 10

view = DatabaseView(query_text="notes", sort_order=IndexType.NAME)
view.register([root, home], [notes, todo])
print(view.num_folders(), view.num_files())  # 0 2
print(view.name_for(0))                   # notes2.txt
view.select_all()
print(view.num_selected())                # 2
```

## What it does not do

filescout does not scan the file system to build its entries. You create `Entry` and
`FolderEntry` objects yourself and hand them to `DatabaseView.register()`. It also does
not:

- save a database to disk or load one;
- provide a command-line program or a graphical interface;
- open or launch files;
- move files to the trash. `remove_file()` deletes them.