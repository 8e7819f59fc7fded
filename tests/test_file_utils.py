import os

import pytest

from filescout import file_utils
from filescout.file_utils import (
    build_open_command,
    create_dir,
    data_dir_path,
    get_extension,
    get_file_type,
    get_size_formatted,
    remove_file,
)


def test_data_dir_uses_xdg_data_home(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    assert data_dir_path() == f"{tmp_path}/{file_utils.DATA_FOLDER_NAME}"


def test_data_dir_falls_back_to_home(monkeypatch, tmp_path):
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    result = data_dir_path()
    assert result.startswith(str(tmp_path))
    assert result.endswith("/" + file_utils.DATA_FOLDER_NAME)


def test_create_dir_makes_parents(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    create_dir(target)
    assert target.is_dir()
    create_dir(target)
    assert target.is_dir()


def test_remove_file_deletes_file(tmp_path):
    f = tmp_path / "x.txt"
    f.write_text("data")
    remove_file(f)
    assert not f.exists()


def test_remove_file_deletes_empty_dir(tmp_path):
    d = tmp_path / "empty"
    d.mkdir()
    remove_file(d)
    assert not d.exists()


def test_remove_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        remove_file(tmp_path / "missing")


def test_remove_non_empty_dir_raises(tmp_path):
    d = tmp_path / "full"
    d.mkdir()
    (d / "f").write_text("x")
    with pytest.raises(OSError):
        remove_file(d)
    assert d.exists()


@pytest.mark.parametrize(
    "name, ext",
    [
        ("archive.tar.gz", "gz"),
        ("app.desktop", "desktop"),
        ("README", None),
        (".hidden", None),
        ("", None),
        (None, None),
    ],
)
def test_get_extension(name, ext):
    assert get_extension(name) == ext


def test_build_open_command_quotes_as_documented():
    cmd = build_open_command("/foo", "/foo/'bar", "open {path_full}")
    assert cmd == "open '/foo/'\\''bar'"


def test_build_open_command_raw_keywords():
    cmd = build_open_command("/foo", "/foo/bar", "x {path_raw} {path_full_raw}")
    assert cmd == "x /foo /foo/bar"


def test_build_open_command_path_is_quoted():
    cmd = build_open_command("/foo", "/foo/bar", "{path}")
    assert cmd == "'/foo'"


def test_build_open_command_drops_unknown_keywords():
    cmd = build_open_command("/foo", "/foo/bar", "a{unknown}b {path_raw}")
    assert cmd == "ab /foo"


def test_file_type_folder():
    assert get_file_type("anything.txt", True) == "Folder"


def test_file_type_unknown():
    assert get_file_type("no_extension_here", False) == "Unknown Type"
    assert get_file_type(None, False) == "Unknown Type"


def test_file_type_guessed_for_known_extension():
    result = get_file_type("notes.txt", False)
    assert result not in ("Folder", "Unknown Type")
    assert result.startswith("text/")


def test_size_one_byte():
    assert get_size_formatted(1, False) == "1 byte"


def test_size_bytes_plural():
    assert get_size_formatted(0, True) == "0 bytes"
    assert get_size_formatted(999, False) == "999 bytes"


def test_size_first_unit_si():
    assert get_size_formatted(1000, False) == "1.0 kB"


def test_size_first_unit_iec():
    assert get_size_formatted(1024, True).endswith(" KiB")
    assert get_size_formatted(1000, True) == "1000 bytes"


def test_size_units_grow():
    assert get_size_formatted(10**6, False).endswith(" MB")
    assert get_size_formatted(1024**3, True).endswith(" GiB")


def test_size_negative_raises():
    with pytest.raises(ValueError):
        get_size_formatted(-1, False)


def test_data_dir_relative_xdg_ignored(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_DATA_HOME", "relative/dir")
    monkeypatch.setenv("HOME", str(tmp_path))
    assert not data_dir_path().startswith("relative")
    assert os.path.isabs(data_dir_path())