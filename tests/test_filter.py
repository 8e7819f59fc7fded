import dataclasses
import re

import pytest

from filescout.filter import Filter, FilterFileType, QueryFlags, default_filters


def _by_name():
    return {f.name: f for f in default_filters()}


def test_default_filter_names_in_order():
    names = [f.name for f in default_filters()]
    assert names == [
        "All",
        "Folders",
        "Files",
        "Applications",
        "Archives",
        "Audio",
        "Documents",
        "Pictures",
        "Videos",
    ]


def test_basic_filters_have_no_query():
    filters = _by_name()
    assert filters["All"].file_type == FilterFileType.NONE
    assert filters["Folders"].file_type == FilterFileType.FOLDERS
    assert filters["Files"].file_type == FilterFileType.FILES
    for name in ("All", "Folders", "Files"):
        assert filters[name].query is None
        assert filters[name].flags == QueryFlags(0)


def test_query_filters_are_case_sensitive_regexes():
    for f in default_filters()[3:]:
        assert f.file_type == FilterFileType.FILES
        assert f.flags == QueryFlags.MATCH_CASE | QueryFlags.REGEX
        assert f.query.startswith(r"\.(")
        assert f.query.endswith(")$")


@pytest.mark.parametrize(
    "filter_name, matching, not_matching",
    [
        ("Applications", ["firefox.desktop", "APP.DESKTOP"], ["app.Desktop", "desktop"]),
        ("Archives", ["backup.tar", "part.r15", "data.ZIP"], ["tar", "a.tar.bak"]),
        ("Audio", ["song.mp3", "track.FLAC"], ["song.mp3.txt", "song.Mp3"]),
        ("Documents", ["report.pdf", "main.c", "NOTES.TXT"], ["image.png"]),
        ("Pictures", ["photo.jpeg", "icon.PNG"], ["photo.jpeg~"]),
        ("Videos", ["movie.mkv", "clip.MP4"], ["movie.mkv.part"]),
    ],
)
def test_filter_patterns(filter_name, matching, not_matching):
    pattern = re.compile(_by_name()[filter_name].query)
    for name in matching:
        assert pattern.search(name) is not None, name
    for name in not_matching:
        assert pattern.search(name) is None, name


def test_filter_is_immutable():
    f = Filter(FilterFileType.FILES, "Custom", "abc")
    with pytest.raises(dataclasses.FrozenInstanceError):
        f.name = "Other"
    assert f.flags == QueryFlags(0)


def test_default_filters_are_fresh_lists():
    first = default_filters()
    first.clear()
    assert len(default_filters()) == 9