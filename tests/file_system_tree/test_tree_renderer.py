"""Tests for tree line formatting."""

import pytest

from boxtree.file_system_tree.tree_renderer import render_line, render_root


def test_render_root_is_path_verbatim():
    assert render_root(".") == "."
    assert render_root("some/dir/") == "some/dir/"


@pytest.mark.parametrize(
    "lineage, is_last, expected",
    [
        ((), False, "├── name"),
        ((), True, "└── name"),
        ((False,), False, "│   ├── name"),
        ((True,), True, "    └── name"),
        ((False, True, False), True, "│       │   └── name"),
        ((True, True), False, "        ├── name"),
    ],
)
def test_render_line_prefixes(lineage, is_last, expected):
    assert render_line(lineage, is_last, "name") == expected


def test_render_line_segments_are_four_columns():
    line = render_line((False, True, False), False, "x")
    assert len(line) == 4 * 4 + 1


def test_render_line_keeps_name_verbatim():
    assert render_line((), True, "  odd [name] *.txt") == "└──   odd [name] *.txt"
