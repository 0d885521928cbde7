"""Tests for list_paths and would_show against real directory trees."""

import os
from pathlib import Path

import pytest

from ls_option.list_option import ListOption
from ls_option.lister import list_paths, would_show


def relative(paths, root):
    """Map listed absolute paths to root-relative POSIX strings, '.' for the root."""
    return {Path(p).relative_to(root).as_posix() for p in paths}


def test_recursive_unhidden_files(sample_tree):
    opt = ListOption().only_files().only_unhidden().set_recursive(True)
    result = list_paths(opt, sample_tree)
    assert set(result) == {str(sample_tree / "a.txt"), str(sample_tree / "sub" / "b.txt")}


def test_depth_one_files_and_dirs(sample_tree):
    opt = ListOption().set_files(True).set_dirs(True).set_depth(1).set_recursive(False)
    result = list_paths(opt, sample_tree)
    assert str(sample_tree / "a.txt") in result
    assert str(sample_tree / "sub") in result
    assert str(sample_tree / "sub" / "b.txt") not in result
    assert str(sample_tree / ".secret") not in result


def test_root_directory_is_listed_first(sample_tree):
    result = list_paths(ListOption(), sample_tree)
    assert result[0] == str(sample_tree)
    assert relative(result, sample_tree) == {".", "a.txt", "sub"}


def test_child_is_followed_by_its_subtree(sample_tree):
    (sample_tree / "zz.txt").touch()
    result = list_paths(ListOption().set_recursive(True), sample_tree)
    assert result == [
        str(sample_tree),
        str(sample_tree / "a.txt"),
        str(sample_tree / "sub"),
        str(sample_tree / "sub" / "b.txt"),
        str(sample_tree / "zz.txt"),
    ]


def test_hidden_visibility(sample_tree):
    hidden = list_paths(ListOption().only_hidden().set_recursive(True), sample_tree)
    assert hidden == [str(sample_tree / ".secret")]

    everything = list_paths(ListOption().set_hidden(True).set_recursive(True), sample_tree)
    assert relative(everything, sample_tree) == {".", ".secret", "a.txt", "sub", "sub/b.txt"}


def test_no_visibility_lists_nothing(sample_tree):
    opt = ListOption().set_hidden(False).set_unhidden(False).set_recursive(True)
    assert list_paths(opt, sample_tree) == []


def test_no_type_lists_nothing(sample_tree):
    opt = ListOption().set_dirs(False).set_files(False).set_hidden(True).set_recursive(True)
    assert list_paths(opt, sample_tree) == []


def test_nonexistent_root_is_empty():
    assert list_paths(ListOption().set_recursive(True), "/definitely/does/not/exist") == []


def test_listing_is_repeatable(deep_tree):
    opt = ListOption().set_hidden(True).set_recursive(True)
    assert list_paths(opt, deep_tree) == list_paths(opt, deep_tree)


def test_depth_zero_lists_only_the_root(sample_tree):
    assert list_paths(ListOption().set_depth(0), sample_tree) == [str(sample_tree)]


def test_depth_zero_with_non_matching_root(sample_tree):
    assert list_paths(ListOption().only_files().set_depth(0), sample_tree) == []


@pytest.mark.parametrize("depth", [1, 2, 3, 4, 5])
def test_depth_bound(deep_tree, depth):
    result = list_paths(ListOption().set_depth(depth), deep_tree)
    levels = [len(Path(p).relative_to(deep_tree).parts) for p in result]
    assert max(levels) == min(depth, 5)
    assert all(level <= depth for level in levels)


def test_depth_three_files(deep_tree):
    result = list_paths(ListOption().only_files().set_depth(3), deep_tree)
    assert relative(result, deep_tree) == {"f0.py", ".hidden/h1.py", "l1/f1.py", "l1/l2/f2.md"}


def test_recursive_ignores_depth(deep_tree):
    shallow = list_paths(ListOption().only_files().set_recursive(True).set_depth(0), deep_tree)
    deep = list_paths(ListOption().only_files().set_recursive(True).set_depth(100), deep_tree)
    assert shallow == deep
    assert relative(shallow, deep_tree) == {
        "f0.py",
        ".hidden/h1.py",
        "l1/f1.py",
        "l1/l2/f2.md",
        "l1/l2/l3/f3.py",
        "l1/l2/l3/l4/f4.py",
    }


def test_hidden_directories_are_still_walked(deep_tree):
    # .hidden is filtered out but its unhidden child is reached
    result = list_paths(ListOption().only_files().set_recursive(True), deep_tree)
    assert str(deep_tree / ".hidden" / "h1.py") in result
    assert str(deep_tree / ".hidden") not in result


def test_suffix_filter(deep_tree):
    opt = ListOption().only_files().set_recursive(True).add_suffix("md")
    assert relative(list_paths(opt, deep_tree), deep_tree) == {"l1/l2/f2.md"}


def test_suffix_filter_with_several_suffixes(deep_tree):
    opt = ListOption().only_files().set_recursive(True).add_suffix("md").add_raw_suffix("3.py")
    assert relative(list_paths(opt, deep_tree), deep_tree) == {"l1/l2/f2.md", "l1/l2/l3/f3.py"}


def test_suffix_shadowing_applies_to_listing(deep_tree):
    opt = ListOption().only_files().set_recursive(True).add_suffixes(["py"]).add_suffixes(["md"])
    assert relative(list_paths(opt, deep_tree), deep_tree) == {"l1/l2/f2.md"}


def test_suffix_applies_to_directories(deep_tree):
    opt = ListOption().only_dirs().set_recursive(True).add_raw_suffix("3")
    assert relative(list_paths(opt, deep_tree), deep_tree) == {"l1/l2/l3"}


def test_suffix_matches_final_component_only(tmp_path):
    (tmp_path / "notes.txt").mkdir()
    (tmp_path / "notes.txt" / "readme").touch()
    opt = ListOption().set_recursive(True).add_suffix("txt")
    assert relative(list_paths(opt, tmp_path), tmp_path.resolve()) == {"notes.txt"}


def test_file_root(sample_tree):
    target = sample_tree / "a.txt"
    assert list_paths(ListOption(), target) == [str(target)]
    assert list_paths(ListOption().only_dirs(), target) == []
    assert list_paths(ListOption().add_suffix("md"), target) == []


def test_file_root_ignores_depth(sample_tree):
    target = sample_tree / "a.txt"
    assert list_paths(ListOption().set_depth(0), target) == [str(target)]


def test_hidden_file_root(sample_tree):
    target = sample_tree / ".secret"
    assert list_paths(ListOption(), target) == []
    assert list_paths(ListOption().only_hidden(), target) == [str(target)]


def test_relative_root_yields_absolute_paths(sample_tree, monkeypatch):
    monkeypatch.chdir(sample_tree)
    result = list_paths(ListOption().only_files(), ".")
    assert result == [str(sample_tree / "a.txt")]
    assert all(os.path.isabs(p) for p in result)


def test_root_is_canonicalized(sample_tree):
    result = list_paths(ListOption().set_depth(0), sample_tree / "sub" / "..")
    assert result == [str(sample_tree)]


def test_symlinked_child_keeps_its_name(sample_tree):
    try:
        os.symlink(sample_tree / "sub", sample_tree / "link")
    except (OSError, NotImplementedError):
        pytest.skip("Symlink creation not supported on this platform/environment")

    result = list_paths(ListOption().only_files().set_recursive(True), sample_tree)
    assert str(sample_tree / "link" / "b.txt") in result
    assert str(sample_tree / "sub" / "b.txt") in result


def test_empty_directory(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    assert list_paths(ListOption().set_recursive(True), empty) == [str(empty.resolve())]


def test_would_show(sample_tree):
    opt = ListOption()
    assert would_show(opt, sample_tree / "a.txt") is True
    assert would_show(opt, sample_tree / ".secret") is False
    assert would_show(opt.only_dirs(), sample_tree / "a.txt") is False
    assert would_show(opt.only_dirs(), sample_tree / "sub") is True
    assert would_show(opt.add_suffix("md"), sample_tree / "a.txt") is False


def test_would_show_depth_eligibility(sample_tree):
    target = sample_tree / "a.txt"
    assert would_show(ListOption().set_depth(0), target) is False
    assert would_show(ListOption().set_depth(0).set_recursive(True), target) is True


def test_would_show_missing_path(tmp_path):
    assert would_show(ListOption(), tmp_path / "missing") is False


def test_would_show_judges_current_directory_by_its_name(tmp_path, monkeypatch):
    hidden = tmp_path / ".cfg"
    hidden.mkdir()
    monkeypatch.chdir(hidden)
    assert would_show(ListOption().only_hidden(), ".") is True
    assert would_show(ListOption().only_unhidden(), ".") is False
    assert list_paths(ListOption().only_hidden(), ".") == [str(hidden.resolve())]


def test_would_show_judges_symlink_by_its_target(tmp_path):
    target = tmp_path / "notes.md"
    target.touch()
    link = tmp_path / ".link"
    try:
        link.symlink_to(target)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported")
    assert would_show(ListOption().add_suffix("md"), link) is True
    assert would_show(ListOption().only_hidden(), link) is False
