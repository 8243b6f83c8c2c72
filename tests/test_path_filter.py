import os

import pytest

from phpsl.path_filter import PathFilter, is_absolute_token, should_exclude


def _touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("<?php\n", encoding="utf-8")
    return path


def test_no_exclusions_excludes_nothing(tmp_path):
    assert not should_exclude(tmp_path / "does-not-exist.php", [])
    assert not should_exclude(_touch(tmp_path / "a.php"), [])


def test_unresolvable_candidate_is_not_excluded(tmp_path):
    assert not should_exclude(tmp_path / "vendor" / "gone.php", ["vendor"])


def test_basename_match(tmp_path):
    path = _touch(tmp_path / "src" / "config.php")

    assert should_exclude(path, ["config.php"])
    assert not should_exclude(path, ["other.php"])


def test_fragment_matches_partial_words(tmp_path):
    assert should_exclude(_touch(tmp_path / "mytests" / "a.php"), ["tests"])
    assert should_exclude(_touch(tmp_path / "src" / "catalog.php"), ["log"])


def test_relative_fragment_with_separator(tmp_path):
    path = _touch(tmp_path / "app" / "storage" / "cache.php")

    assert should_exclude(path, ["app/storage"])
    assert not should_exclude(path, ["storage/app"])


def test_absolute_token_excludes_everything_beneath(tmp_path):
    inside = _touch(tmp_path / "vendor" / "lib" / "a.php")
    outside = _touch(tmp_path / "src" / "b.php")
    token = str(tmp_path / "vendor")

    assert should_exclude(inside, [token])
    assert not should_exclude(outside, [token])


def test_missing_absolute_token_matches_nothing(tmp_path):
    path = _touch(tmp_path / "src" / "a.php")

    assert not should_exclude(path, [str(tmp_path / "nowhere")])


def test_blank_tokens_are_skipped_and_tokens_trimmed(tmp_path):
    path = _touch(tmp_path / "vendor" / "a.php")

    assert not should_exclude(path, ["", "   "])
    assert should_exclude(path, ["  vendor  "])
    assert PathFilter(["", " vendor ", "\t"]).tokens == ("vendor",)


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_symlinks_are_resolved_before_matching(tmp_path):
    _touch(tmp_path / "real_lib" / "a.php")
    link = tmp_path / "linked"
    try:
        link.symlink_to(tmp_path / "real_lib", target_is_directory=True)
    except OSError:
        pytest.skip("cannot create symlinks here")

    assert should_exclude(link / "a.php", ["real_lib"])


def test_absolute_token_detection():
    assert is_absolute_token("/srv/app")
    assert is_absolute_token("C:\\app\\vendor")
    assert is_absolute_token("d:/app")
    assert not is_absolute_token("vendor")
    assert not is_absolute_token("./vendor")
