"""Tests for source expression classification."""

import sys

import pytest

from mirrorcopy import Classification, CopyMode, classify


class TestMarkers:
    @pytest.mark.parametrize("expr", ["src/**", "a/b/c/**", "**"])
    def test_double_star_is_all_recursive(self, expr):
        c = classify(expr, "dist/")
        assert c.mode is CopyMode.ALL_RECURSIVE
        assert c.source == expr[:-2]

    @pytest.mark.parametrize("expr", ["src/*", "src/", "a/b/*"])
    def test_star_or_slash_is_base_only(self, expr):
        c = classify(expr, "dist/")
        assert c.mode is CopyMode.BASE_ONLY
        assert c.source == expr[:-1]

    def test_existing_file_is_single_file(self, src_tree):
        path = str(src_tree / "app.js")
        c = classify(path, "dist/")
        assert c.mode is CopyMode.SINGLE_FILE
        assert c.source == path

    @pytest.mark.skipif(sys.platform == "win32", reason="'*' not allowed in names")
    def test_literal_star_in_file_name(self, tmp_path):
        f = tmp_path / "a*b.txt"
        f.write_text("x")
        c = classify(str(f), "dist/")
        assert c.mode is CopyMode.SINGLE_FILE
        assert c.filter == ""

    def test_directory_without_marker_is_error(self, src_tree):
        c = classify(str(src_tree), "dist/")
        assert c.mode is CopyMode.ERROR

    def test_missing_is_error(self, tmp_path):
        c = classify(str(tmp_path / "nope.txt"), "dist/")
        assert c.mode is CopyMode.ERROR
        assert c.source == ""
        assert c.destination == ""
        assert c.raw_source == str(tmp_path / "nope.txt")

    def test_empty_is_error(self):
        assert classify("", "dist/").mode is CopyMode.ERROR

    def test_custom_is_file(self):
        c = classify("build/app.js", "out/", is_file=lambda p: p == "build/app.js")
        assert c.mode is CopyMode.SINGLE_FILE


class TestFilter:
    def test_base_filter(self):
        c = classify("src/*.txt", "dist/")
        assert c.mode is CopyMode.BASE_ONLY
        assert c.source == "src/"
        assert c.filter == "txt"

    def test_recursive_filter(self):
        c = classify("src/**.css", "dist/")
        assert c.mode is CopyMode.ALL_RECURSIVE
        assert c.source == "src/"
        assert c.filter == "css"

    def test_multi_part_extension(self):
        c = classify("src/*.min.js", "dist/")
        assert c.filter == "min.js"

    def test_filter_overrides_inline_option(self):
        c = classify("src/*.css[filter=js]", "dist/")
        assert c.filter == "css"

    def test_inline_filter(self):
        c = classify("src/**[filter=js]", "dist/")
        assert c.mode is CopyMode.ALL_RECURSIVE
        assert c.filter == "js"

    def test_star_dot_in_options_is_not_a_filter(self):
        c = classify("src/**[exclude=*.map]", "dist/")
        assert c.filter == ""
        assert c.exclude == "*.map"


class TestOptions:
    def test_destination_passes_through(self):
        c = classify("src/**", "dist/[remove_extension_folder]")
        assert c.destination == "dist/"
        assert c.remove_extension_folder is True

    def test_dotted_options(self):
        c = classify("src/*.txt", "out/[remove_extension_folder]")
        assert c.options == {
            "source.filter": "txt",
            "destination.remove_extension_folder": "true",
        }

    def test_mode_str(self):
        assert str(CopyMode.ALL_RECURSIVE) == "all"

    def test_default_options_are_empty_and_read_only(self):
        a = Classification(CopyMode.ERROR, "", "")
        b = Classification(CopyMode.ERROR, "", "")
        assert dict(a.source_options) == {}
        assert dict(a.destination_options) == {}
        assert a.options == {}
        assert a.source_options is not b.source_options
        with pytest.raises(TypeError):
            a.source_options["filter"] = "txt"
