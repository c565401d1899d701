"""Shared fixtures for mirrorcopy tests."""

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def src_tree(tmp_path):
    """A small source tree.

    Tree:
        src/app.js, src/readme.txt,
        src/vendor/lib.js, src/vendor/deep/util.js
    """
    root = tmp_path / "src"
    (root / "vendor" / "deep").mkdir(parents=True)
    (root / "app.js").write_text("app")
    (root / "readme.txt").write_text("readme")
    (root / "vendor" / "lib.js").write_text("lib")
    (root / "vendor" / "deep" / "util.js").write_text("util")
    return root


@pytest.fixture
def css_tree(tmp_path):
    """Build output grouped by extension folder.

    Tree:
        assets/css/site.css, assets/css/print.css,
        assets/js/app.js, assets/js/app.js.map
    """
    root = tmp_path / "assets"
    (root / "css").mkdir(parents=True)
    (root / "js").mkdir()
    (root / "css" / "site.css").write_text("body{}")
    (root / "css" / "print.css").write_text("@media print{}")
    (root / "js" / "app.js").write_text("app")
    (root / "js" / "app.js.map").write_text("{}")
    return root
