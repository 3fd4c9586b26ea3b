import logging
import os

import pytest

from project_mapper.core.common.enums import IssueKind
from project_mapper.core.common.errors import NotFoundError
from project_mapper.features.tree_walker.data import tree_renderer
from project_mapper.features.tree_walker.data.tree_renderer import TreeRenderer
from project_mapper.features.tree_walker.domain.models import DescriptionTable, IgnorePolicy
from project_mapper.features.tree_walker.service.api import render_tree, render_tree_report


def test_directory_then_file_with_last_sibling_glyphs(make_tree):
    """
    {a/ (dir), b.txt (file)} renders a first with the middle connector,
    b.txt last with the closing connector.
    """
    root = make_tree({"a/": None, "b.txt": ""})

    output = render_tree(root, IgnorePolicy(), max_depth=8)

    assert output.splitlines() == ["├── a", "└── b.txt"]


def test_nested_prefixes_align(make_tree):
    root = make_tree({"src/index.js": "", "src/lib/a.js": "", "README.md": ""})

    output = render_tree(root, IgnorePolicy(), max_depth=8)

    assert output == (
        "├── src\n"
        "│   ├── lib\n"
        "│   │   └── a.js\n"
        "│   └── index.js\n"
        "└── README.md\n"
    )


def test_last_sibling_ignores_hidden_entries(make_tree):
    """
    When the alphabetically last entry is ignored, the previous one
    still gets the closing connector.
    """
    root = make_tree({"docs/x.md": "", "a.txt": "", "z.log": ""})

    output = render_tree(root, IgnorePolicy(patterns=("*.log",)), max_depth=8)

    assert output.splitlines() == ["├── docs", "│   └── x.md", "└── a.txt"]


def test_ignored_directory_is_not_rendered(make_tree):
    root = make_tree({"node_modules/pkg/index.js": "", "src/app.js": ""})

    output = render_tree(root, IgnorePolicy(directories=frozenset({"node_modules"})), max_depth=8)

    assert "node_modules" not in output
    assert output.splitlines() == ["└── src", "    └── app.js"]


def test_depth_cutoff_keeps_directory_line(make_tree):
    root = make_tree({"a/b/c.txt": "", "top.txt": ""})

    output = render_tree(root, IgnorePolicy(), max_depth=1)

    assert output.splitlines() == ["├── a", "│   └── b", "└── top.txt"]


def test_descriptions_annotate_directories_and_files(make_tree):
    root = make_tree({"src/index.js": "", "src/styles.css": "", "package.json": "{}"})
    table = DescriptionTable(
        directories={"src": "Source code"},
        file_patterns={r"\.js$": "JavaScript module", r"package\.json$": "Manifest"},
    )

    output = render_tree(root, IgnorePolicy(), max_depth=8, descriptions=table)

    assert output.splitlines() == [
        "├── src # Source code",
        "│   ├── index.js # JavaScript module",
        "│   └── styles.css",
        "└── package.json # Manifest",
    ]


def test_directory_descriptions_need_exact_relative_path(make_tree):
    root = make_tree({"app/src/main.py": ""})
    table = DescriptionTable(directories={"src": "Top-level sources only"})

    output = render_tree(root, IgnorePolicy(), max_depth=8, descriptions=table)

    assert "#" not in output


def test_malformed_description_regex_is_skipped(make_tree, caplog):
    root = make_tree({"main.js": "", "notes.txt": ""})
    table = DescriptionTable(file_patterns={"(unclosed": "never", r"\.js$": "Entry point"})

    renderer = TreeRenderer(IgnorePolicy(), 8, table)
    with caplog.at_level(logging.WARNING):
        output = renderer.render(root)

    assert output.splitlines() == ["├── main.js # Entry point", "└── notes.txt"]
    assert [i.kind for i in renderer.issues] == [IssueKind.PATTERN]
    assert "(unclosed" in caplog.text


def test_iter_lines_is_lazy(tmp_path):
    renderer = TreeRenderer(IgnorePolicy(), 8)
    lines = renderer.iter_lines(tmp_path / "missing")

    # Nothing touched the filesystem yet
    with pytest.raises(NotFoundError):
        next(lines)


def test_unlistable_subdirectory_is_omitted(make_tree, monkeypatch):
    root = make_tree({"locked/a.txt": "", "open/b.txt": ""})
    real_list_children = tree_renderer.list_children

    def guarded_list_children(directory, relative):
        if directory.name == "locked":
            raise PermissionError(13, "Permission denied", str(directory))
        return real_list_children(directory, relative)

    monkeypatch.setattr(tree_renderer, "list_children", guarded_list_children)
    renderer = TreeRenderer(IgnorePolicy(), 8)
    output = renderer.render(root)

    assert output.splitlines() == ["├── locked", "└── open", "    └── b.txt"]
    assert renderer.issues[0].kind == IssueKind.LISTING


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_symlinked_directory_is_a_leaf(make_tree):
    root = make_tree({"real/file.txt": ""})
    try:
        os.symlink(root / "real", root / "alias", target_is_directory=True)
    except OSError:
        pytest.skip("cannot create symlinks here")

    output = render_tree(root, IgnorePolicy(), max_depth=8)

    assert output.splitlines() == ["├── alias", "└── real", "    └── file.txt"]


def test_tree_report_keeps_listing_and_pattern_issues(make_tree, monkeypatch):
    root = make_tree({"locked/a.txt": "", "b.txt": ""})
    real_list_children = tree_renderer.list_children

    def guarded_list_children(directory, relative):
        if directory.name == "locked":
            raise PermissionError(13, "Permission denied", str(directory))
        return real_list_children(directory, relative)

    monkeypatch.setattr(tree_renderer, "list_children", guarded_list_children)
    report = render_tree_report(root, IgnorePolicy(patterns=("[broken",)), max_depth=8)

    assert report.text == "├── locked\n└── b.txt\n"
    assert report.partial
    assert [(i.kind, i.path) for i in report.issues] == [
        (IssueKind.PATTERN, "[broken"),
        (IssueKind.LISTING, "locked"),
    ]


def test_clean_tree_report_is_not_partial(make_tree):
    root = make_tree({"a.txt": ""})

    report = render_tree_report(root, IgnorePolicy(), max_depth=8)

    assert report.text == render_tree(root, IgnorePolicy(), max_depth=8)
    assert report.issues == []
    assert not report.partial
