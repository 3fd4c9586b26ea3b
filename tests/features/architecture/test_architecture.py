from project_mapper.features.architecture.service.generator import (
    component_diagram,
    generate_architecture,
    high_level_diagram,
)
from project_mapper.features.dependency_analysis.domain.models import PackageInfo


def test_architecture_document(make_tree, mapper_config):
    root = make_tree({
        "package.json": {"name": "shop"},
        "apps/web/package.json": {"name": "web", "dependencies": {"ui": "*", "react": "18"}},
        "libs/ui/package.json": {"name": "ui"},
        "libs/ui/MODULE_INFORMATION.md": "Shared components.\n",
    })

    markdown = generate_architecture(root, mapper_config())

    assert markdown.startswith("# Project Architecture\n\n")
    assert '  root["project"]' in markdown
    assert "  root --> apps" in markdown
    assert "  apps --> apps_web" in markdown
    assert "  libs --> libs_ui" in markdown
    assert "## Module Documentation\n\n### libs/ui\n\nShared components.\n" in markdown
    assert "## Component Relationships" in markdown
    assert "  web --> ui" in markdown
    assert "react" not in markdown.split("## Component Relationships")[1]


def test_high_level_diagram_without_nested_packages():
    diagram = high_level_diagram([PackageInfo(path="package.json", name="solo")], "solo")

    assert diagram == '```mermaid\nflowchart TB\n  root["solo"]\n```\n\n'


def test_component_diagram_needs_named_packages():
    unnamed = [PackageInfo(path="package.json", name=".")]

    assert component_diagram(unnamed) == "> No named packages found to generate a component diagram.\n\n"


def test_no_packages_skips_component_section(make_tree, mapper_config):
    root = make_tree({"README.md": ""})

    markdown = generate_architecture(root, mapper_config())

    assert "## Component Relationships" not in markdown
    assert "## Module Documentation" not in markdown
