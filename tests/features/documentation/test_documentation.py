import json

import pytest

from project_mapper.core.common.enums import OutputType
from project_mapper.core.common.errors import ConfigError, NotFoundError
from project_mapper.core.config.settings import settings
from project_mapper.features.documentation.service import pipeline as pipeline_module
from project_mapper.features.documentation.service.api import config_for, generate_documentation, init_config
from project_mapper.features.documentation.service.pipeline import DocumentationPipeline


@pytest.fixture
def project(make_tree):
    return make_tree({
        "package.json": {"name": "demo", "dependencies": {"express": "^4"}},
        "src/server.js": "",
        ".env.example": "PORT=8080\n",
    })


def test_enabled_outputs_by_default(project, tmp_path, mapper_config):
    """
    Verifies that only the outputs enabled in the config are written.
    """
    out_dir = tmp_path / "docs"

    summary = generate_documentation(project, out_dir, config=mapper_config())

    assert summary.ok
    assert list(summary.written) == [OutputType.MARKDOWN_TREE, OutputType.CONFIG_FILES]
    assert (out_dir / "PROJECT-STRUCTURE.md").exists()
    assert (out_dir / "CONFIG-FILES.md").exists()
    assert not (out_dir / "DEPENDENCIES.md").exists()


def test_only_restricts_and_orders_outputs(project, tmp_path, mapper_config):
    out_dir = tmp_path / "docs"

    summary = generate_documentation(
        project, out_dir, config=mapper_config(),
        only=["metadata_json", "markdown", "envVarsDocs", "dependency_graph", "architecture"],
    )

    assert list(summary.written) == [
        OutputType.MARKDOWN_TREE,
        OutputType.ENV_VARS_DOCS,
        OutputType.DEPENDENCY_GRAPH,
        OutputType.ARCHITECTURE,
        OutputType.METADATA_JSON,
    ]
    assert "`PORT`" in (out_dir / "ENV-VARIABLES.md").read_text(encoding="utf-8")
    assert json.loads((out_dir / "project-metadata.json").read_text())["stats"]["total_packages"] == 1


def test_unknown_output_type(mapper_config):
    with pytest.raises(ConfigError):
        DocumentationPipeline(mapper_config()).resolve_outputs(["pdf"])


def test_one_failing_generator_does_not_stop_others(project, tmp_path, mapper_config, monkeypatch):
    def explode(root_dir, config):
        raise RuntimeError("disk on fire")

    monkeypatch.setitem(pipeline_module.MARKDOWN_GENERATORS, OutputType.MARKDOWN_TREE, explode)

    summary = generate_documentation(project, tmp_path / "docs", config=mapper_config())

    assert list(summary.written) == [OutputType.CONFIG_FILES]
    assert summary.errors == ["Failed to generate markdown_tree: disk on fire"]
    assert not summary.ok


def test_missing_root_is_fatal(tmp_path, mapper_config):
    with pytest.raises(NotFoundError):
        generate_documentation(tmp_path / "missing", tmp_path / "docs", config=mapper_config())


def test_init_and_load_project_config(project, tmp_path):
    path = init_config(project)

    assert path == project / settings.CONFIG_FILENAME
    assert config_for(project).max_depth == 8

    with pytest.raises(ConfigError):
        init_config(project)


def test_config_for_falls_back_to_defaults(tmp_path):
    assert config_for(tmp_path).output.markdown_tree.enabled
