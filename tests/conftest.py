# File: tests/conftest.py

import json
import logging
import sys
from pathlib import Path

import pytest

# 1. Add project root to path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from project_mapper.core.config.loader import config_from_dict


@pytest.fixture(scope="session", autouse=True)
def global_setup():
    """
    Runs once per test session.
    Keeps walker warnings visible in failing test output.
    """
    logging.getLogger("project_mapper").setLevel(logging.DEBUG)
    yield


@pytest.fixture
def make_tree(tmp_path):
    """
    Builds a directory tree from a {relative_path: content} mapping.
    A trailing '/' creates an empty directory.
    """
    def _make(spec, root: Path = None) -> Path:
        root = root or tmp_path / "project"
        root.mkdir(parents=True, exist_ok=True)
        for rel, content in spec.items():
            target = root / rel
            if rel.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, (dict, list)):
                content = json.dumps(content)
            target.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def mapper_config():
    """Factory for validated configs: mapper_config({'max_depth': 2})."""
    def _config(overrides=None):
        return config_from_dict(overrides or {})

    return _config
