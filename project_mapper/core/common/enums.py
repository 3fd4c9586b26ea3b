# File: project_mapper/core/common/enums.py

from enum import Enum, unique

@unique
class OutputType(str, Enum):
    MARKDOWN_TREE = "markdown_tree"
    CONFIG_FILES = "config_files"
    ENV_VARS_DOCS = "env_vars_docs"
    DEPENDENCY_GRAPH = "dependency_graph"
    ARCHITECTURE = "architecture"
    METADATA_JSON = "metadata_json"

@unique
class IssueKind(str, Enum):
    STAT = "stat"
    LISTING = "listing"
    PATTERN = "pattern"
