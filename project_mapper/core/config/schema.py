# File: project_mapper/core/config/schema.py
#
# Structured schema of the project config file (.project-mapper.json).
# OmegaConf validates loaded files against these dataclasses.

from dataclasses import dataclass, field
from typing import Dict, List

# Toggle key -> enabled, for the config-file digest
DEFAULT_INCLUDE_FILES = {
    "package.json": True,
    "dockerfile": True,
    "docker-compose": True,
    "tsconfig.json": True,
    "eslint": True,
    "env.example": True,
    "jest.config": True,
    "vite.config": True,
    "webpack.config": True,
    "biome.json": True,
    "pyproject.toml": True,
    "requirements": True,
    "setup.cfg": True,
}


@dataclass
class ProjectInfo:
    title: str = "Project Structure"
    version: str = "v1.0"
    description: str = "This document outlines the project structure."


@dataclass
class MarkdownTreeOutput:
    enabled: bool = True
    filename: str = "PROJECT-STRUCTURE.md"
    include_principles: bool = True
    include_changelog: bool = True


@dataclass
class ConfigFilesOutput:
    enabled: bool = True
    filename: str = "CONFIG-FILES.md"
    include_files: Dict[str, bool] = field(default_factory=lambda: dict(DEFAULT_INCLUDE_FILES))


@dataclass
class DependencyGraphOutput:
    enabled: bool = False
    filename: str = "DEPENDENCIES.md"
    include_external: bool = True
    include_internal: bool = True


@dataclass
class EnvVarsOutput:
    enabled: bool = False
    filename: str = "ENV-VARIABLES.md"
    patterns: List[str] = field(default_factory=lambda: [".env.example", ".env.*.example"])


@dataclass
class ArchitectureOutput:
    enabled: bool = False
    filename: str = "ARCHITECTURE.md"
    diagram_type: str = "mermaid"


@dataclass
class MetadataOutput:
    enabled: bool = False
    filename: str = "project-metadata.json"


@dataclass
class OutputConfig:
    markdown_tree: MarkdownTreeOutput = field(default_factory=MarkdownTreeOutput)
    config_files: ConfigFilesOutput = field(default_factory=ConfigFilesOutput)
    dependency_graph: DependencyGraphOutput = field(default_factory=DependencyGraphOutput)
    env_vars_docs: EnvVarsOutput = field(default_factory=EnvVarsOutput)
    architecture: ArchitectureOutput = field(default_factory=ArchitectureOutput)
    metadata_json: MetadataOutput = field(default_factory=MetadataOutput)


@dataclass
class IgnoreConfig:
    directories: List[str] = field(default_factory=lambda: [
        "node_modules", ".git", "dist", "build", "coverage", ".next", ".cache",
    ])
    files: List[str] = field(default_factory=lambda: [".DS_Store", "Thumbs.db", "*.log"])
    patterns: List[str] = field(default_factory=list)


@dataclass
class Principle:
    title: str = ""
    description: str = ""


@dataclass
class ChangelogEntry:
    version: str = ""
    date: str = ""
    description: str = ""


@dataclass
class MapperConfig:
    project_info: ProjectInfo = field(default_factory=ProjectInfo)
    output: OutputConfig = field(default_factory=OutputConfig)
    ignore: IgnoreConfig = field(default_factory=IgnoreConfig)
    max_depth: int = 8
    include_descriptions: bool = True
    directory_descriptions: Dict[str, str] = field(default_factory=dict)
    file_pattern_descriptions: Dict[str, str] = field(default_factory=dict)
    principles: List[Principle] = field(default_factory=list)
    changelog: List[ChangelogEntry] = field(default_factory=list)
