import logging
from typing import Dict, List

from project_mapper.core.common.formatting import mermaid_id
from project_mapper.core.config.schema import MapperConfig
from project_mapper.features.dependency_analysis.data.package_reader import read_packages
from project_mapper.features.dependency_analysis.domain.models import PackageInfo
from project_mapper.features.tree_walker.data.listing import open_root
from project_mapper.features.tree_walker.service.api import walk_project

logger = logging.getLogger(__name__)

MODULE_INFO_FILENAME = "MODULE_INFORMATION.md"
SKIPPED_DIRS = {"node_modules", ".git"}


def generate_architecture(root_dir, config: MapperConfig) -> str:
    """
    Builds ARCHITECTURE.md: a high-level flowchart of package locations,
    hand-written module docs, and internal package relationships.
    """
    root = open_root(root_dir)
    result = walk_project(root, config)
    packages = read_packages(result.records)

    markdown = "# Project Architecture\n\n"
    markdown += "This document provides an overview of the project architecture.\n\n"

    markdown += "## High-Level Architecture\n\n"
    markdown += high_level_diagram(packages, root.name)

    module_docs = [r for r in result.records if r.name == MODULE_INFO_FILENAME]
    if module_docs:
        markdown += "## Module Documentation\n\n"
        for record in module_docs:
            try:
                content = record.path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Error reading {record.path}: {e}")
                continue
            markdown += f"### {record.parent}\n\n{content.strip()}\n\n"

    if packages:
        markdown += "## Component Relationships\n\n"
        markdown += component_diagram(packages)

    return markdown


def high_level_diagram(packages: List[PackageInfo], root_name: str) -> str:
    """
    Root -> top-level directory -> second-level directory, for every
    directory that holds a package.json somewhere below it.
    """
    tree: Dict[str, List[str]] = {}
    for pkg in packages:
        parts = pkg.path.split("/")
        if len(parts) < 2 or parts[0] in SKIPPED_DIRS:
            continue
        children = tree.setdefault(parts[0], [])
        if len(parts) > 2 and parts[1] not in SKIPPED_DIRS and parts[1] not in children:
            children.append(parts[1])

    lines = ["```mermaid", "flowchart TB", f'  root["{root_name}"]']
    for top, children in tree.items():
        top_id = mermaid_id(top)
        lines.append(f'  {top_id}["{top}"]')
        lines.append(f"  root --> {top_id}")
        for child in children:
            child_id = f"{top_id}_{mermaid_id(child)}"
            lines.append(f'  {child_id}["{child}"]')
            lines.append(f"  {top_id} --> {child_id}")
    lines.append("```")
    return "\n".join(lines) + "\n\n"


def component_diagram(packages: List[PackageInfo]) -> str:
    named = [pkg for pkg in packages if pkg.name and pkg.name != "."]
    if not named:
        return "> No named packages found to generate a component diagram.\n\n"

    names = {pkg.name for pkg in named}
    lines = ["```mermaid", "flowchart LR"]
    lines += [f'  {mermaid_id(pkg.name)}["{pkg.name}"]' for pkg in named]
    lines.append("")
    for pkg in named:
        for dep in pkg.dependencies:
            if dep in names:
                lines.append(f"  {mermaid_id(pkg.name)} --> {mermaid_id(dep)}")
    lines.append("```")
    return "\n".join(lines) + "\n\n"
