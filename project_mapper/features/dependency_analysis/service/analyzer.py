import logging
from collections import Counter, defaultdict
from typing import Dict, List

from project_mapper.core.common.formatting import mermaid_id
from project_mapper.core.config.schema import MapperConfig
from project_mapper.features.tree_walker.service.api import walk_project
from ..data.package_reader import read_packages
from ..domain.models import PackageInfo

logger = logging.getLogger(__name__)

MAX_EXTERNAL_PER_PACKAGE = 10
TOP_DEPENDENCIES = 10


def analyze_dependencies(root_dir, config: MapperConfig) -> str:
    """
    Builds DEPENDENCIES.md from every package.json in the project.
    """
    result = walk_project(root_dir, config)
    if not any(r.name == "package.json" for r in result.records):
        return "# Dependency Analysis\n\nNo package.json files found in the project."

    packages = read_packages(result.records)
    logger.info(f"Analyzing {len(packages)} packages")

    markdown = "# Dependency Analysis\n\n"
    markdown += "## Project Packages\n\n"
    markdown += f"Total packages found: {len(packages)}\n\n"

    if packages:
        markdown += "| Package | Version | Dependencies | Dev Dependencies |\n"
        markdown += "|---------|---------|--------------|------------------|\n"
        for pkg in packages:
            markdown += (
                f"| `{pkg.name}` | {pkg.version or '—'} | "
                f"{len(pkg.dependencies)} | {len(pkg.dev_dependencies)} |\n"
            )
        markdown += "\n"

    markdown += "## Dependency Graph\n\n"
    markdown += dependency_diagram(
        packages,
        include_internal=config.output.dependency_graph.include_internal,
        include_external=config.output.dependency_graph.include_external,
    )

    markdown += "## Detailed Dependencies\n\n"
    for pkg in packages:
        markdown += _package_details(pkg)

    markdown += "## Dependency Version Analysis\n\n"
    markdown += version_analysis(packages)
    return markdown


def dependency_diagram(packages: List[PackageInfo], include_internal: bool, include_external: bool) -> str:
    """Mermaid graph of package -> dependency edges."""
    names = {pkg.name for pkg in packages}
    lines = ["```mermaid", "graph TD"]

    for pkg in packages:
        lines.append(f'  {mermaid_id(pkg.name)}["{pkg.name}"]')
    lines.append("")

    for pkg in packages:
        node = mermaid_id(pkg.name)

        if include_internal:
            for other in packages:
                if other.name != pkg.name and other.name in pkg.dependencies:
                    lines.append(f"  {node} --> {mermaid_id(other.name)}")

        if include_external:
            external = [dep for dep in pkg.dependencies if dep not in names][:MAX_EXTERNAL_PER_PACKAGE]
            for dep in external:
                dep_node = f"{mermaid_id(dep)}_ext"
                lines.append(f'  {dep_node}["{dep}"]:::external')
                lines.append(f"  {node} --> {dep_node}")

    lines.append("")
    lines.append("  classDef external fill:#f9f,stroke:#333,stroke-width:2px")
    lines.append("```")

    markdown = "\n".join(lines) + "\n\n"
    if include_external:
        markdown += (
            f"> Note: For clarity, only up to {MAX_EXTERNAL_PER_PACKAGE} external "
            "dependencies are shown per package.\n\n"
        )
    return markdown


def _dependency_table(deps: Dict[str, str]) -> str:
    table = "| Package | Version |\n|---------|---------|\n"
    for name, version in sorted(deps.items()):
        table += f"| `{name}` | `{version}` |\n"
    return table + "\n"


def _package_details(pkg: PackageInfo) -> str:
    markdown = f"### {pkg.name}\n\n"
    markdown += f"**Path:** `{pkg.path}`\n\n"

    if pkg.workspaces:
        markdown += "**Workspaces:**\n\n"
        markdown += "".join(f"- `{w}`\n" for w in pkg.workspaces)
        markdown += "\n"

    if pkg.dependencies:
        markdown += "**Dependencies:**\n\n" + _dependency_table(pkg.dependencies)
    else:
        markdown += "**Dependencies:** None\n\n"

    if pkg.dev_dependencies:
        markdown += "**Dev Dependencies:**\n\n" + _dependency_table(pkg.dev_dependencies)
    else:
        markdown += "**Dev Dependencies:** None\n\n"

    if pkg.peer_dependencies:
        markdown += "**Peer Dependencies:**\n\n" + _dependency_table(pkg.peer_dependencies)

    return markdown


def version_analysis(packages: List[PackageInfo]) -> str:
    """
    Flags dependencies declared with different versions across packages,
    then lists the most used ones. Regular and dev dependencies both count.
    """
    versions: Dict[str, Counter] = defaultdict(Counter)
    for pkg in packages:
        for deps in (pkg.dependencies, pkg.dev_dependencies):
            for name, version in deps.items():
                versions[name][version] += 1

    inconsistent = sorted((name, counts) for name, counts in versions.items() if len(counts) > 1)

    markdown = ""
    if inconsistent:
        markdown += "### Inconsistent Dependency Versions\n\n"
        markdown += "The following dependencies have different versions across packages:\n\n"
        markdown += "| Dependency | Versions |\n|------------|----------|\n"
        for name, counts in inconsistent:
            listed = ", ".join(f"`{v}` ({n} packages)" for v, n in counts.items())
            markdown += f"| `{name}` | {listed} |\n"
        markdown += "\n"
    else:
        markdown += "### Dependency Version Consistency\n\n"
        markdown += "All dependencies have consistent versions across packages.\n\n"

    usage = sorted(
        ((name, sum(counts.values())) for name, counts in versions.items()),
        key=lambda item: -item[1],
    )[:TOP_DEPENDENCIES]

    markdown += "### Top Dependencies\n\n"
    markdown += "| Dependency | Used in Packages |\n|------------|------------------|\n"
    for name, count in usage:
        markdown += f"| `{name}` | {count} |\n"
    return markdown + "\n"
