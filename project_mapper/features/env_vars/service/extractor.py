import logging
from typing import List, Pattern

from project_mapper.core.common.errors import MalformedPatternError
from project_mapper.core.common.formatting import escape_markdown
from project_mapper.core.config.schema import MapperConfig
from project_mapper.features.tree_walker.data.ignore_rules import glob_to_regex
from project_mapper.features.tree_walker.domain.models import FileRecord
from project_mapper.features.tree_walker.service.api import walk_project
from ..data.env_parser import parse_env_file

logger = logging.getLogger(__name__)


def _compile_patterns(patterns: List[str]) -> List[Pattern]:
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(glob_to_regex(pattern))
        except MalformedPatternError as e:
            logger.warning(f"Skipping env file pattern: {e}")
    return compiled


def extract_env_vars(root_dir, config: MapperConfig) -> str:
    """
    Builds ENV-VARIABLES.md from every file matching output.env_vars_docs.patterns.
    """
    patterns = list(config.output.env_vars_docs.patterns) or [".env.example", ".env.*.example"]
    regexes = _compile_patterns(patterns)

    result = walk_project(root_dir, config)
    env_files = sorted(
        (r for r in result.records if any(rx.match(r.name) for rx in regexes)),
        key=lambda r: r.relative_path,
    )

    if not env_files:
        return (
            "# Environment Variables\n\nNo environment variable files found matching the patterns: "
            + ", ".join(patterns)
        )

    markdown = "# Environment Variables\n\n"
    markdown += "This document contains environment variables used by the project.\n\n"
    for record in env_files:
        markdown += _env_file_section(record)
    return markdown


def _env_file_section(record: FileRecord) -> str:
    section = f"## {record.relative_path}\n\n"
    try:
        content = record.path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read {record.relative_path}: {e}")
        return section + f"> Error reading file: {e}\n\n"

    variables = parse_env_file(content)
    if not variables:
        return section + "No environment variables found in this file.\n\n"

    section += "| Variable | Default Value | Description |\n"
    section += "|----------|---------------|-------------|\n"
    for var in variables:
        value = f"`{escape_markdown(var.value)}`" if var.value else "_(empty)_"
        description = var.description.replace("|", "\\|") if var.description else "—"
        section += f"| `{var.name}` | {value} | {description} |\n"

    section += "\n### Raw File Content\n\n"
    section += f"```env\n{content.strip()}\n```\n\n"
    return section
