import json
import logging
from typing import Iterable, List, Optional

from project_mapper.features.tree_walker.domain.models import FileRecord
from ..domain.models import PackageInfo

logger = logging.getLogger(__name__)

PACKAGE_FILENAME = "package.json"


def _as_mapping(value) -> dict:
    return {str(k): str(v) for k, v in value.items()} if isinstance(value, dict) else {}


def _as_workspaces(value) -> List[str]:
    # npm accepts a list, yarn also {"packages": [...]}
    if isinstance(value, dict):
        value = value.get("packages", [])
    return [str(w) for w in value] if isinstance(value, list) else []


def parse_package(record: FileRecord) -> Optional[PackageInfo]:
    """
    Returns None (and logs) when the file cannot be read or is not a JSON object.
    """
    try:
        data = json.loads(record.path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error(f"Error parsing {record.path}: {e}")
        return None

    if not isinstance(data, dict):
        logger.error(f"Error parsing {record.path}: top-level value is not an object")
        return None

    version = data.get("version")
    return PackageInfo(
        path=record.relative_path,
        name=data.get("name") or record.parent,
        version=str(version) if version is not None else None,
        dependencies=_as_mapping(data.get("dependencies")),
        dev_dependencies=_as_mapping(data.get("devDependencies")),
        peer_dependencies=_as_mapping(data.get("peerDependencies")),
        workspaces=_as_workspaces(data.get("workspaces")),
    )


def read_packages(records: Iterable[FileRecord]) -> List[PackageInfo]:
    """
    Parses every package.json among the walker's records, skipping malformed ones.
    """
    packages = []
    for record in records:
        if record.name != PACKAGE_FILENAME:
            continue
        package = parse_package(record)
        if package:
            packages.append(package)
    return packages
