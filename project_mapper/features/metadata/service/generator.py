import json
import logging
from collections import Counter
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from project_mapper.core.common.formatting import format_file_size
from project_mapper.core.config.schema import MapperConfig
from project_mapper.features.dependency_analysis.data.package_reader import read_packages
from project_mapper.features.tree_walker.data.listing import open_root
from project_mapper.features.tree_walker.service.api import walk_project

logger = logging.getLogger(__name__)

TOP_DIRECTORIES = 20


def generate_metadata(root_dir, config: MapperConfig) -> Dict[str, Any]:
    """
    Summarizes the walked project: sizes, file types, packages and the busiest directories.
    """
    root = open_root(root_dir)
    result = walk_project(root, config)
    records = result.records
    packages = read_packages(records)

    extensions = Counter(r.path.suffix.lower() or "(no extension)" for r in records)
    total_size = sum(r.size for r in records)

    directories: Dict[str, Dict[str, int]] = {}
    for record in records:
        stats = directories.setdefault(record.parent, {"file_count": 0, "size": 0})
        stats["file_count"] += 1
        stats["size"] += record.size

    top_directories = sorted(directories.items(), key=lambda item: -item[1]["file_count"])[:TOP_DIRECTORIES]

    return {
        "project_info": {
            "name": root.name,
            **asdict(config.project_info),
            "generated_at": datetime.now(timezone.utc).isoformat(),
        },
        "stats": {
            "total_files": len(records),
            "total_packages": len(packages),
            "total_directories": len(directories),
            "total_size": total_size,
            "total_size_formatted": format_file_size(total_size),
            "partial": result.partial,
        },
        "file_types": [
            {"extension": ext, "count": count}
            for ext, count in sorted(extensions.items(), key=lambda item: -item[1])
        ],
        "packages": [
            {
                "path": pkg.path,
                "name": pkg.name,
                "version": pkg.version,
                "dependencies": len(pkg.dependencies),
                "dev_dependencies": len(pkg.dev_dependencies),
            }
            for pkg in packages
        ],
        "top_directories": [
            {
                "path": path,
                "file_count": stats["file_count"],
                "size": stats["size"],
                "size_formatted": format_file_size(stats["size"]),
            }
            for path, stats in top_directories
        ],
    }


def save_metadata(root_dir, output_dir, config: MapperConfig) -> Path:
    """Writes project-metadata.json and returns its path."""
    metadata = generate_metadata(root_dir, config)
    output_path = Path(output_dir) / config.output.metadata_json.filename
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(metadata, indent=2, ensure_ascii=False), encoding="utf-8")

    logger.info(f"Metadata for {metadata['stats']['total_files']} files written to {output_path}")
    return output_path
