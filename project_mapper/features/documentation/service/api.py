import logging
from pathlib import Path
from typing import Iterable, Optional

from project_mapper.core.config.loader import create_default_config, default_config, load_config
from project_mapper.core.config.schema import MapperConfig
from project_mapper.core.config.settings import settings
from ..domain.models import DocumentationRequest, DocumentationSummary
from .pipeline import DocumentationPipeline

logger = logging.getLogger(__name__)


def init_config(root_dir, force: bool = False) -> Path:
    """Writes the default project config next to the project (settings.CONFIG_FILENAME)."""
    return create_default_config(settings.config_path(Path(root_dir)), force=force)


def config_for(root_dir) -> MapperConfig:
    """
    The project's config file when present, defaults otherwise.
    """
    path = settings.config_path(Path(root_dir))
    if path.is_file():
        return load_config(path)
    logger.info(f"No config file at {path}, using defaults")
    return default_config()


def generate_documentation(root_dir, output_dir=None, config: Optional[MapperConfig] = None,
                           only: Iterable[str] = ()) -> DocumentationSummary:
    """
    Standalone API: writes every requested documentation artifact.

    Args:
        root_dir: Project directory to map.
        output_dir: Destination, settings.OUTPUT_DIR (relative to cwd) when omitted.
        config: Project config, loaded via config_for() when omitted.
        only: Output type names to restrict to; empty runs every enabled output.
    """
    root = Path(root_dir).absolute()
    request = DocumentationRequest(
        root_path=root,
        output_dir=Path(output_dir if output_dir is not None else settings.OUTPUT_DIR).absolute(),
        only=tuple(only),
    )
    pipeline = DocumentationPipeline(config if config is not None else config_for(root))
    return pipeline.run(request)
