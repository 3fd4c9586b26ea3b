import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List

from project_mapper.core.common.enums import OutputType
from project_mapper.core.common.errors import ConfigError, NotFoundError, WalkPermissionError
from project_mapper.core.config.schema import MapperConfig
from project_mapper.features.architecture.service.generator import generate_architecture
from project_mapper.features.config_digest.service.extractor import extract_config_files
from project_mapper.features.dependency_analysis.service.analyzer import analyze_dependencies
from project_mapper.features.env_vars.service.extractor import extract_env_vars
from project_mapper.features.markdown_tree.service.generator import generate_markdown_tree
from project_mapper.features.metadata.service.generator import save_metadata

from ..domain.models import DocumentationRequest, DocumentationSummary

logger = logging.getLogger(__name__)

# Outputs always run in this order
PIPELINE_ORDER: List[OutputType] = [
    OutputType.MARKDOWN_TREE,
    OutputType.CONFIG_FILES,
    OutputType.ENV_VARS_DOCS,
    OutputType.DEPENDENCY_GRAPH,
    OutputType.ARCHITECTURE,
    OutputType.METADATA_JSON,
]

# Names accepted in DocumentationRequest.only besides the enum values
ALIASES: Dict[str, OutputType] = {
    "markdown": OutputType.MARKDOWN_TREE,
    "markdownTree": OutputType.MARKDOWN_TREE,
    "configFiles": OutputType.CONFIG_FILES,
    "envVarsDocs": OutputType.ENV_VARS_DOCS,
    "dependencyGraph": OutputType.DEPENDENCY_GRAPH,
    "metadataJson": OutputType.METADATA_JSON,
}

MARKDOWN_GENERATORS: Dict[OutputType, Callable[[Path, MapperConfig], str]] = {
    OutputType.MARKDOWN_TREE: generate_markdown_tree,
    OutputType.CONFIG_FILES: extract_config_files,
    OutputType.ENV_VARS_DOCS: extract_env_vars,
    OutputType.DEPENDENCY_GRAPH: analyze_dependencies,
    OutputType.ARCHITECTURE: generate_architecture,
}


def parse_output_type(name: str) -> OutputType:
    name = name.strip()
    if name in ALIASES:
        return ALIASES[name]
    try:
        return OutputType(name)
    except ValueError:
        raise ConfigError(f"Unknown output type: {name!r}") from None


class DocumentationPipeline:
    """
    Runs every requested generator and writes its file into the output directory.
    One generator failing does not stop the others.
    """

    def __init__(self, config: MapperConfig):
        self.config = config

    def resolve_outputs(self, only: Iterable[str] = ()) -> List[OutputType]:
        requested = {parse_output_type(name) for name in only if name.strip()}
        if not requested:
            requested = {t for t in PIPELINE_ORDER if self._output_config(t).enabled}
        return [t for t in PIPELINE_ORDER if t in requested]

    def run(self, request: DocumentationRequest) -> DocumentationSummary:
        summary = DocumentationSummary()
        outputs = self.resolve_outputs(request.only)

        request.output_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"Documenting {request.root_path} -> {request.output_dir} ({', '.join(t.value for t in outputs)})")

        for output_type in outputs:
            try:
                path = self._generate(output_type, request)
                summary.written[output_type] = path
                logger.info(f"Generated {output_type.value} at {path}")
            except (NotFoundError, WalkPermissionError):
                # The root itself became unusable: nothing else can succeed
                raise
            except Exception as e:
                error_msg = f"Failed to generate {output_type.value}: {e}"
                logger.error(error_msg)
                summary.errors.append(error_msg)

        logger.info(f"Documentation complete. Wrote {len(summary.written)}/{len(outputs)} outputs.")
        return summary

    def _generate(self, output_type: OutputType, request: DocumentationRequest) -> Path:
        if output_type == OutputType.METADATA_JSON:
            return save_metadata(request.root_path, request.output_dir, self.config)

        content = MARKDOWN_GENERATORS[output_type](request.root_path, self.config)
        path = request.output_dir / self._output_config(output_type).filename
        path.write_text(content, encoding="utf-8")
        return path

    def _output_config(self, output_type: OutputType):
        return getattr(self.config.output, output_type.value)
