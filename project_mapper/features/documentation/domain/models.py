from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

from project_mapper.core.common.enums import OutputType
from project_mapper.core.common.errors import NotFoundError

@dataclass(frozen=True)
class DocumentationRequest:
    """
    User intent to document a project directory.
    """
    root_path: Path
    output_dir: Path
    only: Tuple[str, ...] = ()  # empty: every output enabled in the config

    def __post_init__(self):
        if not self.root_path.exists():
            raise NotFoundError(f"Project root not found: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotFoundError(f"Project root is not a directory: {self.root_path}")

@dataclass
class DocumentationSummary:
    """
    Report returned after all requested outputs ran.
    """
    written: Dict[OutputType, Path] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
