from dataclasses import dataclass, field
from typing import Dict, List, Optional

@dataclass
class PackageInfo:
    """
    The parts of a package.json the generators care about.
    """
    path: str                     # relative path of the package.json
    name: str                     # "name" field, or the containing directory
    version: Optional[str] = None
    dependencies: Dict[str, str] = field(default_factory=dict)
    dev_dependencies: Dict[str, str] = field(default_factory=dict)
    peer_dependencies: Dict[str, str] = field(default_factory=dict)
    workspaces: List[str] = field(default_factory=list)

    @property
    def directory(self) -> str:
        head, sep, _ = self.path.rpartition("/")
        return head if sep else "."
