import re
from dataclasses import dataclass
from typing import Tuple, Pattern

@dataclass(frozen=True)
class ConfigCategory:
    """
    A family of well-known config files, switched on by one include_files key.
    """
    toggle: str                  # key under output.config_files.include_files
    name: str                    # e.g. "Docker Compose"
    patterns: Tuple[Pattern, ...]

    def matches(self, filename: str) -> bool:
        return any(p.match(filename) for p in self.patterns)

    @property
    def title(self) -> str:
        if self.name == "package.json":
            return "Package.json Files"
        return f"{self.name} Files"

    @property
    def anchor(self) -> str:
        """GitHub-style anchor of the category heading."""
        slug = re.sub(r"[^\w\- ]", "", self.title.lower())
        return slug.replace(" ", "-")
