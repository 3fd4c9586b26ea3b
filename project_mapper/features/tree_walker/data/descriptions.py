import logging
import re
from typing import List, Optional, Pattern, Tuple

from project_mapper.core.common.errors import MalformedPatternError
from ..domain.models import DescriptionTable

logger = logging.getLogger(__name__)


class DescriptionLookup:
    """
    Resolves the ' # ...' annotation for a tree entry.
    Directories match by exact relative path, files by the first regex key
    found anywhere in the relative path.
    """

    def __init__(self, table: DescriptionTable):
        self.directories = dict(table.directories)
        self.errors: List[MalformedPatternError] = []
        self._file_patterns: List[Tuple[Pattern, str]] = []

        for key, text in table.file_patterns.items():
            try:
                self._file_patterns.append((re.compile(key), text))
            except re.error as e:
                error = MalformedPatternError(key, str(e))
                logger.warning(f"Skipping description pattern: {error}")
                self.errors.append(error)

    def describe(self, relative_path: str, is_dir: bool) -> Optional[str]:
        if is_dir:
            return self.directories.get(relative_path) or None

        for regex, text in self._file_patterns:
            if regex.search(relative_path):
                return text
        return None
