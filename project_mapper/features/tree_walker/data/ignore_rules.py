import logging
import re
from typing import List, Pattern, Tuple

from project_mapper.core.common.errors import MalformedPatternError
from ..domain.models import IgnorePolicy

logger = logging.getLogger(__name__)


def glob_to_regex(pattern: str) -> Pattern:
    """
    Compiles an ignore glob: '.' is literal, '*' matches any substring,
    anything else keeps its regex meaning. Matches are anchored.
    """
    body = pattern.replace(".", r"\.").replace("*", ".*")
    try:
        return re.compile(f"^{body}$")
    except re.error as e:
        raise MalformedPatternError(pattern, str(e)) from e


class IgnoreRules:
    """
    Central logic for what entries the walker should skip.
    Built once per walk from an immutable IgnorePolicy.
    """

    def __init__(self, policy: IgnorePolicy):
        self.policy = policy
        self.errors: List[MalformedPatternError] = []
        self._compiled: Tuple[Pattern, ...] = self._compile(policy.patterns)

    def _compile(self, patterns) -> Tuple[Pattern, ...]:
        compiled = []
        for pattern in patterns:
            try:
                compiled.append(glob_to_regex(pattern))
            except MalformedPatternError as e:
                logger.warning(f"Skipping ignore pattern: {e}")
                self.errors.append(e)
        return tuple(compiled)

    def should_ignore(self, name: str, is_dir: bool, relative_path: str) -> bool:
        """
        Returns True if the file/folder should be skipped.
        """
        # 1. Exact name matches, picked by entry kind
        literals = self.policy.directories if is_dir else self.policy.files
        if name in literals:
            return True

        # 2. Patterns against the bare name or the relative path
        return any(
            regex.match(name) or regex.match(relative_path)
            for regex in self._compiled
        )
