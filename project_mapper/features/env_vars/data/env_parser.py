import re
from typing import List, Tuple

from ..domain.models import EnvVariable

_ASSIGNMENT = re.compile(r"^([^=]+)(?:=(.*))?$")
_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_.\-]*$")


def _split_value(raw: str) -> Tuple[str, str]:
    """
    Splits 'value # comment' and unquotes the value.
    Returns (value, inline_comment).
    """
    raw = raw.strip()
    if raw[:1] in ("'", '"'):
        end = raw.find(raw[0], 1)
        if end != -1:
            rest = raw[end + 1:].strip()
            comment = rest[1:].strip() if rest.startswith("#") else ""
            return raw[1:end], comment

    cut = raw.find(" #")
    if cut != -1:
        return raw[:cut].strip(), raw[cut + 2:].strip()
    return raw, ""


def _is_commented_assignment(line: str) -> bool:
    """'# API_KEY=' documents an optional variable, '# see a=b' does not."""
    if not line.startswith("#") or "=" not in line:
        return False
    name = line[1:].split("=", 1)[0].strip()
    return bool(_IDENTIFIER.match(name))


def _leading_comment(lines: List[str], index: int) -> str:
    """Joins the run of plain comment lines directly above lines[index]."""
    parts: List[str] = []
    cursor = index - 1
    while cursor >= 0:
        above = lines[cursor].strip()
        if not above.startswith("#") or _is_commented_assignment(above):
            break
        parts.insert(0, above[1:].strip())
        cursor -= 1
    return " ".join(p for p in parts if p)


def parse_env_file(content: str) -> List[EnvVariable]:
    lines = content.splitlines()
    variables: List[EnvVariable] = []

    for index, raw_line in enumerate(lines):
        line = raw_line.strip()
        if not line:
            continue

        if line.startswith("#"):
            if not _is_commented_assignment(line):
                continue
            line = line[1:].strip()

        if line.startswith("export "):
            line = line[len("export "):].strip()

        match = _ASSIGNMENT.match(line)
        if not match:
            continue

        value, inline_comment = _split_value(match.group(2) or "")
        description = _leading_comment(lines, index) or inline_comment

        variables.append(EnvVariable(
            name=match.group(1).strip(),
            value=value,
            description=description,
        ))

    return variables
