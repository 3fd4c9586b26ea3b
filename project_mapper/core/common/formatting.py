# File: project_mapper/core/common/formatting.py

import re

_MERMAID_UNSAFE = re.compile(r"[^a-zA-Z0-9]")
_MARKDOWN_SPECIAL = re.compile(r"([|*_~`])")


def format_file_size(num_bytes: int) -> str:
    """Converts 1536 -> '1.5 KB'"""
    if num_bytes < 1024:
        return f"{num_bytes} B"
    if num_bytes < 1024 ** 2:
        return f"{num_bytes / 1024:.1f} KB"
    if num_bytes < 1024 ** 3:
        return f"{num_bytes / 1024 ** 2:.1f} MB"
    return f"{num_bytes / 1024 ** 3:.1f} GB"


def mermaid_id(name: str) -> str:
    """Mermaid node ids only accept word characters."""
    return _MERMAID_UNSAFE.sub("_", name)


def escape_markdown(text: str) -> str:
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)
