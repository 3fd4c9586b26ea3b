import re
from typing import Dict, List, Optional

from ..domain.models import ConfigCategory


def _rx(*patterns: str):
    return tuple(re.compile(p, re.IGNORECASE) for p in patterns)


# Order matters: the first category whose patterns match a file name wins.
CATEGORIES: List[ConfigCategory] = [
    ConfigCategory("package.json", "package.json", _rx(r"^package\.json$")),
    ConfigCategory("dockerfile", "Dockerfile", _rx(r"^dockerfile$", r"^dockerfile\..+$")),
    ConfigCategory("docker-compose", "Docker Compose", _rx(r"^docker-compose\.ya?ml$", r"^docker-compose\..+\.ya?ml$")),
    ConfigCategory("tsconfig.json", "TypeScript Config", _rx(r"^tsconfig\.json$", r"^tsconfig\..+\.json$")),
    ConfigCategory("eslint", "ESLint Config", _rx(
        r"^\.eslintrc$", r"^\.eslintrc\.(json|js|yaml|yml)$", r"^eslint\.config\.(js|mjs|cjs)$",
    )),
    ConfigCategory("env.example", "Environment Variables", _rx(r"^\.env\.example$", r"^\.env\..+\.example$")),
    ConfigCategory("jest.config", "Jest Config", _rx(r"^jest\.config\.(js|ts|json)$")),
    ConfigCategory("vite.config", "Vite Config", _rx(r"^vite\.config\.(js|ts)$")),
    ConfigCategory("webpack.config", "Webpack Config", _rx(r"^webpack\.config\.(js|ts)$", r"^webpack\..+\.config\.(js|ts)$")),
    ConfigCategory("biome.json", "Biome Config", _rx(r"^biome\.json$")),
    ConfigCategory("pyproject.toml", "Python Project", _rx(r"^pyproject\.toml$")),
    ConfigCategory("requirements", "Python Requirements", _rx(r"^requirements.*\.txt$")),
    ConfigCategory("setup.cfg", "Setuptools Config", _rx(r"^setup\.cfg$")),
]


def enabled_categories(include_files: Dict[str, bool]) -> List[ConfigCategory]:
    """Categories switched on in the config, keeping table order."""
    return [c for c in CATEGORIES if include_files.get(c.toggle) is True]


def categorize(filename: str, categories: List[ConfigCategory]) -> Optional[ConfigCategory]:
    for category in categories:
        if category.matches(filename):
            return category
    return None
