# File: project_mapper/core/config/settings.py

import logging
import os
from pathlib import Path


class Settings:
    # --- Project Config ---
    CONFIG_FILENAME: str = os.getenv("PROJECT_MAPPER_CONFIG", ".project-mapper.json")
    OUTPUT_DIR: Path = Path(os.getenv("PROJECT_MAPPER_OUTPUT_DIR", "project-docs"))

    # --- Logging ---
    LOG_LEVEL_NAME: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def LOG_LEVEL(self) -> int:
        return getattr(logging, self.LOG_LEVEL_NAME, logging.INFO)

    def config_path(self, root: Path) -> Path:
        """Resolves the project config file relative to the mapped root."""
        path = Path(self.CONFIG_FILENAME)
        return path if path.is_absolute() else root / path


def configure_logging(level: int = None) -> None:
    """Sets up root logging once for scripts and notebooks."""
    logging.basicConfig(
        level=level if level is not None else settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


settings = Settings()
