"""Environment-driven settings."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


DEFAULT_OUTPUT_DIR = "code-analysis"
DEFAULT_MAX_WORKERS = 1
DEFAULT_MAX_FILES = 5000
DEFAULT_LOG_LEVEL = "INFO"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid integer for %s: %r; using %d", name, raw, default)
        return default
    if value < 1:
        logger.warning("%s must be at least 1, got %d; using %d", name, value, default)
        return default
    return value


@dataclass
class AnalyzerConfig:
    """Settings shared by the CLI, the tools and the MCP server."""
    storage_path: Optional[str] = None      # None -> ~/.code-analysis/
    output_dir: str = DEFAULT_OUTPUT_DIR
    max_workers: int = DEFAULT_MAX_WORKERS
    max_files: int = DEFAULT_MAX_FILES
    log_level: str = DEFAULT_LOG_LEVEL
    ai_available: bool = False

    @classmethod
    def from_env(cls) -> "AnalyzerConfig":
        """Read settings from the environment.

        CODE_ANALYSIS_PATH, JCODESCAN_OUTPUT_DIR, JCODESCAN_MAX_WORKERS,
        JCODESCAN_MAX_FILES, JCODESCAN_LOG_LEVEL, ANTHROPIC_API_KEY.
        """
        return cls(
            storage_path=os.getenv("CODE_ANALYSIS_PATH") or None,
            output_dir=os.getenv("JCODESCAN_OUTPUT_DIR") or DEFAULT_OUTPUT_DIR,
            max_workers=_env_int("JCODESCAN_MAX_WORKERS", DEFAULT_MAX_WORKERS),
            max_files=_env_int("JCODESCAN_MAX_FILES", DEFAULT_MAX_FILES),
            log_level=(os.getenv("JCODESCAN_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
            ai_available=bool(os.getenv("ANTHROPIC_API_KEY")),
        )
