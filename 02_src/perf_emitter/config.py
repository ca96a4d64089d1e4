"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"

_FALSE_VALUES = {"0", "false", "no", "off"}
_TRUE_VALUES = {"1", "true", "yes", "on"}


PathLike = Union[str, Path]


def parse_bool(value: str | None, default: bool) -> bool:
    """Interpret an environment flag, falling back to default when unset or unknown."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _FALSE_VALUES:
        return False
    if normalized in _TRUE_VALUES:
        return True
    return default


@dataclass
class Settings:
    """Runtime settings for the emitter."""

    log_level: str = "INFO"
    log_file: str = str(DEFAULT_LOG_PATH)
    # Construction-time event bus check; turned off in optimized deployments.
    validate_dependencies: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment."""
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=str(resolve_log_path(os.getenv("LOG_FILE"))),
            validate_dependencies=parse_bool(
                os.getenv("PERF_EMITTER_VALIDATE_DEPS"), default=True
            ),
        )


def resolve_log_path(env_value: PathLike | None = None) -> PathLike:
    """Resolve LOG_FILE to an absolute path."""
    if not env_value:
        return DEFAULT_LOG_PATH

    candidate = Path(env_value)
    return candidate if candidate.is_absolute() else PROJECT_ROOT / candidate


def load_settings(env_file: PathLike | None = None) -> Settings:
    """
    Load settings, reading a .env file first if one exists.

    Values already present in the process environment win over the file.

    Args:
        env_file: Path to the .env file. Defaults to <project root>/.env.

    Returns:
        Settings instance
    """
    load_dotenv(env_file or DEFAULT_ENV_FILE, override=False)
    return Settings.from_env()
