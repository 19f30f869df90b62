"""Project-level configuration and path helpers."""

from pathlib import Path
from typing import Union

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "logs"
DEFAULT_LOG_PATH = LOGS_DIR / "stream_tap.log"

DEFAULT_STREAM_TYPE = "regular"
DEFAULT_PREFIX = ""


PathLike = Union[str, Path]


def resolve_log_path(env_value: PathLike | None = None) -> Path:
    """Resolve STREAM_TAP_LOG_FILE to an absolute path."""
    if not env_value:
        return DEFAULT_LOG_PATH

    candidate = Path(env_value)
    return candidate if candidate.is_absolute() else PROJECT_ROOT / candidate
