"""Board settings stored in the descriptor's front-matter."""

import logging
from typing import Any

logger = logging.getLogger(__name__)

BOARD_DEFAULTS = {
    "fallback-name": "untitled",
    "save-descriptor": True,
    "concurrency": 16,
}


def _python_key(key: str) -> str:
    """Convert a hyphenated settings key to Python-style (underscored)."""
    return key.replace("-", "_")


def _coerce_value(key: str, raw: Any) -> Any:
    """Type-coerce a settings value using the type of its default."""
    default = BOARD_DEFAULTS.get(key)
    if default is None or raw is None:
        return raw
    if isinstance(default, bool):
        if isinstance(raw, bool):
            return raw
        return str(raw).lower() in ("true", "yes", "1")
    if isinstance(default, int):
        value = int(raw)
        if value < 1:
            raise ValueError(f"{key} must be positive")
        return value
    return str(raw)


def read_settings(meta: dict | None) -> dict[str, Any]:
    """Build the settings dict for a board from its front-matter.

    Reads the ``settings`` mapping, converts hyphens to underscores,
    coerces known keys and fills in defaults for anything missing.
    Invalid values are logged and replaced by their default.
    """
    result = {_python_key(k): v for k, v in BOARD_DEFAULTS.items()}
    raw = (meta or {}).get("settings")
    if not isinstance(raw, dict):
        return result
    for key, value in raw.items():
        key = str(key)
        try:
            coerced = _coerce_value(key, value)
        except (TypeError, ValueError):
            logger.warning("ignoring invalid setting %s=%r", key, value)
            continue
        if coerced is not None:
            result[_python_key(key)] = coerced
    return result
