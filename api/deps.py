"""
FastAPI dependency providers.

Provides the engine configuration singleton so it is built once from the
environment and reused across requests.
"""

import logging
import os

from dotenv import load_dotenv

from core.config import DEFAULT_ENGINE_CONFIG, EngineConfig

logger = logging.getLogger(__name__)

_engine_config: EngineConfig | None = None


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def get_engine_config() -> EngineConfig:
    """
    Return a cached ``EngineConfig`` singleton.

    Reads ``PRACTICE_PITCH_LOW`` and ``PRACTICE_PITCH_HIGH`` (``.env`` is
    honoured) on first call. Unset variables keep the default window.
    """
    global _engine_config  # noqa: PLW0603
    if _engine_config is None:
        load_dotenv()
        _engine_config = EngineConfig(
            pitch_low=_env_int("PRACTICE_PITCH_LOW", DEFAULT_ENGINE_CONFIG.pitch_low),
            pitch_high=_env_int("PRACTICE_PITCH_HIGH", DEFAULT_ENGINE_CONFIG.pitch_high),
        )
        logger.info(
            "Engine pitch window [%d, %d]",
            _engine_config.pitch_low,
            _engine_config.pitch_high,
        )
    return _engine_config


def reset_engine_config() -> None:
    """Drop the cached config so the next call re-reads the environment."""
    global _engine_config  # noqa: PLW0603
    _engine_config = None
