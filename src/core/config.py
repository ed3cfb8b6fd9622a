# core/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

logger = logging.getLogger(__name__)

ENV_CATALOG = "PLAYLIST_VIEW_CATALOG"
ENV_LOG_LEVEL = "PLAYLIST_VIEW_LOG_LEVEL"
ENV_IMAGE_TIMEOUT = "PLAYLIST_VIEW_IMAGE_TIMEOUT"
ENV_USER_AGENT = "PLAYLIST_VIEW_USER_AGENT"
ENV_OFFLINE = "PLAYLIST_VIEW_OFFLINE"

DEFAULT_USER_AGENT = "pyplaylistview/0.1"
DEFAULT_IMAGE_TIMEOUT_S = 15.0


@dataclass(frozen=True)
class Settings:
    catalog_path: str | None = None
    log_level: str = "INFO"
    image_timeout_s: float = DEFAULT_IMAGE_TIMEOUT_S
    user_agent: str = DEFAULT_USER_AGENT
    offline: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ

        timeout = DEFAULT_IMAGE_TIMEOUT_S
        raw_timeout = env.get(ENV_IMAGE_TIMEOUT)
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
                if timeout <= 0:
                    raise ValueError("timeout must be positive")
            except ValueError:
                logger.warning("Ignoring %s=%r, using %ss", ENV_IMAGE_TIMEOUT, raw_timeout, DEFAULT_IMAGE_TIMEOUT_S)
                timeout = DEFAULT_IMAGE_TIMEOUT_S

        level = (env.get(ENV_LOG_LEVEL) or "INFO").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            logger.warning("Unknown log level %r, using INFO", level)
            level = "INFO"

        return cls(
            catalog_path=env.get(ENV_CATALOG) or None,
            log_level=level,
            image_timeout_s=timeout,
            user_agent=env.get(ENV_USER_AGENT) or DEFAULT_USER_AGENT,
            offline=env.get(ENV_OFFLINE) == "1",
        )
