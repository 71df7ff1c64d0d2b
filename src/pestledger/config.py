from __future__ import annotations

import logging
import os
from dataclasses import dataclass


logger = logging.getLogger(__name__)

DEFAULT_ADMIN = "admin"


@dataclass(frozen=True)
class Settings:
    """Process settings read from the environment.

    - PESTLEDGER_URL: attach to an existing server instead of starting one
    - PESTLEDGER_ADMIN: initial admin identity
    - PESTLEDGER_START_HEIGHT: initial logical height
    - PESTLEDGER_LOG_LEVEL: root log level name
    - PESTLEDGER_CORS_ORIGINS: comma-separated browser origins; CORS is off when empty
    """

    url: str = ""
    admin: str = DEFAULT_ADMIN
    start_height: int = 0
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = ()


def _start_height_from_env() -> int:
    raw_height = os.getenv("PESTLEDGER_START_HEIGHT", "0").strip() or "0"
    try:
        start_height = int(raw_height)
    except ValueError:
        logger.warning("Ignoring PESTLEDGER_START_HEIGHT=%r: not an integer; starting at 0", raw_height)
        return 0
    if start_height < 0:
        logger.warning("Ignoring PESTLEDGER_START_HEIGHT=%d: must be >= 0; starting at 0", start_height)
        return 0
    return start_height


def load_settings() -> Settings:
    origins = os.getenv("PESTLEDGER_CORS_ORIGINS", "")
    return Settings(
        url=os.getenv("PESTLEDGER_URL", "").strip(),
        admin=os.getenv("PESTLEDGER_ADMIN", DEFAULT_ADMIN).strip() or DEFAULT_ADMIN,
        start_height=_start_height_from_env(),
        log_level=os.getenv("PESTLEDGER_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
    )


def configure_logging(level: str | int = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
