from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def _default_env_file() -> str:
    # .env junto al repo; se puede sobreescribir con GFN_ENV_FILE.
    repo_root = Path(__file__).resolve().parents[1]
    return str(repo_root / ".env")


@dataclass(frozen=True)
class Settings:
    api_base_url: str
    user_agent: str
    http_timeout_seconds: float
    http_max_attempts: int

    # Zona horaria del "viewer". None = zona local del host.
    display_timezone: Optional[str]

    refresh_seconds: float
    log_level: str


def get_settings() -> Settings:
    # Load env file (if present) but still allow overriding via real environment variables.
    env_file = os.getenv("GFN_ENV_FILE", _default_env_file())
    if env_file and Path(env_file).exists():
        load_dotenv(env_file, override=False)

    api_base_url = os.getenv("GFN_API_BASE_URL", "https://api.printedwaste.com")
    user_agent = os.getenv("GFN_USER_AGENT", "PrintedWasteApp/1.0")
    http_timeout_seconds = float(os.getenv("GFN_HTTP_TIMEOUT", "10"))
    http_max_attempts = max(1, int(os.getenv("GFN_HTTP_MAX_ATTEMPTS", "3")))

    display_timezone = os.getenv("GFN_DISPLAY_TZ", "").strip() or None

    # Intervalo de refresco del modo --watch.
    refresh_seconds = float(os.getenv("GFN_REFRESH_SECONDS", "15"))
    log_level = os.getenv("GFN_LOG_LEVEL", "INFO").upper()

    return Settings(
        api_base_url=api_base_url.rstrip("/"),
        user_agent=user_agent,
        http_timeout_seconds=http_timeout_seconds,
        http_max_attempts=http_max_attempts,
        display_timezone=display_timezone,
        refresh_seconds=refresh_seconds,
        log_level=log_level,
    )
