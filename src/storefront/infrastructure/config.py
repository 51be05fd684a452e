"""Runtime settings, read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_DEFAULT_LOG_LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    environment: str = "development"
    log_level: str = "DEBUG"
    smtp_host: str | None = None
    smtp_port: int = 587
    smtp_user: str | None = None
    smtp_password: str | None = None
    smtp_sender: str | None = None
    telegram_bot_token: str | None = None
    telegram_chat_id: str | None = None

    @property
    def email_enabled(self) -> bool:
        return bool(self.smtp_host)

    @property
    def telegram_enabled(self) -> bool:
        return bool(self.telegram_bot_token and self.telegram_chat_id)

    @staticmethod
    def from_env() -> Settings:
        env = os.getenv("STOREFRONT_ENV", "development").lower()
        data_dir = os.getenv("STOREFRONT_DATA_DIR")
        return Settings(
            data_dir=Path(data_dir) if data_dir else _DEFAULT_DATA_DIR,
            environment=env,
            log_level=os.getenv("LOG_LEVEL", _DEFAULT_LOG_LEVELS.get(env, "INFO")).upper(),
            smtp_host=os.getenv("SMTP_HOST") or None,
            smtp_port=int(os.getenv("SMTP_PORT", "587")),
            smtp_user=os.getenv("SMTP_USER") or None,
            smtp_password=os.getenv("SMTP_PASS") or None,
            smtp_sender=os.getenv("SMTP_SENDER") or os.getenv("SMTP_USER") or None,
            telegram_bot_token=os.getenv("TELEGRAM_BOT_TOKEN") or None,
            telegram_chat_id=os.getenv("TELEGRAM_CHAT_ID") or None,
        )
