from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_STATIC_DIR = Path(__file__).resolve().parent / "static"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="REPLYDESK_",
        env_file=(str(_BACKEND_DIR / ".env"), ".env", "backend/.env"),
        extra="ignore",
    )

    cors_origins: str = "http://localhost:5173,http://127.0.0.1:5173"
    static_dir: str = str(_STATIC_DIR)

    # Tone preselected by the form; unknown values fall back to "professional".
    default_tone: str = "professional"

    # How long the shell keeps its "Copied!" acknowledgment after a clipboard write.
    copy_feedback_seconds: float = 2.0


settings = Settings()
