# ===== Arquivo: utils/config.py =====
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
import os


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass
class Settings:
    # Lido uma única vez na subida do processo e injetado no app
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-1.5-flash"
    gemini_api_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    youtube_watch_url: str = "https://www.youtube.com/watch"
    metadata_timeout_seconds: float = 10.0
    generation_timeout_seconds: float = 60.0
    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @property
    def has_gemini_key(self) -> bool:
        return bool(self.gemini_api_key and self.gemini_api_key.strip())

    @property
    def gemini_generate_url(self) -> str:
        return f"{self.gemini_api_base_url.rstrip('/')}/models/{self.gemini_model}:generateContent"

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("CORS_ALLOW_ORIGINS", "*")
        return cls(
            # 'GeminiApiKey' mantido como alias do nome antigo de configuração
            gemini_api_key=os.getenv("GEMINI_API_KEY") or os.getenv("GeminiApiKey"),
            gemini_model=os.getenv("GEMINI_MODEL", "gemini-1.5-flash"),
            gemini_api_base_url=os.getenv(
                "GEMINI_API_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
            ),
            youtube_watch_url=os.getenv("YOUTUBE_WATCH_URL", "https://www.youtube.com/watch"),
            metadata_timeout_seconds=_env_float("METADATA_TIMEOUT_SECONDS", 10.0),
            generation_timeout_seconds=_env_float("GENERATION_TIMEOUT_SECONDS", 60.0),
            cors_allow_origins=[o.strip() for o in origins.split(",") if o.strip()] or ["*"],
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
