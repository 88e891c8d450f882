# uicraft/core/config.py
"""
Application configuration - single source of truth for all settings.
"""
import os
from dataclasses import dataclass, field
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()


@dataclass
class LLMSettings:
    """LLM provider configuration."""
    primary_provider: str = field(default_factory=lambda: os.getenv("PRIMARY_LLM_PROVIDER", "gemini"))
    fallback_provider: str = field(default_factory=lambda: os.getenv("FALLBACK_LLM_PROVIDER", "groq"))
    gemini_api_key: Optional[str] = field(default_factory=lambda: os.getenv("GEMINI_API_KEY"))
    gemini_model: str = field(default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-2.0-flash"))
    groq_api_key: Optional[str] = field(default_factory=lambda: os.getenv("GROQ_API_KEY"))
    groq_model: str = field(default_factory=lambda: os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile"))
    request_timeout: int = field(default_factory=lambda: int(os.getenv("LLM_TIMEOUT_SECONDS", "120")))
    temperature: float = 0.2


@dataclass
class GenerationSettings:
    """Generation pipeline configuration."""
    # currentCode longer than this (after strip) switches the run to edit mode
    edit_threshold: int = 100
    whitelist_path: Optional[str] = field(default_factory=lambda: os.getenv("UI_WHITELIST_PATH"))
    generation_timeout: int = field(default_factory=lambda: int(os.getenv("GENERATION_TIMEOUT_SECONDS", "300")))


@dataclass
class DatabaseSettings:
    """MongoDB configuration."""
    mongodb_url: str = field(default_factory=lambda: os.getenv("MONGODB_URL", "mongodb://localhost:27017"))
    database_name: str = field(default_factory=lambda: os.getenv("MONGODB_DB", "uicraft"))


def _split_origins(raw: str) -> List[str]:
    if raw.strip() == "*":
        return ["*"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    """Main application settings."""
    llm: LLMSettings = field(default_factory=LLMSettings)
    generation: GenerationSettings = field(default_factory=GenerationSettings)
    db: DatabaseSettings = field(default_factory=DatabaseSettings)
    port: int = field(default_factory=lambda: int(os.getenv("PORT", 5000)))
    debug: bool = field(default_factory=lambda: os.getenv("UICRAFT_DEBUG", "false").lower() == "true")
    cors_origins: List[str] = field(
        default_factory=lambda: _split_origins(os.getenv("CORS_ORIGINS", "http://localhost:5173"))
    )
    rate_limit: str = field(default_factory=lambda: os.getenv("RATE_LIMIT", "30/minute"))


# Singleton instance
settings = Settings()
