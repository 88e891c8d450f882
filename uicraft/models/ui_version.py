from datetime import datetime, timezone
from typing import Any
from beanie import Document
from pydantic import Field


class UIVersion(Document):
    prompt: str
    plan: Any = None
    generated_code: str = ""
    explanation: str = ""
    provider: str = ""
    version: int = 1
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Settings:
        name = "ui_versions"
