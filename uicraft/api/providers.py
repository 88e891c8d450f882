# uicraft/api/providers.py
"""
LLM provider status routes.
"""
from fastapi import APIRouter
from pydantic import BaseModel

from uicraft.core.config import settings

router = APIRouter(prefix="/api/providers", tags=["Providers"])


class ProviderInfo(BaseModel):
    name: str
    role: str
    model: str
    available: bool


def _describe(name: str, role: str) -> ProviderInfo:
    llm = settings.llm
    if name == "gemini":
        return ProviderInfo(name=name, role=role, model=llm.gemini_model, available=bool(llm.gemini_api_key))
    if name == "groq":
        return ProviderInfo(name=name, role=role, model=llm.groq_model, available=bool(llm.groq_api_key))
    return ProviderInfo(name=name, role=role, model="", available=False)


@router.get("")
async def list_providers():
    """Configured primary and fallback providers."""
    providers = [
        _describe(settings.llm.primary_provider, "primary"),
        _describe(settings.llm.fallback_provider, "fallback"),
    ]
    return {"providers": [p.model_dump() for p in providers]}
