# uicraft/api/generate.py
"""
Generation route - runs the pipeline and stores the result as a new version.
"""
import asyncio
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from uicraft.core.config import settings
from uicraft.core.exceptions import GenerationError, LLMError
from uicraft.core.logging import log
from uicraft.db.versions import VersionRecord, VersionStore, get_version_store
from uicraft.orchestration import GenerationOrchestrator, get_orchestrator

router = APIRouter(prefix="/api", tags=["Generate"])


class GenerateRequest(BaseModel):
    prompt: str
    currentCode: Optional[str] = ""


@router.post("/generate", response_model=VersionRecord)
async def generate_ui(
    data: GenerateRequest,
    orchestrator: GenerationOrchestrator = Depends(get_orchestrator),
    store: VersionStore = Depends(get_version_store),
):
    """Generate (or edit) a UI from a prompt and persist it."""
    if not data.prompt.strip():
        raise HTTPException(status_code=400, detail="Prompt is required")

    # Storage is checked before any provider call
    store.ensure_available()

    timeout = settings.generation.generation_timeout
    try:
        result = await asyncio.wait_for(
            orchestrator.generate(data.prompt, data.currentCode or ""),
            timeout=timeout,
        )
    except asyncio.TimeoutError:
        log("API", f"Generation exceeded {timeout}s")
        raise HTTPException(status_code=504, detail=f"Generation timed out after {timeout}s")
    except GenerationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except LLMError as e:
        log("API", f"Generation failed: {e.message}")
        raise HTTPException(status_code=502, detail=e.message)

    return await store.save(data.prompt, result)
