# uicraft/orchestration/__init__.py
"""
Orchestration module - the generation pipeline.
"""
from .orchestrator import GenerationOrchestrator, generate, get_orchestrator
from .sanitizer import sanitize_code
from .state import RunState, RunTrace

__all__ = [
    "GenerationOrchestrator",
    "generate",
    "get_orchestrator",
    "sanitize_code",
    "RunState",
    "RunTrace",
]
