# uicraft/llm/prompts/__init__.py
"""
Pipeline prompts - organized by stage.
"""
from .planner import build_planner_prompt, PLANNER_EDIT_PROMPT, PLANNER_NEW_PROMPT
from .generator import (
    build_generator_prompt,
    GENERATOR_PROMPT,
    APP_COMPONENT,
    APP_BINDING,
    RENDER_CALL,
    VARIANTS,
)
from .explainer import build_explainer_prompt, fallback_explanation

__all__ = [
    "build_planner_prompt", "PLANNER_EDIT_PROMPT", "PLANNER_NEW_PROMPT",
    "build_generator_prompt", "GENERATOR_PROMPT",
    "APP_COMPONENT", "APP_BINDING", "RENDER_CALL", "VARIANTS",
    "build_explainer_prompt", "fallback_explanation",
]
