# uicraft/core/types.py
"""
Shared types for one generation run.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any


# Any JSON value the planner returns. Forwarded as-is, never walked.
Plan = Any

EDIT_THRESHOLD = 100


class Mode(str, Enum):
    NEW = "new"
    EDIT = "edit"


def detect_mode(current_code: str, threshold: int = EDIT_THRESHOLD) -> Mode:
    """
    Edit mode when there is a real prior UI to preserve.

    Heuristic only: currentCode whose stripped length exceeds the threshold.
    """
    if current_code and len(current_code.strip()) > threshold:
        return Mode.EDIT
    return Mode.NEW


@dataclass(frozen=True)
class GenerationRequest:
    prompt: str
    current_code: str = ""


@dataclass(frozen=True)
class GenerationResult:
    plan: Plan
    generated_code: str
    explanation: str
    provider: str = ""
