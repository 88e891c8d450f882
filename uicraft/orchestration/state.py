# uicraft/orchestration/state.py
"""
Run states of one generation.

Happy path:
    START -> MODE_DETECTED -> PLAN_REQUESTED -> PLAN_RECEIVED -> CODE_REQUESTED
          -> CODE_RECEIVED -> EXPLANATION_REQUESTED -> DONE

Failure edges:
    any primary stage, quota error -> PRIMARY_FAILED -> (whole sequence on fallback)
    any fallback stage, any error  -> FALLBACK_FAILED -> ABORTED
    any primary stage, other error -> ABORTED
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List


class RunState(str, Enum):
    START = "start"
    MODE_DETECTED = "mode_detected"
    PLAN_REQUESTED = "plan_requested"
    PLAN_RECEIVED = "plan_received"
    CODE_REQUESTED = "code_requested"
    CODE_RECEIVED = "code_received"
    EXPLANATION_REQUESTED = "explanation_requested"
    DONE = "done"
    PRIMARY_FAILED = "primary_failed"
    FALLBACK_FAILED = "fallback_failed"
    ABORTED = "aborted"


TERMINAL_STATES = {RunState.DONE, RunState.ABORTED}


@dataclass
class RunTrace:
    """Per-run record of visited states. Owned by a single generate() call."""
    request_id: str
    states: List[RunState] = field(default_factory=lambda: [RunState.START])

    @property
    def current(self) -> RunState:
        return self.states[-1]

    def advance(self, state: RunState) -> None:
        if self.current in TERMINAL_STATES:
            raise RuntimeError(f"Run {self.request_id} already finished in {self.current.value}")
        self.states.append(state)
