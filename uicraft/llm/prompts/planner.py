# uicraft/llm/prompts/planner.py
"""
Planner prompts - turn the user's intent into a JSON layout plan.

EDIT mode carries the current code so the plan keeps everything the new
intent does not touch. NEW mode asks for a fresh plan.
"""
from uicraft.core.types import Mode
from uicraft.core.whitelist import ComponentWhitelist


PLANNER_EDIT_PROMPT = """You are a UI Architect. The user wants to MODIFY this existing React code:
---
{current_code}
---
NEW INTENT: "{user_prompt}"

TASK: Update the structural JSON layout plan.
1. KEEP all existing components that weren't specifically asked to be removed.
   Preserve everything not targeted by the new intent.
2. Add/Remove/Modify ONLY what is requested.
3. Use ONLY whitelist: {whitelist}.
4. Respond with a single JSON object and nothing else."""


PLANNER_NEW_PROMPT = """You are a UI Architect. Create a NEW JSON layout plan for: "{user_prompt}".
Use ONLY: {whitelist}.
Respond with a single JSON object and nothing else."""


def build_planner_prompt(
    user_prompt: str,
    current_code: str,
    mode: Mode,
    whitelist: ComponentWhitelist,
) -> str:
    """Build the planner prompt for the detected mode."""
    if mode is Mode.EDIT:
        return PLANNER_EDIT_PROMPT.format(
            current_code=current_code,
            user_prompt=user_prompt,
            whitelist=whitelist.to_json(),
        )
    return PLANNER_NEW_PROMPT.format(
        user_prompt=user_prompt,
        whitelist=whitelist.to_json(),
    )
