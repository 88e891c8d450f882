# uicraft/llm/prompts/explainer.py
"""
Explanation prompts.

The primary path asks the provider; the fallback path uses a fixed sentence
so a degraded run costs no extra provider call.
"""

EXPLAINER_PROMPT = "Explain why you made these specific changes for: {user_prompt}"

FALLBACK_EXPLANATION = "I updated the UI components to match your request: {user_prompt}."


def build_explainer_prompt(user_prompt: str) -> str:
    return EXPLAINER_PROMPT.format(user_prompt=user_prompt)


def fallback_explanation(user_prompt: str) -> str:
    return FALLBACK_EXPLANATION.format(user_prompt=user_prompt)
