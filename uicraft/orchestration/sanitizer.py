# uicraft/orchestration/sanitizer.py
"""
Post-process raw generated text into embeddable component code.

Two passes:
1. Strip markdown code fences wherever they appear.
2. Line filter: drop any line that declares a binding other than the App
   component. A line is dropped if it contains `const` and does not also
   contain `const App`. Everything else passes through untouched.

This is a textual heuristic, not a parser. Known limitations:
- `const` inside a string literal or inside the App body drops that line too
- multi-line illegal declarations lose only their first line
"""
import re

from uicraft.core.logging import log
from uicraft.llm.prompts.generator import APP_BINDING


BINDING_KEYWORD = "const"

FENCE_PATTERN = re.compile(r"```(?:javascript|typescript|jsx|tsx|json|js|ts)?")


def strip_fences(text: str) -> str:
    # Removing a fence can butt stray backticks together into a new one
    previous = None
    while previous != text:
        previous = text
        text = FENCE_PATTERN.sub("", text)
    return text


def is_disallowed_binding(line: str) -> bool:
    return BINDING_KEYWORD in line and APP_BINDING not in line


def sanitize_code(raw_text: str) -> str:
    """
    Clean generated code. Never raises; may return an empty string.
    """
    if not raw_text:
        return ""

    kept = []
    dropped = 0
    for line in strip_fences(raw_text).split("\n"):
        if is_disallowed_binding(line):
            dropped += 1
            continue
        kept.append(line)

    if dropped:
        log("SANITIZER", f"Dropped {dropped} disallowed declaration line(s)")

    return "\n".join(kept).strip()
