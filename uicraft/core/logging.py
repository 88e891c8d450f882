import sys
import os
from datetime import datetime
from typing import Any, Optional


# ═══════════════════════════════════════════════════════════════════════════════
# LOG FILTERING
# ═══════════════════════════════════════════════════════════════════════════════
# INFO_SCOPES are always shown, DEBUG_SCOPES only with UICRAFT_DEBUG=true.
# Unknown scopes are dropped.

INFO_SCOPES = {
    "ORCHESTRATOR",  # Run lifecycle and fallback decisions
    "LLM",           # Provider boundary
    "API",           # HTTP layer
    "DB",            # Persistence
}

# DEBUG-only scopes (hidden by default)
DEBUG_SCOPES = {
    "PROMPT",
    "SANITIZER",
}

DEBUG_MODE = os.getenv("UICRAFT_DEBUG", "false").lower() == "true"


def is_enabled(scope: str) -> bool:
    if scope in INFO_SCOPES:
        return True
    return DEBUG_MODE and scope in DEBUG_SCOPES


def _prefix(scope: str, request_id: Optional[str]) -> str:
    timestamp = datetime.now().strftime("%H:%M:%S")
    prefix = f"[{timestamp}] [{scope}]"
    if request_id:
        prefix += f" [{request_id[:8]}]"
    return prefix


def log(scope: str, message: str, data: Any = None, request_id: Optional[str] = None) -> None:
    """
    Unified logging function for UICraft.

    Only INFO_SCOPES are shown by default.
    Set UICRAFT_DEBUG=true to add DEBUG_SCOPES.
    """
    if not is_enabled(scope):
        return

    print(f"{_prefix(scope, request_id)} {message}")

    if data:
        print(f"  Data: {data}")

    sys.stdout.flush()


def log_section(scope: str, title: str, request_id: Optional[str] = None) -> None:
    """
    Log a section header with visual separator.
    """
    print(f"\n{'='*60}")
    print(f"{_prefix(scope, request_id)} {title}")
    print(f"{'='*60}")
    sys.stdout.flush()
