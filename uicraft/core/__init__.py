# uicraft/core/__init__.py
"""
Core module - configuration, shared types, exceptions and the component whitelist.
"""
from .config import settings
from .exceptions import (
    UICraftError,
    ConfigurationError,
    GenerationError,
    LLMError,
    ProviderError,
    PlanParseError,
    PersistenceError,
)
from .types import (
    Plan,
    Mode,
    detect_mode,
    EDIT_THRESHOLD,
    GenerationRequest,
    GenerationResult,
)
from .whitelist import ComponentSpec, ComponentWhitelist, DEFAULT_WHITELIST, load_whitelist

__all__ = [
    # Config
    "settings",
    # Exceptions
    "UICraftError",
    "ConfigurationError",
    "GenerationError",
    "LLMError",
    "ProviderError",
    "PlanParseError",
    "PersistenceError",
    # Types
    "Plan",
    "Mode",
    "detect_mode",
    "EDIT_THRESHOLD",
    "GenerationRequest",
    "GenerationResult",
    # Whitelist
    "ComponentSpec",
    "ComponentWhitelist",
    "DEFAULT_WHITELIST",
    "load_whitelist",
]
