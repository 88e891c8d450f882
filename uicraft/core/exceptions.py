# uicraft/core/exceptions.py
"""
Custom exceptions for the application.
"""
from typing import Optional, Dict, Any, Literal


FailureKind = Literal["quota", "transient", "other"]


class UICraftError(Exception):
    """Base exception for all UICraft errors."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(UICraftError):
    """Static configuration (whitelist, credentials) is missing or malformed."""
    pass


class GenerationError(UICraftError):
    """The generation request cannot be acted on."""
    pass


class LLMError(UICraftError):
    """LLM provider error."""
    def __init__(self, provider: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            f"LLM error ({provider}): {message}",
            {"provider": provider, **(details or {})}
        )
        self.provider = provider


class ProviderError(LLMError):
    """
    The backing provider call itself failed.

    kind is one of:
    - "quota": rate limit / usage quota exhausted (the only fallback trigger)
    - "transient": network failure, timeout or 5xx
    - "other": anything else (bad request, auth, unreadable envelope)
    """
    def __init__(self, provider: str, message: str, kind: FailureKind = "other", status: Optional[int] = None):
        super().__init__(provider, message, {"kind": kind, "status": status})
        self.kind = kind
        self.status = status

    @property
    def is_quota(self) -> bool:
        return self.kind == "quota"


class PlanParseError(LLMError):
    """Structured-output body was not valid JSON."""
    def __init__(self, provider: str, raw: str, reason: str):
        super().__init__(
            provider,
            f"Plan is not valid JSON: {reason}",
            {"raw_preview": raw[:200]}
        )
        self.raw = raw


class PersistenceError(UICraftError):
    """Version history store is unavailable."""
    pass
