# uicraft/llm/adapter.py
"""
Provider adapter contract - one interface over unrelated provider backends.

Every adapter offers the same two capabilities:
- produce_structured_plan: JSON-mode request, body parsed as JSON
- produce_text: free-form text request, body returned raw

Request framing (auth, model ids, JSON-mode flags) stays inside each
provider module. Failures surface as ProviderError with a kind, and only
kind="quota" is meaningful to the orchestrator's fallback decision.

NOTE: No retries here. A single attempt per call; the orchestrator owns the
one primary -> fallback substitution.
"""
import json
from abc import ABC, abstractmethod
from typing import Optional, Tuple, TYPE_CHECKING

from uicraft.core.exceptions import ConfigurationError, FailureKind, PlanParseError, ProviderError
from uicraft.core.logging import log
from uicraft.core.types import Plan

if TYPE_CHECKING:
    from uicraft.core.config import Settings


# Substrings that mark a usage-limit failure regardless of status code.
QUOTA_MARKERS = (
    "quota",
    "rate limit",
    "rate_limit",
    "resource_exhausted",
    "too many requests",
)


def classify_failure(status: Optional[int], message: str = "") -> FailureKind:
    """
    Classify a failed provider call.

    Args:
        status: HTTP status, or None when no response was received
        message: response body or exception text

    Returns:
        "quota" for rate-limit / quota exhaustion, "transient" for network
        failures and 5xx, "other" for everything else
    """
    lowered = (message or "").lower()
    if status == 429 or any(marker in lowered for marker in QUOTA_MARKERS):
        return "quota"
    # A bare status code only counts when there was no response to read it from
    if status is None and "429" in lowered:
        return "quota"
    if status is None or status >= 500:
        return "transient"
    return "other"


def raise_for_status(provider: str, status: int, body: str) -> None:
    """Raise a classified ProviderError for any non-200 response."""
    if status == 200:
        return

    kind = classify_failure(status, body)
    log("LLM", f"{provider} returned {status} ({kind}): {body[:300]}")
    raise ProviderError(provider, f"API error {status}: {body[:200]}", kind=kind, status=status)


def parse_plan(provider: str, raw: str) -> Plan:
    """Parse a structured-output body. Any JSON value is accepted."""
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        raise PlanParseError(provider, raw or "", str(e))


class ProviderAdapter(ABC):
    """
    Capability-uniform wrapper around one provider backend.

    Subclasses implement _complete(); the orchestrator only ever sees
    produce_structured_plan() and produce_text().
    """

    name: str = ""

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        temperature: float = 0.2,
        timeout: int = 120,
    ):
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.timeout = timeout

    @abstractmethod
    async def _complete(self, prompt: str, json_mode: bool) -> str:
        """Send one prompt and return the raw response text."""

    async def produce_structured_plan(self, prompt: str) -> Plan:
        raw = await self._complete(prompt, json_mode=True)
        return parse_plan(self.name, raw)

    async def produce_text(self, prompt: str) -> str:
        return await self._complete(prompt, json_mode=False)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self.model!r})"


def create_adapter(provider: str, settings: "Settings") -> ProviderAdapter:
    """Build an adapter for a provider name from explicit settings."""
    # Import here to avoid circular imports
    from .providers import gemini, groq

    llm = settings.llm
    if provider == "gemini":
        return gemini.GeminiAdapter(
            api_key=llm.gemini_api_key,
            model=llm.gemini_model,
            temperature=llm.temperature,
            timeout=llm.request_timeout,
        )
    if provider == "groq":
        return groq.GroqAdapter(
            api_key=llm.groq_api_key,
            model=llm.groq_model,
            temperature=llm.temperature,
            timeout=llm.request_timeout,
        )
    raise ConfigurationError(f"Unknown provider: {provider}")


def build_adapters(settings: "Settings") -> Tuple[ProviderAdapter, ProviderAdapter]:
    """Return (primary, fallback) adapters as configured."""
    primary = create_adapter(settings.llm.primary_provider, settings)
    fallback = create_adapter(settings.llm.fallback_provider, settings)
    return primary, fallback
