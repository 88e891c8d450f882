# uicraft/llm/providers/gemini.py
"""
Google Gemini provider implementation (primary).
"""
import asyncio
import json
from typing import Any, Dict, Optional

import aiohttp

from uicraft.core.exceptions import ProviderError
from uicraft.llm.adapter import ProviderAdapter, classify_failure, raise_for_status


PROVIDER = "gemini"
DEFAULT_MODEL = "gemini-2.0-flash"
API_URL = "https://generativelanguage.googleapis.com/v1beta/models"


def build_payload(prompt: str, json_mode: bool = False, temperature: float = 0.2) -> Dict[str, Any]:
    """Build the generateContent request body."""
    generation_config: Dict[str, Any] = {"temperature": temperature}
    if json_mode:
        generation_config["responseMimeType"] = "application/json"

    return {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": generation_config,
    }


def extract_text(body: str) -> str:
    """Pull the generated text out of a generateContent response body."""
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise ProviderError(PROVIDER, f"Failed to parse Gemini response: {e}")
    if not isinstance(data, dict):
        raise ProviderError(PROVIDER, "Unexpected Gemini response shape")

    candidates = data.get("candidates") or []
    if not candidates:
        # Blocked prompts come back 200 with promptFeedback and no candidates
        feedback = data.get("promptFeedback", {})
        raise ProviderError(PROVIDER, f"No candidates in response: {feedback}")

    parts = (candidates[0].get("content") or {}).get("parts") or []
    if not parts:
        reason = candidates[0].get("finishReason", "unknown")
        raise ProviderError(PROVIDER, f"No parts in response (finishReason={reason})")

    return "".join(part.get("text", "") for part in parts)


async def call(
    prompt: str,
    api_key: Optional[str],
    model: Optional[str] = None,
    json_mode: bool = False,
    temperature: float = 0.2,
    timeout: int = 120,
) -> str:
    """
    Call Google Gemini API.

    Args:
        json_mode: ask for application/json output (structured plan)

    Returns:
        The generated text

    Raises:
        ProviderError on API errors, classified quota / transient / other
    """
    if not api_key:
        raise ProviderError(PROVIDER, "GEMINI_API_KEY not configured")

    model = model or DEFAULT_MODEL
    url = f"{API_URL}/{model}:generateContent"
    headers = {"x-goog-api-key": api_key}
    payload = build_payload(prompt, json_mode=json_mode, temperature=temperature)

    try:
        async with aiohttp.ClientSession() as session:
            async with session.post(
                url,
                json=payload,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=timeout),
            ) as response:
                status = response.status
                body = await response.text()
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        message = str(e) or type(e).__name__
        raise ProviderError(PROVIDER, f"Request failed: {message}", kind=classify_failure(None, message))

    raise_for_status(PROVIDER, status, body)
    return extract_text(body)


class GeminiAdapter(ProviderAdapter):
    name = PROVIDER

    async def _complete(self, prompt: str, json_mode: bool) -> str:
        return await call(
            prompt,
            api_key=self.api_key,
            model=self.model,
            json_mode=json_mode,
            temperature=self.temperature,
            timeout=self.timeout,
        )
