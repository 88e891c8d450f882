# uicraft/llm/providers/groq.py
"""
Groq provider implementation (fallback).

Groq speaks the OpenAI chat-completions dialect.
"""
import asyncio
import json
from typing import Any, Dict, Optional

import aiohttp

from uicraft.core.exceptions import ProviderError
from uicraft.llm.adapter import ProviderAdapter, classify_failure, raise_for_status


PROVIDER = "groq"
DEFAULT_MODEL = "llama-3.3-70b-versatile"
API_URL = "https://api.groq.com/openai/v1/chat/completions"


def build_payload(
    prompt: str,
    model: str,
    json_mode: bool = False,
    temperature: float = 0.2,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "model": model,
        "messages": [{"role": "user", "content": prompt}],
        "temperature": temperature,
    }
    if json_mode:
        payload["response_format"] = {"type": "json_object"}
    return payload


def extract_text(body: str) -> str:
    try:
        data = json.loads(body)
        content = data["choices"][0]["message"]["content"]
    except (json.JSONDecodeError, KeyError, IndexError, TypeError) as e:
        raise ProviderError(PROVIDER, f"Failed to parse Groq response: {e}")
    return content or ""


async def call(
    prompt: str,
    api_key: Optional[str],
    model: Optional[str] = None,
    json_mode: bool = False,
    temperature: float = 0.2,
    timeout: int = 120,
) -> str:
    """
    Call Groq chat completions API.

    Returns:
        The generated text

    Raises:
        ProviderError on API errors, classified quota / transient / other
    """
    if not api_key:
        raise ProviderError(PROVIDER, "GROQ_API_KEY not configured")

    payload = build_payload(prompt, model or DEFAULT_MODEL, json_mode=json_mode, temperature=temperature)
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }

    try:
        async with aiohttp.ClientSession() as session:
            async with session.post(
                API_URL,
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


class GroqAdapter(ProviderAdapter):
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
