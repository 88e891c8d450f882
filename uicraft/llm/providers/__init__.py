# uicraft/llm/providers/__init__.py
"""
LLM Providers - Individual provider implementations.
"""
from . import gemini, groq

__all__ = ["gemini", "groq"]
