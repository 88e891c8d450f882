# uicraft/llm/__init__.py
"""
LLM module - Unified interface for the generation providers.
"""
from .adapter import ProviderAdapter, build_adapters, create_adapter, classify_failure

__all__ = ["ProviderAdapter", "build_adapters", "create_adapter", "classify_failure"]
