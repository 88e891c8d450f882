# uicraft/api/__init__.py
"""
API module - All route handlers.
"""
from . import health, generate, versions, providers

__all__ = [
    "health",
    "generate",
    "versions",
    "providers",
]
