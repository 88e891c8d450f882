"""
UICraft - natural-language prompts to React UI layouts and component code.
"""

__version__ = "1.0.0"
