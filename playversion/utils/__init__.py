"""
Utility functions and helpers
"""

from .parsing import ParsedDocument, safe_text

__all__ = [
    "ParsedDocument",
    "safe_text"
]
