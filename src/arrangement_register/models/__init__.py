"""
Pydantic models for the arrangement register.

This module provides:
- Arrangement: A single calendar event
"""

from arrangement_register.models.arrangement import Arrangement

__all__ = [
    "Arrangement",
]
