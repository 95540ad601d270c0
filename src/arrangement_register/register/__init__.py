"""
Arrangement register - the owning collection.

This module provides:
- ArrangementRegister: Insertion, queries and place/type grouping
- within_same_date_window: The numeric-window date match
"""

from arrangement_register.register.register import (
    ArrangementRegister,
    within_same_date_window,
)

__all__ = [
    "ArrangementRegister",
    "within_same_date_window",
]
