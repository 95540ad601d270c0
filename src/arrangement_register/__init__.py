"""
In-memory register of calendar events ("arrangements").

Add events, look them up by place, date or time window, and group them
by place and type in chronological order.
"""

from arrangement_register.models import Arrangement
from arrangement_register.register import ArrangementRegister

__all__ = [
    "Arrangement",
    "ArrangementRegister",
]
