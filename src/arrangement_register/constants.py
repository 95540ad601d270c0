"""
Constants for the arrangement register.

No magic numbers - the numeric date window and schema tags live here.
"""

from typing import Literal

# Two dates count as "the same date" when their raw integer encodings differ
# by at most this much. This is a window over the encoded integers, not a
# calendar comparison.
SAME_DATE_WINDOW = 2359

# Schema tag written into exported views
SchemaVersion = Literal["arrangement-register/v1"]
SCHEMA_VERSION: SchemaVersion = "arrangement-register/v1"


class LogMessages:
    """Standardized log messages."""

    ARRANGEMENT_ADDED = "Added arrangement {id} ({place}/{type}) at {date} {time}"
    QUERY_RESULT = "{query} matched {count} of {total} arrangements"
