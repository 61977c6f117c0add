from .duplicates import find_duplicates, find_duplicates_uuid
from .duration import check_time
from .other_responses import find_other_responses
from .sensitive import sensitive_columns

__all__ = [
    "find_duplicates",
    "find_duplicates_uuid",
    "find_other_responses",
    "sensitive_columns",
    "check_time",
]
