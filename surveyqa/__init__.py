"""Quality checks for survey datasets.

Every check takes a DataFrame and returns an IssueTable, a DataFrame with
the columns ``row_index, value, variable, has_issue, issue_type``.
"""
from .check_func import CheckFunc, check, has_columns
from .checks import (
    check_time, find_duplicates, find_duplicates_uuid, find_other_responses,
    sensitive_columns,
)
from .dataset import DatasetError, DuplicateColumnsException, MissingColumnError, check_dataset
from .issues import (
    ISSUE_COLUMNS, IssueRecord, IssueSchemaError, concat_issue_tables,
    empty_issue_table, issue_table,
)
from .outliers import OutlierCheck, find_outliers
from .registry import DEFAULT_CHECKS, CheckRegistry

__version__ = "0.1.0"

__all__ = [
    "CheckFunc",
    "check",
    "has_columns",
    "CheckRegistry",
    "DEFAULT_CHECKS",
    "OutlierCheck",
    "find_outliers",
    "find_duplicates",
    "find_duplicates_uuid",
    "find_other_responses",
    "sensitive_columns",
    "check_time",
    "IssueRecord",
    "ISSUE_COLUMNS",
    "IssueSchemaError",
    "issue_table",
    "empty_issue_table",
    "concat_issue_tables",
    "check_dataset",
    "DatasetError",
    "DuplicateColumnsException",
    "MissingColumnError",
]
