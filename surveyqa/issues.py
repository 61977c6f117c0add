"""The issue record contract shared by every check.

A check reports suspected data problems as an IssueTable: a DataFrame with
exactly the columns in ``ISSUE_COLUMNS``.  The schema is fixed even when a
table has zero rows, so tables from different checks can always be
concatenated.

Usage::

    from surveyqa.issues import IssueRecord, issue_table

    table = issue_table([
        IssueRecord(row_index=8, value='150', variable='age',
                    issue_type='normal distribution outlier'),
    ])
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

ISSUE_DTYPES: Dict[str, Any] = {
    'row_index': 'Int64',
    'value': 'object',
    'variable': 'object',
    'has_issue': 'bool',
    'issue_type': 'object',
}

ISSUE_COLUMNS = tuple(ISSUE_DTYPES.keys())


class IssueSchemaError(Exception):
    """A check returned something that does not follow the issue contract."""
    pass


@dataclass(frozen=True)
class IssueRecord:
    """One suspected data issue.

    Attributes:
        row_index: 0-based row position in the checked dataset, or None for
            column-level issues
        value: the offending value, stringified (None when there is none)
        variable: name of the column the issue belongs to
        issue_type: short, stable description of the issue
        has_issue: always True for emitted records
    """
    row_index: Optional[int]
    value: Optional[str]
    variable: str
    issue_type: str
    has_issue: bool = True

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        return {col: d[col] for col in ISSUE_COLUMNS}


def empty_issue_table() -> pd.DataFrame:
    """An IssueTable with zero rows and the fixed schema."""
    return pd.DataFrame(
        {col: pd.Series(dtype=dtype) for col, dtype in ISSUE_DTYPES.items()}
    )


def _conform(df: pd.DataFrame) -> pd.DataFrame:
    df = df.loc[:, list(ISSUE_COLUMNS)].astype(ISSUE_DTYPES)
    return df.reset_index(drop=True)


def issue_table(records: Iterable[IssueRecord]) -> pd.DataFrame:
    """Build an IssueTable from IssueRecords, preserving their order."""
    rows = [r.to_dict() for r in records]
    if not rows:
        return empty_issue_table()
    return _conform(pd.DataFrame(rows, columns=list(ISSUE_COLUMNS)))


def concat_issue_tables(tables: Iterable[pd.DataFrame]) -> pd.DataFrame:
    """Union IssueTables in order.  Empty tables contribute nothing."""
    non_empty: List[pd.DataFrame] = [t for t in tables if len(t) > 0]
    if not non_empty:
        return empty_issue_table()
    return _conform(pd.concat(non_empty, ignore_index=True))


def validate_issue_table(table: Any, check_name: str) -> pd.DataFrame:
    """Raise IssueSchemaError unless ``table`` has exactly the issue columns."""
    if not isinstance(table, pd.DataFrame):
        raise IssueSchemaError(
            f"check {check_name!r} returned {type(table).__name__}, expected a DataFrame"
        )
    if tuple(table.columns) != ISSUE_COLUMNS:
        raise IssueSchemaError(
            f"check {check_name!r} returned columns {list(table.columns)}, "
            f"expected {list(ISSUE_COLUMNS)}"
        )
    return table
