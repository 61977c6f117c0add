"""Duplicate identifier checks."""
from __future__ import annotations

import logging
import re
import warnings

import pandas as pd

from surveyqa.check_func import check, has_column_matching
from surveyqa.dataset import check_dataset, require_columns
from surveyqa.issues import IssueRecord, empty_issue_table, issue_table

log = logging.getLogger("surveyqa.checks.duplicates")

UUID_PATTERN = re.compile("uuid", re.IGNORECASE)


def find_duplicates(data, column: str) -> pd.DataFrame:
    """Flag every repeat of a value already seen earlier in ``column``.

    The first occurrence of a value is not reported, each later one is.
    """
    df = check_dataset(data)
    require_columns(df, [column], 'find_duplicates')

    ser = df[column]
    positions = ser.duplicated().to_numpy().nonzero()[0]
    log.debug("find_duplicates: %d repeats in %r", len(positions), column)
    return issue_table(
        IssueRecord(
            row_index=int(pos),
            value=str(ser.iloc[pos]),
            variable=str(column),
            issue_type=f"duplicate in {column}",
        )
        for pos in positions
    )


def find_uuid_column(df: pd.DataFrame):
    """First column whose name contains "uuid", or None."""
    for col in df.columns:
        if UUID_PATTERN.search(str(col)):
            return col
    return None


@check(applies=has_column_matching(UUID_PATTERN))
def find_duplicates_uuid(data) -> pd.DataFrame:
    """Find the uuid column by name, then flag duplicates in it.

    Use ``find_duplicates`` directly when the id column is not named uuid.
    """
    df = check_dataset(data)
    uuid_col = find_uuid_column(df)
    if uuid_col is None:
        warnings.warn(
            "Could not find the uuid automatically in the dataset. Please "
            "provide the name of the uuid column to find_duplicates()",
            stacklevel=2,
        )
        return empty_issue_table()
    return find_duplicates(df, uuid_col)
