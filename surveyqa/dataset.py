"""Input validation for survey datasets.

Every check accepts a pandas DataFrame (or a polars DataFrame, which is
converted) and calls ``check_dataset`` before touching it.  Anything that
is not tabular is a precondition failure and raises immediately.
"""
from __future__ import annotations

import logging
from typing import Any

import pandas as pd

log = logging.getLogger("surveyqa.dataset")


class DatasetError(TypeError):
    """The input is not a usable tabular dataset."""
    pass


class DuplicateColumnsException(DatasetError):
    pass


class MissingColumnError(KeyError):
    """A check needs a column the dataset does not have."""

    def __init__(self, column: str, check_name: str):
        self.column = column
        self.check_name = check_name
        super().__init__(
            f"{check_name} needs a column called {column!r}, "
            f"but the dataset has no such column"
        )

    def __str__(self):
        return self.args[0]


def _is_polars_df(data: Any) -> bool:
    try:
        import polars as pl
        return isinstance(data, pl.DataFrame)
    except ImportError:
        return False


def check_dataset(data: Any) -> pd.DataFrame:
    """Return ``data`` as a pandas DataFrame, or raise ``DatasetError``.

    Polars frames are converted with ``to_pandas()``.  Column names must be
    unique, since issue records refer to columns by name.
    """
    if _is_polars_df(data):
        log.debug("converting polars DataFrame with %d columns", len(data.columns))
        data = data.to_pandas()
    if not isinstance(data, pd.DataFrame):
        raise DatasetError(
            f"first input must be a DataFrame, got {type(data).__name__} instead"
        )
    if not data.columns.is_unique:
        dupes = sorted({str(c) for c in data.columns[data.columns.duplicated()]})
        raise DuplicateColumnsException(
            f"Your dataframe has duplicate columns {dupes}. "
            "Issue records require distinct column names"
        )
    return data


def require_columns(df: pd.DataFrame, columns, check_name: str) -> None:
    for col in columns:
        if col not in df.columns:
            raise MissingColumnError(col, check_name)
