"""OutlierCheck: outlier detection across every numeric column.

For each column, in dataset order:

  1. ``classify_column`` decides whether the column is numeric; other
     columns are skipped
  2. ``select`` runs every candidate model and keeps the one that flags
     the fewest rows
  3. the winning model's flagged rows become IssueRecords whose
     ``issue_type`` names the model ("normal distribution outlier",
     "log normal distribution outlier")

Usage::

    from surveyqa.outliers import find_outliers

    issues = find_outliers(survey_df)

    # or, with non default settings
    OutlierCheck(sigma_multiplier=4.0, max_workers=4).run(survey_df)
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Optional, Sequence

import pandas as pd

from surveyqa.dataset import check_dataset
from surveyqa.issues import IssueRecord, concat_issue_tables, issue_table

from .column_filters import NonNumeric, classify_column
from .detector import SIGMA_MULTIPLIER
from .selector import select
from .transforms import DEFAULT_CANDIDATES, Transform

log = logging.getLogger("surveyqa.outliers.check")


class OutlierCheck:
    """Flag statistical outliers in every numeric column of a dataset.

    Columns are independent of each other; with ``max_workers`` above 1
    they are evaluated on a thread pool, and the result keeps column order.
    """

    name = 'find_outliers'

    def __init__(
        self,
        sigma_multiplier: float = SIGMA_MULTIPLIER,
        candidates: Sequence[Transform] = DEFAULT_CANDIDATES,
        max_workers: Optional[int] = None,
    ) -> None:
        if not candidates:
            raise ValueError("OutlierCheck needs at least one candidate transform")
        self.sigma_multiplier = sigma_multiplier
        self.candidates = tuple(candidates)
        self.max_workers = max_workers

    def check_column(self, column_name: Any, ser: pd.Series) -> pd.DataFrame:
        """IssueTable for a single column; empty when nothing is flagged."""
        kind = classify_column(ser)
        if isinstance(kind, NonNumeric):
            log.debug("skipping column %r: %s", column_name, kind.reason)
            return issue_table([])

        transform, result = select(
            kind.values, self.candidates, sigma_multiplier=self.sigma_multiplier)
        if result.count == 0:
            return issue_table([])

        log.debug("column %r: %d %s", column_name, result.count, transform.issue_type)
        return issue_table(
            IssueRecord(
                row_index=row_index,
                value=str(ser.iloc[row_index]),
                variable=str(column_name),
                issue_type=transform.issue_type,
            )
            for row_index, _ in result.flagged
        )

    def run(self, data) -> pd.DataFrame:
        """Return an IssueTable of outliers for every numeric column of ``data``."""
        df = check_dataset(data)
        columns = list(df.columns)

        if self.max_workers is not None and self.max_workers > 1 and len(columns) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                # map() yields in submission order
                tables: List[pd.DataFrame] = list(executor.map(
                    lambda col: self.check_column(col, df[col]), columns))
        else:
            tables = [self.check_column(col, df[col]) for col in columns]

        issues = concat_issue_tables(tables)
        log.info("find_outliers: %d issues across %d columns", len(issues), len(columns))
        return issues

    def __call__(self, data) -> pd.DataFrame:
        return self.run(data)

    def __repr__(self):
        return (f"OutlierCheck(sigma_multiplier={self.sigma_multiplier!r}, "
                f"candidates={[t.name for t in self.candidates]!r})")


def find_outliers(data, sigma_multiplier: float = SIGMA_MULTIPLIER) -> pd.DataFrame:
    """Find outliers in all numerical columns of a dataset.

    Searches for values at least ``sigma_multiplier`` standard deviations
    from the mean.  If fewer outliers are found when the data is
    log-transformed first, only the log-transformed outliers are returned
    for that column.
    """
    return OutlierCheck(sigma_multiplier=sigma_multiplier).run(data)
