"""Flag columns whose names suggest personally identifying information.

WARNING: this is a name based heuristic.  It does not protect sensitive
data in any way.
"""
from __future__ import annotations

import re
import warnings

import pandas as pd

from surveyqa.check_func import check
from surveyqa.dataset import check_dataset
from surveyqa.issues import IssueRecord, issue_table

SENSITIVE_PATTERN = re.compile("gps|phone|latitude|longitude", re.IGNORECASE)

ISSUE_TYPE = "Potentially sensitive information. Please ensure all PII is removed"


@check()
def sensitive_columns(data, i_know_this_check_is_insufficient: bool = False) -> pd.DataFrame:
    df = check_dataset(data)
    matches = [col for col in df.columns if SENSITIVE_PATTERN.search(str(col))]
    if not matches:
        return issue_table([])
    if not i_know_this_check_is_insufficient:
        warnings.warn(
            "sensitive_columns() is rudimentary and does not provide ANY data protection.",
            stacklevel=2,
        )
    return issue_table(
        IssueRecord(row_index=None, value=None, variable=str(col), issue_type=ISSUE_TYPE)
        for col in matches
    )
