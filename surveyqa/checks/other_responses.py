"""Free text "other" responses that may need recoding.

Multiple choice questions often come with a "specify other" text field.
Those columns are found by name (ending in "other", or the French
"autre"), and every distinct answer is reported once with its frequency.
"""
from __future__ import annotations

import logging
import re

import pandas as pd

from surveyqa.check_func import check
from surveyqa.dataset import check_dataset
from surveyqa.issues import IssueRecord, issue_table

log = logging.getLogger("surveyqa.checks.other_responses")

OTHER_COLUMN_PATTERN = re.compile(r"(other|autre)$", re.IGNORECASE)

# answers that are placeholders rather than real free text
PLACEHOLDER_VALUES = frozenset([
    "", "TRUE", "FALSE", "True", "False", "true", "false",
    "1", "0", "1.0", "0.0",
    "VRAI", "FAUX", "<NA>", "NA", "nan", "None",
])

ISSUE_TYPE = "'other' response. may need recoding."


def select_other_columns(df: pd.DataFrame) -> list:
    return [col for col in df.columns if OTHER_COLUMN_PATTERN.search(str(col))]


@check()
def find_other_responses(data) -> pd.DataFrame:
    """Report each distinct answer in "other" columns with its count."""
    df = check_dataset(data)
    records = []
    for col in select_other_columns(df):
        answers = df[col].dropna().astype(str).str.strip()
        answers = answers[~answers.isin(PLACEHOLDER_VALUES)]
        if answers.empty:
            continue
        counts = answers.value_counts().sort_index()
        log.debug("find_other_responses: %d distinct answers in %r", len(counts), col)
        for answer, count in counts.items():
            records.append(IssueRecord(
                row_index=None,
                value=f"{answer} /// instances: {count}",
                variable=str(col),
                issue_type=ISSUE_TYPE,
            ))
    return issue_table(records)
