"""Interview duration check for survey exports with start/end timestamps."""
from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from surveyqa.check_func import check, has_columns
from surveyqa.dataset import check_dataset, require_columns
from surveyqa.issues import IssueRecord, issue_table

log = logging.getLogger("surveyqa.checks.duration")

DURATION_THRESHOLD_LOWER = 15
DURATION_THRESHOLD_UPPER = 100

DURATION_VARIABLE = "Completion Duration (min)"
TOO_SHORT = "form duration too short"
TOO_LONG = "form duration too long"


def _parse_timestamps(ser: pd.Series) -> pd.Series:
    return pd.to_datetime(ser, utc=True, errors='coerce', format='ISO8601')


def interview_minutes(df: pd.DataFrame) -> pd.Series:
    """Duration of every interview in minutes, NaN where unparseable."""
    start = _parse_timestamps(df['start'])
    end = _parse_timestamps(df['end'])
    return ((end - start).dt.total_seconds() / 60).round(2)


@check(applies=has_columns('start', 'end'))
def check_time(
    data,
    duration_threshold_lower: float = DURATION_THRESHOLD_LOWER,
    duration_threshold_upper: float = DURATION_THRESHOLD_UPPER,
) -> pd.DataFrame:
    """Flag interviews that were too short or too long.

    Args:
        data: dataset with ISO 8601 "start" and "end" columns
        duration_threshold_lower: minimum number of minutes to complete the form
        duration_threshold_upper: maximum number of minutes to complete the form
    """
    df = check_dataset(data)
    require_columns(df, ['start', 'end'], 'check_time')
    if duration_threshold_lower > duration_threshold_upper:
        raise ValueError(
            f"duration_threshold_lower ({duration_threshold_lower}) is above "
            f"duration_threshold_upper ({duration_threshold_upper})"
        )

    minutes = interview_minutes(df).to_numpy()
    unparsed = int(np.isnan(minutes).sum())
    if unparsed:
        log.debug("check_time: skipped %d rows without parseable timestamps", unparsed)

    records = []
    for pos, duration in enumerate(minutes):
        if np.isnan(duration):
            continue
        if duration <= duration_threshold_lower:
            issue_type = TOO_SHORT
        elif duration >= duration_threshold_upper:
            issue_type = TOO_LONG
        else:
            continue
        records.append(IssueRecord(
            row_index=pos,
            value=str(float(duration)),
            variable=DURATION_VARIABLE,
            issue_type=issue_type,
        ))
    return issue_table(records)
