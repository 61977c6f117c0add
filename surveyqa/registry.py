"""CheckRegistry: run a set of checks and union their IssueTables.

A check is anything ``to_check_func`` accepts: a ``@check``-decorated
function, a ``CheckFunc``, or an object with a ``run(df)`` method such as
``OutlierCheck``.

A check whose ``applies`` predicate is False for the dataset is skipped.
That is NOT an error, it means the check has nothing to look at.
Exceptions raised by a check that does run propagate to the caller.

Usage::

    registry = CheckRegistry()           # DEFAULT_CHECKS
    issues = registry.run(survey_df)

    registry = CheckRegistry([find_outliers, sensitive_columns])
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

import pandas as pd

from surveyqa.check_func import CheckFunc, collect_check_funcs, to_check_func
from surveyqa.checks import (
    check_time, find_duplicates_uuid, find_other_responses, sensitive_columns,
)
from surveyqa.dataset import check_dataset
from surveyqa.issues import concat_issue_tables, validate_issue_table
from surveyqa.outliers import OutlierCheck

log = logging.getLogger("surveyqa.registry")


class CheckRegistry:
    """Runs checks in registration order and unions their IssueTables."""

    def __init__(self, checks: Optional[list] = None) -> None:
        self._checks: Dict[str, CheckFunc] = {}
        for cf in collect_check_funcs(DEFAULT_CHECKS if checks is None else checks):
            self._register(cf)

    def _register(self, cf: CheckFunc) -> None:
        if cf.name in self._checks:
            log.debug("replacing check %r", cf.name)
            del self._checks[cf.name]
        self._checks[cf.name] = cf

    @property
    def checks(self) -> List[CheckFunc]:
        return list(self._checks.values())

    def add_check(self, obj) -> CheckFunc:
        """Register a check, replacing any existing check with the same name."""
        cf = to_check_func(obj)
        self._register(cf)
        return cf

    def remove_check(self, name: str) -> None:
        if name not in self._checks:
            raise KeyError(f"No check named {name!r}")
        del self._checks[name]

    def run(self, data) -> pd.DataFrame:
        """Run every applicable check on ``data`` and union the results."""
        df = check_dataset(data)
        tables = []
        for cf in self._checks.values():
            if cf.applies is not None and not cf.applies(df):
                log.debug("check %r does not apply, skipping", cf.name)
                continue
            table = validate_issue_table(cf.func(df), cf.name)
            log.debug("check %r: %d issues", cf.name, len(table))
            tables.append(table)
        issues = concat_issue_tables(tables)
        log.info("%d checks produced %d issues", len(tables), len(issues))
        return issues

    def explain(self) -> str:
        """Return a human-readable description of the registered checks."""
        lines = []
        for cf in self._checks.values():
            if cf.applies is None:
                lines.append(f"{cf.name}: all datasets")
            else:
                applies_name = getattr(cf.applies, '__name__', repr(cf.applies))
                lines.append(f"{cf.name}: when {applies_name}")
        return '\n'.join(lines)


DEFAULT_CHECKS = [
    find_duplicates_uuid,
    OutlierCheck(),
    find_other_responses,
    sensitive_columns,
    check_time,
]
