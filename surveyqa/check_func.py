"""Core types for registering checks.

CheckFunc, the @check decorator, and dataset predicates for ``applies``.

A check is a callable ``(DataFrame) -> IssueTable``.  The decorator only
attaches metadata; the decorated function is returned unchanged and can
still be called directly.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

import pandas as pd


@dataclass
class CheckFunc:
    """A registered check.

    Attributes:
        name: identifier for this check, unique within a registry
        func: callable taking a DataFrame and returning an IssueTable
        applies: optional predicate on the DataFrame; False skips the check
    """
    name: str
    func: Callable[[pd.DataFrame], pd.DataFrame]
    applies: Optional[Callable[[pd.DataFrame], bool]] = None


def check(applies=None, name=None):
    """Decorator that converts a function into a CheckFunc.

    Usage::

        @check()
        def no_empty_rows(df):
            ...

        @check(applies=has_columns('start', 'end'))
        def interview_duration(df):
            ...
    """
    def decorator(func):
        func._check_func = CheckFunc(
            name=name or func.__name__,
            func=func,
            applies=applies,
        )
        return func

    return decorator


def has_columns(*columns) -> Callable[[pd.DataFrame], bool]:
    """Predicate: the dataset has every one of ``columns``."""
    def predicate(df: pd.DataFrame) -> bool:
        return all(col in df.columns for col in columns)
    predicate.__name__ = f"has_columns({', '.join(map(repr, columns))})"
    return predicate


def has_column_matching(pattern) -> Callable[[pd.DataFrame], bool]:
    """Predicate: some column name matches the compiled regex ``pattern``."""
    def predicate(df: pd.DataFrame) -> bool:
        return any(pattern.search(str(col)) for col in df.columns)
    predicate.__name__ = f"has_column_matching({pattern.pattern!r})"
    return predicate


def to_check_func(obj) -> CheckFunc:
    """Normalize a check-like object to a CheckFunc.

    - CheckFunc instance: returned as-is
    - Function with @check: returns its ._check_func
    - Object with a run() method (e.g. OutlierCheck): wrapped, using its
      ``name`` attribute when it has one
    """
    if isinstance(obj, CheckFunc):
        return obj

    if callable(obj) and hasattr(obj, '_check_func'):
        return obj._check_func

    run = getattr(obj, 'run', None)
    if callable(run) and not isinstance(obj, type):
        return CheckFunc(
            name=getattr(obj, 'name', type(obj).__name__),
            func=run,
            applies=getattr(obj, 'applies', None),
        )

    raise TypeError(
        f"Cannot convert {obj!r} to a check. Expected CheckFunc, "
        f"@check-decorated function, or an object with a run() method."
    )


def collect_check_funcs(objs) -> List[CheckFunc]:
    return [to_check_func(obj) for obj in objs]
