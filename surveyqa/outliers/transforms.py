"""Candidate distribution models for outlier detection.

A Transform maps column values before the mean and standard deviation are
computed.  Values outside a transform's domain (e.g. non-positive values
for the natural log) are left out of that transform's population and are
never flagged by it.

``DEFAULT_CANDIDATES`` is ordered by tie-break priority: when two
candidates flag the same number of rows, the earlier one wins.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

import numpy as np


@dataclass(frozen=True)
class Transform:
    """A per-value mapping applied before computing distribution statistics.

    Attributes:
        name: identifier, stable across releases
        label: distribution name used in issue types ("normal", ...)
        func: vectorised mapping over a float array
        domain: vectorised predicate, True where ``func`` is defined
    """
    name: str
    label: str
    func: Callable[[np.ndarray], np.ndarray]
    domain: Callable[[np.ndarray], np.ndarray]

    @property
    def issue_type(self) -> str:
        return f"{self.label} distribution outlier"

    def __repr__(self):
        return f"Transform({self.name!r})"


def _everywhere(values: np.ndarray) -> np.ndarray:
    return np.ones(values.shape, dtype=bool)


def _positive(values: np.ndarray) -> np.ndarray:
    return values > 0


IDENTITY = Transform(
    name='identity',
    label='normal',
    func=lambda values: values,
    domain=_everywhere,
)

NATURAL_LOG = Transform(
    name='natural_log',
    label='log normal',
    func=np.log,
    domain=_positive,
)

DEFAULT_CANDIDATES: Tuple[Transform, ...] = (IDENTITY, NATURAL_LOG)
