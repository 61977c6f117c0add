"""Single-model outlier detection for one numeric column.

``detect`` applies a Transform, computes the mean and population standard
deviation (``ddof=0``) of the transformed values, and flags every row whose
transformed value is at least ``sigma_multiplier`` standard deviations from
the mean.  Missing values and values outside the transform's domain take no
part in either step.

A population of fewer than two values, or one with zero spread, flags
nothing.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from .transforms import Transform

log = logging.getLogger("surveyqa.outliers.detector")

SIGMA_MULTIPLIER = 3.0


@dataclass(frozen=True)
class OutlierResult:
    """Rows flagged by one transform.

    ``flagged`` holds ``(row_index, original_value)`` pairs in row order; the
    value is the untransformed one so reports stay readable.  ``lower`` and
    ``upper`` are the bounds in transformed space, None when nothing could
    be flagged.
    """
    transform: Transform
    flagged: Tuple[Tuple[int, float], ...] = ()
    mean: Optional[float] = None
    std: Optional[float] = None
    lower: Optional[float] = None
    upper: Optional[float] = None
    population: int = 0

    @property
    def count(self) -> int:
        return len(self.flagged)

    @property
    def row_indices(self) -> Tuple[int, ...]:
        return tuple(idx for idx, _ in self.flagged)


def detect(
    values: Sequence[float],
    transform: Transform,
    sigma_multiplier: float = SIGMA_MULTIPLIER,
) -> OutlierResult:
    """Flag the rows of ``values`` that are outliers under ``transform``.

    Args:
        values: column values aligned with the dataset rows; NaN is missing
        transform: the distribution model to test against
        sigma_multiplier: how many standard deviations count as an outlier

    Returns:
        OutlierResult with the flagged rows in ascending row order
    """
    values = np.asarray(values, dtype='float64')
    present = ~np.isnan(values)
    in_domain = present.copy()
    in_domain[present] = transform.domain(values[present])

    rows = np.flatnonzero(in_domain)
    population = len(rows)
    if population < 2:
        return OutlierResult(transform=transform, population=population)

    transformed = transform.func(values[rows])
    mean = float(transformed.mean())
    std = float(transformed.std())
    if not std > 0:
        return OutlierResult(transform=transform, mean=mean, std=std,
                             population=population)

    threshold = sigma_multiplier * std
    hits = np.abs(transformed - mean) >= threshold
    flagged = tuple((int(idx), float(values[idx])) for idx in rows[hits])
    log.debug("%s: %d of %d values beyond %.4g sigma",
              transform.name, len(flagged), population, sigma_multiplier)
    return OutlierResult(
        transform=transform,
        flagged=flagged,
        mean=mean,
        std=std,
        lower=mean - threshold,
        upper=mean + threshold,
        population=population,
    )
