"""Pick the distribution model that fits a column best.

Every candidate transform is run through ``detect``; the one flagging the
fewest rows wins.  Right-skewed survey fields (income, distances, counts)
over-flag under a raw 3-sigma rule and usually flag less after a log.

Ties go to the candidate listed first, so with ``DEFAULT_CANDIDATES`` the
plain normal model wins whenever the log model is not strictly better.
"""
from __future__ import annotations

import logging
from typing import Sequence, Tuple

from .detector import SIGMA_MULTIPLIER, OutlierResult, detect
from .transforms import DEFAULT_CANDIDATES, Transform

log = logging.getLogger("surveyqa.outliers.selector")


def select(
    values: Sequence[float],
    candidates: Sequence[Transform] = DEFAULT_CANDIDATES,
    sigma_multiplier: float = SIGMA_MULTIPLIER,
) -> Tuple[Transform, OutlierResult]:
    """Return ``(winning_transform, result)`` for one column."""
    if not candidates:
        raise ValueError("select() needs at least one candidate transform")

    best = None
    for transform in candidates:
        result = detect(values, transform, sigma_multiplier=sigma_multiplier)
        if best is None or result.count < best.count:
            best = result

    log.debug("selected %s (%d flags) from %s",
              best.transform.name, best.count, [t.name for t in candidates])
    return best.transform, best
