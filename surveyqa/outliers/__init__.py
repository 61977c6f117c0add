from .check import OutlierCheck, find_outliers
from .detector import SIGMA_MULTIPLIER, OutlierResult, detect
from .selector import select
from .transforms import DEFAULT_CANDIDATES, IDENTITY, NATURAL_LOG, Transform

__all__ = [
    "OutlierCheck",
    "find_outliers",
    "OutlierResult",
    "detect",
    "select",
    "SIGMA_MULTIPLIER",
    "Transform",
    "IDENTITY",
    "NATURAL_LOG",
    "DEFAULT_CANDIDATES",
]
