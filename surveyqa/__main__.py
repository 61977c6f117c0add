import argparse
import logging
import sys
from functools import partial

import pandas as pd

from surveyqa.check_func import CheckFunc, has_columns
from surveyqa.checks import check_time, find_duplicates
from surveyqa.checks.duration import DURATION_THRESHOLD_LOWER, DURATION_THRESHOLD_UPPER
from surveyqa.dataset import DatasetError, MissingColumnError
from surveyqa.outliers import SIGMA_MULTIPLIER, OutlierCheck
from surveyqa.registry import CheckRegistry


def build_registry(args) -> CheckRegistry:
    registry = CheckRegistry()
    registry.add_check(OutlierCheck(sigma_multiplier=args.sigma, max_workers=args.workers))
    registry.add_check(CheckFunc(
        'check_time',
        partial(check_time,
                duration_threshold_lower=args.lower,
                duration_threshold_upper=args.upper),
        applies=has_columns('start', 'end'),
    ))
    if args.id_column:
        registry.remove_check('find_duplicates_uuid')
        registry.add_check(CheckFunc(
            'find_duplicates', partial(find_duplicates, column=args.id_column)))
    return registry


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run survey data quality checks on a CSV file")
    parser.add_argument("csv", help="Path to the survey export")
    parser.add_argument("--sigma", type=float, default=SIGMA_MULTIPLIER,
                        help="Standard deviations from the mean that count as an outlier")
    parser.add_argument("--lower", type=float, default=DURATION_THRESHOLD_LOWER,
                        help="Minimum number of minutes to complete the form")
    parser.add_argument("--upper", type=float, default=DURATION_THRESHOLD_UPPER,
                        help="Maximum number of minutes to complete the form")
    parser.add_argument("--id-column", default=None,
                        help="Column to check for duplicates instead of the detected uuid column")
    parser.add_argument("--workers", type=int, default=None,
                        help="Threads for per-column outlier detection")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    log = logging.getLogger("surveyqa.cli")

    df = pd.read_csv(args.csv)
    log.info("Loaded %s: rows=%d columns=%d", args.csv, len(df), len(df.columns))
    try:
        issues = build_registry(args).run(df)
    except (DatasetError, MissingColumnError, ValueError) as e:
        print(f"surveyqa: {e}", file=sys.stderr)
        return 2

    issues.to_csv(sys.stdout, index=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
