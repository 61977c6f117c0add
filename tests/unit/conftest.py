import pytest

# A tight cluster of ages around 20 with one implausible 150 at row 8.
AGE = [20, 21, 19, 22, 20, 21, 19, 20, 150, 21,
       20, 21, 19, 22, 20, 21, 19, 20, 21, 20]

# Right-skewed amounts: the raw model flags the 1000 at row 30, the log
# model flags nothing.
SKEWED = [1] * 10 + [10] * 10 + [100] * 10 + [1000]

# Log-uniform amounts with two large values (rows 70, 71) and one tiny
# value (row 72).  Raw flags the two large ones, log only the tiny one.
LOG_OUTLIER = [10, 20, 50, 100, 200, 500, 1000] * 10 + [8000, 9000, 0.0001]


@pytest.fixture
def age():
    return list(AGE)


@pytest.fixture
def skewed():
    return list(SKEWED)


@pytest.fixture
def log_outlier():
    return list(LOG_OUTLIER)
