import numpy as np
import pandas as pd

from surveyqa.outliers.column_filters import (
    NonNumeric, Numeric, classify_column, is_boolean, is_numeric,
    is_numeric_not_bool, is_string,
)


class TestPredicates:
    def test_is_numeric(self):
        assert is_numeric(pd.Series([1, 2]).dtype)
        assert is_numeric(pd.Series([1.5]).dtype)
        assert not is_numeric(pd.Series(['a']).dtype)

    def test_is_boolean(self):
        assert is_boolean(pd.Series([True, False]).dtype)
        assert not is_boolean(pd.Series([1, 0]).dtype)

    def test_is_string(self):
        assert is_string(pd.Series(['a', 'b']).dtype)
        assert is_string(pd.Series(['a', 1], dtype=object).dtype)
        assert not is_string(pd.Series([1.0]).dtype)

    def test_is_numeric_not_bool(self):
        assert is_numeric_not_bool(pd.Series([1, 2]).dtype)
        assert not is_numeric_not_bool(pd.Series([True]).dtype)


class TestClassifyColumn:
    def test_int(self):
        kind = classify_column(pd.Series([1, 2, 3]))
        assert isinstance(kind, Numeric)
        assert kind.values.dtype == np.float64
        assert kind.values.tolist() == [1.0, 2.0, 3.0]

    def test_float_with_missing(self):
        kind = classify_column(pd.Series([1.0, None, 3.0]))
        assert isinstance(kind, Numeric)
        assert np.isnan(kind.values[1])

    def test_nullable_int(self):
        kind = classify_column(pd.Series([1, None, 3], dtype='Int64'))
        assert isinstance(kind, Numeric)
        assert np.isnan(kind.values[1])
        assert kind.values[2] == 3.0

    def test_infinite_is_missing(self):
        kind = classify_column(pd.Series([1.0, np.inf, -np.inf, 2.0]))
        assert isinstance(kind, Numeric)
        assert np.isnan(kind.values[1]) and np.isnan(kind.values[2])

    def test_numeric_strings(self):
        kind = classify_column(pd.Series(['1', '2.5', '10']))
        assert isinstance(kind, Numeric)
        assert kind.values.tolist() == [1.0, 2.5, 10.0]

    def test_text(self):
        kind = classify_column(pd.Series(['bike', 'walk']))
        assert isinstance(kind, NonNumeric)
        assert 'could not convert' in kind.reason

    def test_mixed_text_and_numbers(self):
        kind = classify_column(pd.Series([1, 2, 'three'], dtype=object))
        assert isinstance(kind, NonNumeric)

    def test_bool(self):
        kind = classify_column(pd.Series([True, False, True]))
        assert isinstance(kind, NonNumeric)
        assert kind.reason == 'boolean column'

    def test_datetime(self):
        kind = classify_column(pd.Series(pd.to_datetime(['2021-01-01', '2021-01-02'])))
        assert isinstance(kind, NonNumeric)

    def test_does_not_write_through(self):
        ser = pd.Series([1.0, np.inf, 3.0])
        classify_column(ser)
        assert ser.tolist() == [1.0, np.inf, 3.0]
