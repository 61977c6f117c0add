import warnings

import pandas as pd
import pytest

from surveyqa.checks.sensitive import ISSUE_TYPE, sensitive_columns


def _survey():
    return pd.DataFrame({
        'GPS_lat': [1.0], 'phone_number': ['555'], 'age': [20], 'Longitude': [2.0],
    })


class TestSensitiveColumns:
    def test_flags_by_name(self):
        with pytest.warns(UserWarning, match="rudimentary"):
            issues = sensitive_columns(_survey())
        assert issues['variable'].tolist() == ['GPS_lat', 'phone_number', 'Longitude']
        assert (issues['issue_type'] == ISSUE_TYPE).all()
        assert issues['row_index'].isna().all()
        assert issues['value'].isna().all()

    def test_acknowledged(self):
        with warnings.catch_warnings():
            warnings.simplefilter('error', UserWarning)
            issues = sensitive_columns(_survey(), i_know_this_check_is_insufficient=True)
        assert len(issues) == 3

    def test_nothing_sensitive(self):
        with warnings.catch_warnings():
            warnings.simplefilter('error', UserWarning)
            issues = sensitive_columns(pd.DataFrame({'age': [1], 'name_other': ['x']}))
        assert len(issues) == 0
