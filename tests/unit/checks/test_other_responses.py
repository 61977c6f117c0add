import pandas as pd

from surveyqa.checks.other_responses import (
    ISSUE_TYPE, find_other_responses, select_other_columns,
)


def _survey():
    return pd.DataFrame({
        'transport': ['other', 'bus', 'other', 'car', 'other', 'bus'],
        'transport_other': ['bike', None, 'bike', '', 'walk', 'TRUE'],
        'Q2_Autre': ['velo', 'velo', 'FAUX', None, 'a pied', '0'],
        'other_notes': ['x', 'y', 'z', 'x', 'y', 'z'],
    })


class TestSelectOtherColumns:
    def test_name_suffix(self):
        assert select_other_columns(_survey()) == ['transport_other', 'Q2_Autre']

    def test_none(self):
        assert select_other_columns(pd.DataFrame({'a': [1]})) == []


class TestFindOtherResponses:
    def test_counts_distinct_answers(self):
        issues = find_other_responses(_survey())
        assert issues['value'].tolist() == [
            'bike /// instances: 2',
            'walk /// instances: 1',
            'a pied /// instances: 1',
            'velo /// instances: 2',
        ]
        assert issues['variable'].tolist() == [
            'transport_other', 'transport_other', 'Q2_Autre', 'Q2_Autre',
        ]

    def test_column_level_records(self):
        issues = find_other_responses(_survey())
        assert issues['row_index'].isna().all()
        assert (issues['issue_type'] == ISSUE_TYPE).all()
        assert issues['has_issue'].all()

    def test_only_placeholders(self):
        df = pd.DataFrame({'q_other': ['', None, 'NA', 'FALSE']})
        assert len(find_other_responses(df)) == 0

    def test_no_other_columns(self):
        issues = find_other_responses(pd.DataFrame({'age': [20, 30]}))
        assert len(issues) == 0
        assert list(issues.columns) == ['row_index', 'value', 'variable', 'has_issue', 'issue_type']
