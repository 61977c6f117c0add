import pytest

from surveyqa.outliers.selector import select
from surveyqa.outliers.transforms import IDENTITY, NATURAL_LOG


INCOME = [100, 110, 95, 105, 90, 100000]


class TestSelect:
    def test_log_wins_when_strictly_fewer(self, skewed):
        transform, result = select(skewed)
        assert transform is NATURAL_LOG
        assert result.count == 0

    def test_log_wins_with_flags(self, log_outlier):
        transform, result = select(log_outlier)
        assert transform is NATURAL_LOG
        assert result.row_indices == (72,)

    def test_normal_wins(self, age):
        transform, result = select(age)
        assert transform is IDENTITY
        assert result.flagged == ((8, 150.0),)

    def test_result_matches_winner(self, log_outlier):
        transform, result = select(log_outlier)
        assert result.transform is transform


class TestTieBreak:
    def test_equal_counts_pick_normal(self, age):
        # both models flag the 150
        transform, result = select(age)
        assert transform is IDENTITY
        assert result.count == 1

    def test_both_zero_pick_normal(self):
        # six values can never reach 3 sigma, so neither model flags anything
        transform, result = select(INCOME)
        assert transform is IDENTITY
        assert result.count == 0

    def test_empty_column_picks_normal(self):
        transform, result = select([])
        assert transform is IDENTITY
        assert result.count == 0

    def test_first_candidate_wins_ties(self, age):
        transform, _ = select(age, candidates=(NATURAL_LOG, IDENTITY))
        assert transform is NATURAL_LOG

    def test_no_candidates(self, age):
        with pytest.raises(ValueError):
            select(age, candidates=())


class TestDeterminism:
    @pytest.mark.parametrize('fixture_name', ['age', 'skewed', 'log_outlier'])
    def test_repeatable(self, fixture_name, request):
        values = request.getfixturevalue(fixture_name)
        first = select(values)
        second = select(values)
        assert first[0] is second[0]
        assert first[1].flagged == second[1].flagged

    def test_sigma_multiplier_passed_through(self, age):
        _, result = select(age, sigma_multiplier=10.0)
        assert result.count == 0
