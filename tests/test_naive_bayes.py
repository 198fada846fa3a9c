import math

import pytest

from career_recommender.naive_bayes import (
    CAREER_PATH_WEIGHTS,
    PATH_KEYS,
    CategoryTally,
    calculate_category_performance,
    calculate_probabilities,
    score_path,
    softmax,
)
from career_recommender.records import AttemptRecord
from helpers import attempts


class TestCategoryPerformance:

    def test_counts_correct_and_total(self):
        perf = calculate_category_performance(attempts("frontend", 3, 1) + attempts("data", 0, 2))
        assert perf["frontend"] == CategoryTally(correct=3, total=4)
        assert perf["data"] == CategoryTally(correct=0, total=2)

    def test_missing_category_is_skipped(self):
        perf = calculate_category_performance([AttemptRecord(None, True), AttemptRecord("", False)])
        assert perf == {}

    def test_order_does_not_matter(self):
        items = attempts("frontend", 2, 1) + attempts("backend", 1, 3) + [AttemptRecord(None, True)]
        assert calculate_category_performance(items) == calculate_category_performance(list(reversed(items)))

    def test_counts_are_consistent(self):
        perf = calculate_category_performance(attempts("cloud", 5, 5) + attempts("mobile", 1))
        for tally in perf.values():
            assert tally.total > 0
            assert tally.correct <= tally.total

    def test_accuracy_computed_on_demand(self):
        tally = CategoryTally(correct=1, total=3)
        assert tally.accuracy == pytest.approx(1 / 3)


class TestWeights:

    def test_five_paths_in_order(self):
        assert tuple(CAREER_PATH_WEIGHTS) == PATH_KEYS

    @pytest.mark.parametrize("key", PATH_KEYS)
    def test_weights_sum_to_one(self, key):
        assert sum(CAREER_PATH_WEIGHTS[key].values()) == pytest.approx(1.0)


class TestScorePath:

    def test_frontend_scenario(self):
        perf = {"frontend": CategoryTally(correct=8, total=10)}
        affinities = {"frontend": 3, "mobile": 1}
        assert score_path(CAREER_PATH_WEIGHTS["fullstack"], perf, affinities) == pytest.approx(24.2)
        assert score_path(CAREER_PATH_WEIGHTS["mobile"], perf, affinities) == pytest.approx(19.8)
        assert score_path(CAREER_PATH_WEIGHTS["datascience"], perf, affinities) == pytest.approx(3.0)

    def test_interest_is_capped(self):
        affinities = {c: 1000 for c in CAREER_PATH_WEIGHTS["fullstack"]}
        # 0.4 * min(1000 * 10, 100)
        assert score_path(CAREER_PATH_WEIGHTS["fullstack"], {}, affinities) == pytest.approx(40.0)

    def test_performance_only(self):
        perf = {c: CategoryTally(correct=1, total=1) for c in CAREER_PATH_WEIGHTS["cloud"]}
        assert score_path(CAREER_PATH_WEIGHTS["cloud"], perf, {}) == pytest.approx(60.0)

    def test_zero_signal_scores_zero(self):
        assert score_path(CAREER_PATH_WEIGHTS["security"], {}, {}) == 0.0


class TestSoftmax:

    def test_uniform_when_scores_equal(self):
        assert softmax([7.0] * 5) == pytest.approx([0.2] * 5)

    def test_temperature(self):
        p = softmax([10.0, 0.0])
        assert p[0] == pytest.approx(math.e / (math.e + 1))


class TestCalculateProbabilities:

    def test_sorted_and_normalized(self):
        perf = calculate_category_performance(attempts("data", 9, 1))
        results = calculate_probabilities(perf, {"data": 3})
        probs = [r.probability for r in results]
        assert probs == sorted(probs, reverse=True)
        assert sum(probs) == pytest.approx(1.0, abs=1e-9)
        assert results[0].path_key == "datascience"
        assert all(r.career_path_id is None for r in results)

    def test_no_signal_keeps_table_order(self):
        results = calculate_probabilities({}, {})
        assert [r.path_key for r in results] == list(PATH_KEYS)
        assert [r.probability for r in results] == pytest.approx([0.2] * 5)

    def test_interest_drives_ranking_without_matching_performance(self):
        # attempts exist but none use a weighted category
        perf = calculate_category_performance([AttemptRecord("general", True)])
        results = calculate_probabilities(perf, {"security": 3})
        assert results[0].path_key == "security"
