import math

import pytest

from norm_error import ErrorStats, evaluate, f, format_value, precise_error, spaced


def test_spaced_single_sample_is_lower_bound():
    assert list(spaced(-1.0, 1.0, 1)) == [-1.0]


def test_spaced_two_samples_are_the_bounds():
    assert list(spaced(-1.0, 1.0, 2)) == [-1.0, 1.0]


def test_spaced_includes_both_ends():
    assert list(spaced(0.0, 1.0, 5)) == [0.0, 0.25, 0.5, 0.75, 1.0]


def test_spaced_zero_samples():
    assert len(spaced(-1.0, 1.0, 0)) == 0


def test_spaced_rejects_negative_count():
    with pytest.raises(ValueError):
        spaced(-1.0, 1.0, -1)


def test_default_stats_are_unset():
    stats = ErrorStats()
    assert stats.total_error == 0.0
    assert stats.is_empty()
    assert stats.max_percent_error is None
    assert 'nan' in str(stats)


def test_origin_is_skipped():
    # Every point is off by exactly one, so the total counts the points.
    def off_by_one(x, y, a, b):
        return f(x, y) + 1.0

    # -1, 0, 1 contains the origin.
    stats = evaluate(0.0, 0.0, -1.0, 1.0, 3, approx_f=off_by_one)
    assert stats.total_error == pytest.approx(8.0)

    # -1, -1/3, 1/3, 1 does not.
    stats = evaluate(0.0, 0.0, -1.0, 1.0, 4, approx_f=off_by_one)
    assert stats.total_error == pytest.approx(16.0)


def test_only_origin_gives_empty_stats():
    assert evaluate(0.5, 0.5, 0.0, 0.0, 1) == ErrorStats()
    assert evaluate(0.5, 0.5, 0.0, 0.0, 1).is_empty()


def test_zero_approximation():
    stats = evaluate(0.0, 0.0, -1.0, 1.0, 3)
    assert stats.total_error == pytest.approx(4.0 + 4.0 * math.sqrt(2.0))
    assert stats.max_error == pytest.approx(math.sqrt(2.0))
    assert stats.min_error == pytest.approx(1.0)
    assert stats.max_percent_error == 0.0
    assert stats.min_percent_error == 0.0


def test_known_coefficients():
    # Points (0, 1), (1, 0) and (1, 1).
    stats = evaluate(0.96, 0.28, 0.0, 1.0, 2)
    diagonal = math.sqrt(2.0)
    assert stats.total_error == pytest.approx(0.72 + 0.04 + diagonal - 1.24)
    assert stats.max_error == pytest.approx(0.72)
    assert stats.min_error == pytest.approx(0.04)
    assert stats.max_percent_error == pytest.approx(96.0)
    assert stats.min_percent_error == pytest.approx(28.0)


@pytest.mark.parametrize('a, b', [(0.0, 0.0), (0.96, 0.28), (-0.3, 0.7), (2.0, -1.5)])
def test_stats_are_ordered(a, b):
    stats = evaluate(a, b, -1.0, 1.0, 25)
    assert stats.total_error >= 0.0
    assert stats.max_error >= stats.min_error
    assert stats.max_percent_error >= stats.min_percent_error


@pytest.mark.parametrize('a, b', [(0.96, 0.28), (-0.3, 0.7), (0.1, 0.0)])
def test_swapping_a_and_b_keeps_total_error(a, b):
    assert evaluate(a, b, -1.0, 1.0, 30).total_error == pytest.approx(
        evaluate(b, a, -1.0, 1.0, 30).total_error)


def test_total_error_grows_with_the_grid():
    # The same points plus more: -1, 0, 1 is a subset of -1, -0.5, 0, 0.5, 1.
    small = evaluate(0.4, 0.6, -1.0, 1.0, 3)
    large = evaluate(0.4, 0.6, -1.0, 1.0, 5)
    assert large.total_error >= small.total_error


def test_precise_error_matches_float_error():
    stats = evaluate(0.96, 0.28, -1.0, 1.0, 20)
    assert float(precise_error(0.96, 0.28, -1.0, 1.0, 20)) == pytest.approx(stats.total_error, rel=1e-9)


def test_precise_error_of_empty_grid():
    assert precise_error(0.96, 0.28, -1.0, 1.0, 0) == 0


def test_format_value():
    assert format_value(None) == 'nan'
    assert format_value(1.23456) == '1.235'
    assert format_value(1.23456, 2) == '1.23'
