"""
Tests for the projection engine and display helpers.
"""

import numpy as np
import pytest

from networth import (
    DEFAULT_PARAMETERS,
    FALLBACK_COLOR,
    HORIZON,
    QUADRANT_SEEDS,
    SCENARIO_COLORS,
    ScenarioParameters,
    compact_dollars,
    field_name,
    project,
    summarize,
    summary_rows,
    translucent,
    whole_dollars,
)


def test_series_has_81_points_starting_at_zero():
    for params in [DEFAULT_PARAMETERS, *QUADRANT_SEEDS.values()]:
        values = project(params).values
        assert len(values) == HORIZON + 1 == 81
        assert values[0] == 0


def test_default_scenario_concrete_values():
    values = project(DEFAULT_PARAMETERS).values
    growth = 1 + 7 / 100

    # Nothing before the first contribution year
    assert np.all(values[:25] == 0)
    assert values[25] == 10000
    assert values[26] == pytest.approx(20700)
    assert values[26] == 10000 * growth + 10000

    # 58 is the last contribution year; 59 only grows
    assert values[58] == values[57] * growth + 10000
    assert values[59] == values[58] * growth


def test_growth_applies_before_contribution():
    params = ScenarioParameters(start_age=1, end_age=1, annual_contribution=100, interest_rate=50)
    values = project(params).values
    # Year 1 contribution earns nothing in year 1
    assert values[1] == 100
    assert values[2] == 150
    assert values[3] == 225


def test_outside_window_is_pure_growth():
    params = ScenarioParameters(start_age=30, end_age=45, annual_contribution=5000, interest_rate=6.5)
    values = project(params).values
    growth = 1 + params.interest_rate / 100
    for age in range(1, HORIZON + 1):
        if params.start_age <= age <= params.end_age:
            assert values[age] == values[age - 1] * growth + params.annual_contribution
        else:
            assert values[age] == values[age - 1] * growth


def test_monotonic_for_positive_rate():
    for params in QUADRANT_SEEDS.values():
        assert np.all(np.diff(project(params).values) >= 0)


def test_project_is_deterministic():
    a = project(DEFAULT_PARAMETERS)
    b = project(DEFAULT_PARAMETERS)
    assert a is not b
    np.testing.assert_array_equal(a.values, b.values)


def test_series_is_read_only():
    series = project(DEFAULT_PARAMETERS)
    with pytest.raises(ValueError):
        series.values[10] = 1.0


def test_zero_rate_sums_contributions():
    params = ScenarioParameters(start_age=10, end_age=19, annual_contribution=1000, interest_rate=0)
    series = project(params)
    assert series.final == 10000
    assert series.values[19] == 10000


def test_window_past_horizon_is_truncated():
    params = ScenarioParameters(start_age=75, end_age=90, annual_contribution=1000, interest_rate=0)
    assert project(params).final == 6000


def test_inverted_window_adds_nothing():
    params = ScenarioParameters(start_age=40, end_age=30, annual_contribution=1000, interest_rate=5)
    assert np.all(project(params).values == 0)


def test_nan_propagates():
    params = ScenarioParameters(start_age=20, end_age=30, annual_contribution=float('nan'), interest_rate=5)
    values = project(params).values
    assert np.all(values[:20] == 0)
    assert np.all(np.isnan(values[20:]))


def test_negative_rate_is_accepted():
    params = ScenarioParameters(start_age=1, end_age=1, annual_contribution=1000, interest_rate=-10)
    values = project(params).values
    assert values[2] == pytest.approx(900)
    assert np.all(np.diff(values[1:]) <= 0)


def test_summary_for_default_scenario():
    series = project(DEFAULT_PARAMETERS)
    summary = summarize(DEFAULT_PARAMETERS, series)
    assert summary.years_of_contribution == 34
    assert summary.total_contributions == 340000
    assert summary.final_net_worth == series.values[80]
    assert summary.growth_from_interest == series.values[80] - 340000
    assert summary.growth_from_interest > 0


def test_series_ages_label_every_year():
    series = project(DEFAULT_PARAMETERS)
    np.testing.assert_array_equal(series.ages, np.arange(81))


def test_field_name_accepts_both_spellings():
    assert field_name('startAge') == 'start_age'
    assert field_name('interest_rate') == 'interest_rate'
    with pytest.raises(ValueError):
        field_name('inflation')


def test_replace_returns_new_parameters():
    params = DEFAULT_PARAMETERS.replace('annualContribution', 2500)
    assert params.annual_contribution == 2500
    assert DEFAULT_PARAMETERS.annual_contribution == 10000


@pytest.mark.parametrize("value, expected", [
    (2_500_000, "$2.5M"),
    (1_000_000, "$1.0M"),
    (45_000, "$45.0K"),
    (1_000, "$1.0K"),
    (500, "$500"),
    (0, "$0"),
    (12.5, "$12.5"),
])
def test_compact_dollars(value, expected):
    assert compact_dollars(value) == expected


def test_whole_dollars():
    assert whole_dollars(1234567.89) == "$1,234,568"
    assert whole_dollars(0) == "$0"
    assert whole_dollars(-2500) == "-$2,500"


def test_summary_rows_one_per_scenario():
    rows = summary_rows(QUADRANT_SEEDS.items())
    assert [row[0] for row in rows] == list(QUADRANT_SEEDS)
    shale = rows[0]
    assert shale[1] == "25-58"
    assert shale[4] == 34
    assert shale[5] == "$340,000"


def test_translucent_fill_for_every_line_color():
    for color in [FALLBACK_COLOR, *SCENARIO_COLORS.values()]:
        fill = translucent(color)
        assert fill == color[:-len(', 1)')] + ', 0.2)'
    assert translucent(FALLBACK_COLOR) == 'rgba(99, 110, 250, 0.2)'


def test_translucent_skips_colors_it_cannot_fade():
    assert translucent('#636EFA') is None
    assert translucent(None) is None
    assert translucent('rgba(1, 2, 3, 0.5)') is None
