from datetime import date, datetime, timedelta, timezone

import numpy as np
import pandas as pd
import pytest

from portfolio_metrics import Cashflow, ErrorKind, ValidationError, npv
from portfolio_metrics.stats import mean, sample_std_dev, years_between
from portfolio_metrics.validation import (
    require_min_length,
    validate_consistent_timezones,
    validate_date,
    validate_non_negative_number,
    validate_number_series,
    validate_positive_number,
    validate_ratio,
)

YEAR = timedelta(days=365.25)


@pytest.mark.parametrize(
    "value",
    [date(2020, 1, 1), datetime(2020, 1, 1, 12), pd.Timestamp("2020-01-01"), np.datetime64("2020-01-01")],
)
def test_validate_date_normalises_to_timestamp(value):
    result = validate_date(value, "when")
    assert isinstance(result, pd.Timestamp)
    assert result.year == 2020


@pytest.mark.parametrize("value", ["2020-01-01", 20200101, None, pd.NaT, np.datetime64("NaT")])
def test_validate_date_rejects_non_dates(value):
    with pytest.raises(ValidationError) as exc_info:
        validate_date(value, "when")
    assert exc_info.value.kind is ErrorKind.INVALID_ARGUMENT_TYPE
    assert exc_info.value.label == "when"


def test_validate_positive_number():
    assert validate_positive_number(np.int64(3), "x") == 3.0
    for bad in (0, -1, float("inf")):
        with pytest.raises(ValidationError) as exc_info:
            validate_positive_number(bad, "x")
        assert exc_info.value.kind is ErrorKind.OUT_OF_RANGE_VALUE


def test_validate_non_negative_number_allows_zero():
    assert validate_non_negative_number(0, "x") == 0.0
    with pytest.raises(ValidationError):
        validate_non_negative_number(-0.01, "x")


@pytest.mark.parametrize("value", [True, np.bool_(False), "1", None, float("nan")])
def test_numeric_guards_reject_non_numbers(value):
    with pytest.raises(ValidationError) as exc_info:
        validate_positive_number(value, "x")
    assert exc_info.value.kind is ErrorKind.INVALID_ARGUMENT_TYPE


def test_validate_ratio_bounds():
    assert validate_ratio(0, "r") == 0.0
    assert validate_ratio(0.999, "r") == 0.999
    for bad in (-0.001, 1, 2):
        with pytest.raises(ValidationError) as exc_info:
            validate_ratio(bad, "r")
        assert exc_info.value.kind is ErrorKind.OUT_OF_RANGE_VALUE


def test_require_min_length():
    assert require_min_length((1, 2), "xs") == [1, 2]
    with pytest.raises(ValidationError) as exc_info:
        require_min_length([1], "xs")
    assert exc_info.value.kind is ErrorKind.INSUFFICIENT_DATA
    for bad in (None, "12", 5):
        with pytest.raises(ValidationError) as exc_info:
            require_min_length(bad, "xs")
        assert exc_info.value.kind is ErrorKind.INVALID_ARGUMENT_TYPE


def test_validate_number_series_labels_offending_index():
    with pytest.raises(ValidationError) as exc_info:
        validate_number_series([1.0, 2.0, -3.0], "values", non_negative=True)
    assert exc_info.value.label == "values[2]"
    assert validate_number_series([1, 2.5], "values") == [1.0, 2.5]


def test_validate_consistent_timezones():
    naive = pd.Timestamp("2020-01-01")
    aware = pd.Timestamp("2020-01-01", tz="UTC")
    validate_consistent_timezones([naive, naive], "dates")
    validate_consistent_timezones([aware, aware], "dates")
    with pytest.raises(ValidationError) as exc_info:
        validate_consistent_timezones([naive, aware], "dates")
    assert exc_info.value.kind is ErrorKind.INVALID_ARGUMENT_TYPE


def test_mean():
    assert mean([]) == 0.0
    assert mean([1.0, 2.0, 3.0, 6.0]) == 3.0


def test_sample_std_dev_uses_bessel_correction():
    assert sample_std_dev([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx((32 / 7) ** 0.5)
    assert sample_std_dev([5.0]) == 0.0
    assert sample_std_dev([]) == 0.0


def test_years_between_uses_fixed_year_length():
    start = pd.Timestamp("2020-01-01")
    assert years_between(start, start + YEAR) == 1.0
    assert years_between(start + YEAR, start) == -1.0
    assert years_between(start, pd.Timestamp("2021-01-01")) == pytest.approx(366 / 365.25)
    assert years_between(start, start + pd.Timedelta(days=365), days_per_year=365) == 1.0


def test_years_between_timezone_aware():
    start = pd.Timestamp(datetime(2020, 1, 1, tzinfo=timezone.utc))
    assert years_between(start, start + 2 * YEAR) == 2.0


def test_npv_at_zero_rate_is_sum_of_amounts():
    ref = pd.Timestamp("2020-01-01")
    flows = [Cashflow(ref, -100.0), Cashflow(ref + YEAR, 40.0), Cashflow(ref + 2 * YEAR, 70.0)]
    assert npv(0.0, flows, ref) == pytest.approx(10.0)


def test_npv_discounts_by_elapsed_years():
    ref = pd.Timestamp("2020-01-01")
    flows = [Cashflow(ref, -1000.0), Cashflow(ref + YEAR, 1200.0)]
    assert npv(0.2, flows, ref) == pytest.approx(0.0, abs=1e-9)
    assert npv(0.1, flows, ref) == pytest.approx(-1000 + 1200 / 1.1)


def test_npv_compounds_flows_before_reference():
    ref = pd.Timestamp("2020-01-01")
    assert npv(0.1, [Cashflow(ref - YEAR, 100.0)], ref) == pytest.approx(110.0)


def test_npv_overflowing_discount_factor_drops_the_term():
    ref = pd.Timestamp("2000-01-01")
    flows = [Cashflow(ref, -1.0), Cashflow(ref + 100 * YEAR, 5.0)]
    assert npv(100000.0, flows, ref) == pytest.approx(-1.0)
