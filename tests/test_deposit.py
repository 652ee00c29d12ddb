import datetime

import pytest

from smartcalc.deposit import (
    CalendarDate,
    DepositResult,
    Frequency,
    Replenishment,
    add_drop_frequency,
    advance,
    calculate_deposit,
    day_number,
    is_leap_year,
    payout_frequency,
)


def _cd(value: datetime.date) -> CalendarDate:
    return CalendarDate(value.year, value.month, value.day)


def _days_2023_2024():
    first = datetime.date(2023, 1, 1)
    return [first + datetime.timedelta(days=n) for n in range(731)]


@pytest.mark.parametrize(
    "year, expected",
    [(2000, True), (1900, False), (2024, True), (2023, False), (2100, False)],
)
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected


def test_day_number_differences_match_calendar():
    base = datetime.date(1999, 3, 1)
    for value in (
        datetime.date(1999, 3, 2),
        datetime.date(2000, 2, 29),
        datetime.date(2000, 3, 1),
        datetime.date(2023, 12, 31),
        datetime.date(2024, 1, 1),
        datetime.date(2100, 3, 1),
    ):
        assert day_number(_cd(value)) - day_number(_cd(base)) == (value - base).days


def test_day_number_consecutive_days():
    days = _days_2023_2024()
    for today, tomorrow in zip(days, days[1:]):
        assert day_number(_cd(tomorrow)) - day_number(_cd(today)) == 1


def test_advance_day_matches_calendar():
    for value in _days_2023_2024():
        expected = _cd(value + datetime.timedelta(days=1))
        assert advance(_cd(value), Frequency.DAY) == expected


def test_advance_week_matches_calendar():
    for value in _days_2023_2024():
        expected = _cd(value + datetime.timedelta(days=7))
        assert advance(_cd(value), Frequency.WEEK) == expected


def test_advance_month_clamps_to_february():
    assert advance(CalendarDate(2023, 1, 31), Frequency.MONTH) == CalendarDate(2023, 2, 28)
    assert advance(CalendarDate(2024, 1, 31), Frequency.MONTH) == CalendarDate(2024, 2, 29)


def test_advance_month_returns_to_anchor_day():
    assert advance(CalendarDate(2023, 2, 28), Frequency.MONTH, 31) == CalendarDate(2023, 3, 31)
    assert advance(CalendarDate(2023, 3, 31), Frequency.MONTH) == CalendarDate(2023, 4, 30)
    assert advance(CalendarDate(2023, 7, 31), Frequency.MONTH) == CalendarDate(2023, 8, 31)


def test_advance_month_over_year_end():
    assert advance(CalendarDate(2023, 12, 15), Frequency.MONTH) == CalendarDate(2024, 1, 15)


def test_advance_multi_month_frequencies():
    start = CalendarDate(2023, 5, 15)
    assert advance(start, Frequency.TWO_MONTHS) == CalendarDate(2023, 7, 15)
    assert advance(start, Frequency.QUARTER) == CalendarDate(2023, 8, 15)
    assert advance(start, Frequency.HALF_YEAR) == CalendarDate(2023, 11, 15)
    assert advance(start, Frequency.YEAR) == CalendarDate(2024, 5, 15)


@pytest.mark.parametrize("frequency", [Frequency.ONCE, Frequency.END_OF_TERM])
def test_advance_without_step_keeps_date(frequency):
    start = CalendarDate(2023, 5, 15)
    assert advance(start, frequency) == start


def test_advance_rejects_bad_anchor():
    with pytest.raises(ValueError):
        advance(CalendarDate(2023, 5, 15), Frequency.MONTH, 32)


@pytest.mark.parametrize(
    "year, month, day", [(2023, 2, 29), (2023, 13, 1), (2023, 4, 31), (0, 1, 1), (2023, 1, 0)]
)
def test_calendar_date_rejects_invalid(year, month, day):
    with pytest.raises(ValueError):
        CalendarDate(year, month, day)


def test_add_drop_frequency_menu():
    assert [add_drop_frequency(i) for i in range(6)] == [
        Frequency.ONCE,
        Frequency.MONTH,
        Frequency.TWO_MONTHS,
        Frequency.QUARTER,
        Frequency.HALF_YEAR,
        Frequency.YEAR,
    ]


def test_payout_frequency_menu():
    assert [payout_frequency(i) for i in range(7)] == [
        Frequency.DAY,
        Frequency.WEEK,
        Frequency.MONTH,
        Frequency.QUARTER,
        Frequency.HALF_YEAR,
        Frequency.YEAR,
        Frequency.END_OF_TERM,
    ]


@pytest.mark.parametrize("index", [-1, 6])
def test_add_drop_frequency_rejects_unknown(index):
    with pytest.raises(ValueError):
        add_drop_frequency(index)


@pytest.mark.parametrize("index", [-1, 7])
def test_payout_frequency_rejects_unknown(index):
    with pytest.raises(ValueError):
        payout_frequency(index)


def test_worked_example_simple_interest():
    result = calculate_deposit(
        CalendarDate(2023, 1, 1),
        100000,
        365,
        10,
        payout_frequency=Frequency.END_OF_TERM,
    )
    assert result.accrued_interest == pytest.approx(9999.93)
    assert result.end_term_amount == 100000


def test_tax_is_share_of_interest_without_allowance():
    result = calculate_deposit(
        CalendarDate(2023, 1, 1),
        100000,
        365,
        10,
        tax_rate=0,
        payout_frequency=Frequency.MONTH,
    )
    assert result.accrued_interest > 0
    assert result.tax_amount == pytest.approx(0.13 * result.accrued_interest)


def test_large_allowance_means_no_tax():
    result = calculate_deposit(
        CalendarDate(2023, 1, 1), 100000, 365, 10, tax_rate=50
    )
    assert result.tax_amount == 0


def test_capitalization_keeps_interest_in_balance():
    result = calculate_deposit(
        CalendarDate(2023, 3, 10),
        50000,
        200,
        8,
        payout_frequency=Frequency.MONTH,
        capitalization=True,
    )
    assert result.end_term_amount > 50000
    assert result.accrued_interest == pytest.approx(result.end_term_amount - 50000)


def test_daily_capitalization_beats_single_payout():
    start = CalendarDate(2023, 1, 1)
    daily = calculate_deposit(
        start, 100000, 365, 10, payout_frequency=Frequency.DAY, capitalization=True
    )
    once = calculate_deposit(
        start, 100000, 365, 10, payout_frequency=Frequency.END_OF_TERM, capitalization=True
    )
    assert daily.end_term_amount > once.end_term_amount


def test_payout_frequency_barely_changes_simple_interest():
    start = CalendarDate(2023, 1, 1)
    monthly = calculate_deposit(start, 100000, 365, 10, payout_frequency=Frequency.MONTH)
    at_end = calculate_deposit(start, 100000, 365, 10, payout_frequency=Frequency.END_OF_TERM)
    assert abs(monthly.accrued_interest - at_end.accrued_interest) < 0.1


def test_zero_term_leaves_amount():
    result = calculate_deposit(CalendarDate(2023, 1, 1), 1000, 0, 10)
    assert result == DepositResult(
        accrued_interest=0.0, tax_amount=0.0, end_term_amount=1000.0, net_additions=0.0
    )


def test_monthly_additions_with_capitalization():
    addition = Replenishment(CalendarDate(2023, 1, 15), 1000, Frequency.MONTH)
    result = calculate_deposit(
        CalendarDate(2023, 1, 1),
        100000,
        90,
        0,
        capitalization=True,
        addition=addition,
    )
    assert result.end_term_amount == 103000
    assert result.net_additions == 3000
    assert result.accrued_interest == 0


def test_additions_do_not_change_end_amount_without_capitalization():
    addition = Replenishment(CalendarDate(2023, 1, 15), 1000, Frequency.MONTH)
    result = calculate_deposit(
        CalendarDate(2023, 1, 1), 100000, 90, 0, addition=addition
    )
    assert result.end_term_amount == 100000
    assert result.net_additions == 3000


def test_one_time_addition_before_start_is_ignored():
    addition = Replenishment(CalendarDate(2022, 12, 1), 5000, Frequency.ONCE)
    result = calculate_deposit(
        CalendarDate(2023, 1, 1), 100000, 90, 0, capitalization=True, addition=addition
    )
    assert result.end_term_amount == 100000
    assert result.net_additions == 0


def test_withdrawal_reduces_balance_and_net_is_clamped():
    withdrawal = Replenishment(CalendarDate(2023, 2, 1), 5000, Frequency.ONCE)
    result = calculate_deposit(
        CalendarDate(2023, 1, 1),
        100000,
        90,
        0,
        capitalization=True,
        withdrawal=withdrawal,
    )
    assert result.end_term_amount == 95000
    assert result.net_additions == 0


def test_addition_raises_interest():
    start = CalendarDate(2023, 1, 1)
    plain = calculate_deposit(start, 100000, 180, 10, capitalization=True)
    topped = calculate_deposit(
        start,
        100000,
        180,
        10,
        capitalization=True,
        addition=Replenishment(CalendarDate(2023, 2, 1), 10000, Frequency.ONCE),
    )
    assert topped.accrued_interest > plain.accrued_interest
    assert topped.end_term_amount > plain.end_term_amount + 10000