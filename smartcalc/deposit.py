"""Deposit yield calculation with payouts, replenishments and withdrawals."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

from .credit import round_payment

__all__ = [
    "Frequency",
    "EventKind",
    "CalendarDate",
    "Replenishment",
    "DepositResult",
    "is_leap_year",
    "day_number",
    "advance",
    "add_drop_frequency",
    "payout_frequency",
    "calculate_deposit",
]

MONTHS_IN_YEAR = 12
NONTAXABLE_BASE = 1000000
TAX_SHARE = 0.13
EPSILON = 1e-7

_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
_MONTH_LENGTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class Frequency(enum.IntEnum):
    """How often an event repeats."""

    ONCE = 0
    DAY = 1
    QUARTER = 3
    HALF_YEAR = 6
    WEEK = 7
    YEAR = 12
    END_OF_TERM = 13
    MONTH = 31
    TWO_MONTHS = 32


_MONTH_STEPS: dict[Frequency, int] = {
    Frequency.MONTH: 1,
    Frequency.TWO_MONTHS: 2,
    Frequency.QUARTER: 3,
    Frequency.HALF_YEAR: 6,
    Frequency.YEAR: 12,
}

_DAY_STEPS: dict[Frequency, int] = {
    Frequency.DAY: 1,
    Frequency.WEEK: 7,
}


class EventKind(enum.IntEnum):
    """Kinds of events on a deposit's schedule."""

    YEAR = 12
    PAYOUT = 13
    ADD = 14
    DROP = 15


def is_leap_year(year: int) -> bool:
    """Return whether ``year`` is a Gregorian leap year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _month_length(month: int, year: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTH[month]


def _year_length(year: int) -> int:
    return 366 if is_leap_year(year) else 365


@dataclass(frozen=True)
class CalendarDate:
    """A day of the Gregorian calendar."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if self.year < 1:
            raise ValueError(f"year out of range: {self.year}")
        if not 1 <= self.month <= MONTHS_IN_YEAR:
            raise ValueError(f"month out of range: {self.month}")
        if not 1 <= self.day <= _month_length(self.month, self.year):
            raise ValueError(f"day out of range: {self.day}")


@dataclass(frozen=True)
class Replenishment:
    """A deposit or withdrawal of ``amount``, first on ``date``, then repeating."""

    date: CalendarDate
    amount: float
    frequency: Frequency = Frequency.ONCE


@dataclass(frozen=True)
class DepositResult:
    """Outcome of a deposit calculation."""

    accrued_interest: float
    tax_amount: float
    end_term_amount: float
    net_additions: float


@dataclass(frozen=True)
class _Event:
    day: int
    kind: EventKind
    amount: float
    date: CalendarDate


def day_number(date: CalendarDate) -> int:
    """Return a running day count, so that differences give days between dates."""
    previous = date.year - 1
    number = date.day + _DAYS_BEFORE_MONTH[date.month]
    number += 366 if is_leap_year(date.year) and date.month > 2 else 365
    number += previous * 365 + previous // 4 - previous // 100 + previous // 400
    return number


def _shift_days(date: CalendarDate, days: int) -> CalendarDate:
    day = date.day + days
    length = _month_length(date.month, date.year)
    if day <= length:
        return replace(date, day=day)
    if date.month == MONTHS_IN_YEAR:
        return CalendarDate(date.year + 1, 1, day - length)
    return CalendarDate(date.year, date.month + 1, day - length)


def _next_month(date: CalendarDate, anchor_day: int) -> CalendarDate:
    if date.month == MONTHS_IN_YEAR:
        year, month = date.year + 1, 1
    else:
        year, month = date.year, date.month + 1
    return CalendarDate(year, month, min(anchor_day, _month_length(month, year)))


def advance(
    date: CalendarDate, frequency: Frequency, anchor_day: int | None = None
) -> CalendarDate:
    """Return the date one period of ``frequency`` after ``date``.

    Monthly steps land on ``anchor_day`` (the day of ``date`` by default),
    or on the last day of a shorter month. ONCE and END_OF_TERM do not move.
    """
    frequency = Frequency(frequency)
    anchor = date.day if anchor_day is None else anchor_day
    if not 1 <= anchor <= 31:
        raise ValueError(f"anchor day out of range: {anchor}")
    if frequency in _DAY_STEPS:
        return _shift_days(date, _DAY_STEPS[frequency])
    for _ in range(_MONTH_STEPS.get(frequency, 0)):
        date = _next_month(date, anchor)
    return date


_ADD_DROP_CHOICES = (
    Frequency.ONCE,
    Frequency.MONTH,
    Frequency.TWO_MONTHS,
    Frequency.QUARTER,
    Frequency.HALF_YEAR,
    Frequency.YEAR,
)

_PAYOUT_CHOICES = (
    Frequency.DAY,
    Frequency.WEEK,
    Frequency.MONTH,
    Frequency.QUARTER,
    Frequency.HALF_YEAR,
    Frequency.YEAR,
    Frequency.END_OF_TERM,
)


def add_drop_frequency(index: int) -> Frequency:
    """Return the replenishment frequency at position ``index`` of the menu."""
    if not 0 <= index < len(_ADD_DROP_CHOICES):
        raise ValueError(f"no replenishment frequency at index {index}")
    return _ADD_DROP_CHOICES[index]


def payout_frequency(index: int) -> Frequency:
    """Return the payout frequency at position ``index`` of the menu."""
    if not 0 <= index < len(_PAYOUT_CHOICES):
        raise ValueError(f"no payout frequency at index {index}")
    return _PAYOUT_CHOICES[index]


def _year_end_events(start: CalendarDate, term: int) -> tuple[list[_Event], int]:
    events: list[_Event] = []
    period_start = day_number(start)
    remaining = term
    gap = 0
    year = start.year
    years = 1
    while remaining > gap:
        year_end = CalendarDate(year, MONTHS_IN_YEAR, 31)
        period_end = day_number(year_end)
        gap = period_end - period_start
        if remaining > gap:
            events.append(_Event(period_end, EventKind.YEAR, 0.0, year_end))
            year += 1
            years += 1
            period_start = period_end
        remaining -= gap
    return events, years


def _payout_events(
    start: CalendarDate, term: int, frequency: Frequency
) -> list[_Event]:
    events: list[_Event] = []
    period_start = day_number(start)
    remaining = term
    current = advance(start, frequency, start.day)
    period_end = day_number(current)
    gap = period_end - period_start
    # A frequency that does not move leaves a single payout at the end.
    if gap > 0 and remaining > gap:
        while remaining >= gap:
            period_start = period_end
            remaining -= gap
            events.append(_Event(period_end, EventKind.PAYOUT, 0.0, current))
            current = advance(current, frequency, start.day)
            period_end = day_number(current)
            gap = period_end - period_start
    if remaining > 0:
        events.append(
            _Event(period_start + remaining, EventKind.PAYOUT, 0.0, current)
        )
    return events


def _replenishment_events(
    start: CalendarDate, term: int, item: Replenishment, kind: EventKind
) -> list[_Event]:
    events: list[_Event] = []
    start_day = day_number(start)
    period_end = start_day + term
    anchor = item.date.day
    current = item.date
    event_day = day_number(current)
    while True:
        if start_day < event_day:
            events.append(_Event(event_day, kind, item.amount, current))
        following = advance(current, item.frequency, anchor)
        if following == current:
            break
        current = following
        event_day = day_number(current)
        if event_day > period_end:
            break
    return events


def calculate_deposit(
    start: CalendarDate,
    amount: float,
    term: float,
    interest_rate: float,
    tax_rate: float = 0.0,
    payout_frequency: Frequency = Frequency.MONTH,
    capitalization: bool = False,
    addition: Replenishment | None = None,
    withdrawal: Replenishment | None = None,
) -> DepositResult:
    """Compute interest, tax and the final amount of a deposit.

    ``term`` is in days, ``interest_rate`` and ``tax_rate`` are yearly
    percentages. With ``capitalization`` interest paid out is added to the
    balance; without it the final amount is the initial ``amount``.
    """
    days = int(term)
    frequency = Frequency(payout_frequency)

    events, years = _year_end_events(start, days)
    events += _payout_events(start, days, frequency)
    if addition is not None:
        events += _replenishment_events(start, days, addition, EventKind.ADD)
    if withdrawal is not None:
        events += _replenishment_events(start, days, withdrawal, EventKind.DROP)
    events.sort(key=lambda event: event.day)

    last_day = day_number(start)
    day_rate = interest_rate / _year_length(start.year) / 100
    accumulated = 0.0
    balance = float(amount)
    net_additions = 0.0
    paid_interest = 0.0

    for event in events:
        period = event.day - last_day
        last_day = event.day
        if event.kind is EventKind.YEAR:
            accumulated = balance * day_rate * period
            day_rate = interest_rate / _year_length(event.date.year + 1) / 100
        elif event.kind in (EventKind.ADD, EventKind.DROP):
            accumulated += balance * day_rate * period
            change = event.amount if event.kind is EventKind.ADD else -event.amount
            balance += change
            net_additions += change
        else:
            accumulated += balance * day_rate * period
            if capitalization:
                balance += round_payment(accumulated)
            else:
                paid_interest += round_payment(accumulated)
            accumulated = 0.0

    if net_additions <= EPSILON:
        net_additions = 0.0
    if capitalization:
        paid_interest = balance - amount - net_additions
    else:
        balance = float(amount)

    tax = NONTAXABLE_BASE // 100 * tax_rate * years - paid_interest
    tax = -tax if tax <= EPSILON * NONTAXABLE_BASE else 0.0
    tax *= TAX_SHARE

    return DepositResult(
        accrued_interest=paid_interest,
        tax_amount=tax,
        end_term_amount=balance,
        net_additions=net_additions,
    )