"""
Tests for the pure aggregation functions.

These run on plain objects and need no database.
"""
import copy
import random
from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest

from apps.analytics.aggregation import (
    summarize,
    project_calendar,
    monthly_breakdown,
    month_bounds,
    year_bounds,
    empty_summary,
)


def make_drink(drink_id, volume, abv):
    return SimpleNamespace(id=drink_id, volume=volume, alcohol_percentage=abv)


def make_record(day, quantity, drink):
    return SimpleNamespace(date=day, quantity=quantity, drink=drink)


@pytest.fixture
def lager():
    return make_drink('lager', Decimal('500'), Decimal('5'))


@pytest.fixture
def pale_ale():
    return make_drink('pale-ale', Decimal('330'), Decimal('4.5'))


@pytest.fixture
def sample_records(lager, pale_ale):
    return [
        make_record(date(2024, 5, 1), Decimal('2'), lager),
        make_record(date(2024, 5, 1), Decimal('1'), pale_ale),
        make_record(date(2024, 5, 3), Decimal('3'), lager),
    ]


@pytest.fixture
def year_records(lager, pale_ale):
    return [
        make_record(date(2024, 1, 1), Decimal('1'), lager),
        make_record(date(2024, 1, 31), Decimal('0.5'), pale_ale),
        make_record(date(2024, 2, 29), Decimal('2'), pale_ale),
        make_record(date(2024, 7, 15), Decimal('4'), lager),
        make_record(date(2024, 12, 31), Decimal('1.25'), lager),
    ]


# =============================================================================
# summarize
# =============================================================================

class TestSummarize:
    """Tests for summarize()."""

    def test_example_records(self, sample_records, lager, pale_ale):
        summary = summarize(sample_records)

        assert summary['total_quantity'] == Decimal('6')
        assert summary['drinking_days'] == 2
        assert summary['max_in_day'] == Decimal('3')
        assert summary['avg_per_day'] == Decimal('3')

    def test_volume_and_alcohol(self, sample_records):
        """Volume is quantity x ml; alcohol is volume x abv / 100."""
        summary = summarize(sample_records)

        # 2*500 + 1*330 + 3*500
        assert summary['total_volume'] == Decimal('2830')
        # 1000*5% + 330*4.5% + 1500*5%
        assert summary['total_alcohol'] == Decimal('139.85')

    def test_ranking(self, sample_records, lager, pale_ale):
        ranking = summarize(sample_records)['ranking']

        assert [entry['drink'] for entry in ranking] == [lager, pale_ale]
        assert ranking[0]['quantity'] == Decimal('5')
        assert ranking[0]['volume'] == Decimal('2500')
        assert ranking[1]['quantity'] == Decimal('1')
        assert ranking[1]['volume'] == Decimal('330')

    def test_empty_input(self):
        """No records gives all zeros and no division error."""
        summary = summarize([])

        assert summary == empty_summary()
        assert summary['drinking_days'] == 0
        assert summary['avg_per_day'] == 0
        assert summary['ranking'] == []

    def test_total_independent_of_order(self, year_records):
        shuffled = list(year_records)
        random.Random(7).shuffle(shuffled)

        assert summarize(shuffled)['total_quantity'] == summarize(year_records)['total_quantity']
        assert summarize(shuffled)['total_alcohol'] == summarize(year_records)['total_alcohol']

    def test_total_quantity_is_sum(self, year_records):
        expected = sum((r.quantity for r in year_records), Decimal('0'))

        assert summarize(year_records)['total_quantity'] == expected

    def test_max_in_day_is_greatest_daily_sum(self, lager, pale_ale):
        records = [
            make_record(date(2024, 5, 1), Decimal('1'), lager),
            make_record(date(2024, 5, 2), Decimal('1.5'), lager),
            make_record(date(2024, 5, 2), Decimal('1.5'), pale_ale),
            make_record(date(2024, 5, 3), Decimal('2'), pale_ale),
        ]

        assert summarize(records)['max_in_day'] == Decimal('3')

    def test_stable_ranking_on_ties(self, lager, pale_ale):
        """Drinks with equal quantity keep first-encountered order."""
        records = [
            make_record(date(2024, 5, 1), Decimal('2'), pale_ale),
            make_record(date(2024, 5, 2), Decimal('2'), lager),
        ]

        ranking = summarize(records)['ranking']
        assert [entry['drink'] for entry in ranking] == [pale_ale, lager]

        ranking = summarize(list(reversed(records)))['ranking']
        assert [entry['drink'] for entry in ranking] == [lager, pale_ale]

    def test_ranking_keyed_by_id(self):
        """Two objects with the same id are the same drink."""
        first = make_drink(1, Decimal('500'), Decimal('5'))
        same = make_drink(1, Decimal('500'), Decimal('5'))
        records = [
            make_record(date(2024, 5, 1), Decimal('1'), first),
            make_record(date(2024, 5, 2), Decimal('2'), same),
        ]

        ranking = summarize(records)['ranking']
        assert len(ranking) == 1
        assert ranking[0]['quantity'] == Decimal('3')

    def test_idempotent_and_no_mutation(self, year_records):
        before = copy.deepcopy(year_records)

        first = summarize(year_records)
        second = summarize(year_records)

        assert first == second
        assert year_records == before

    def test_record_without_drink(self, lager):
        """Missing drink counts towards quantity and days only."""
        records = [
            make_record(date(2024, 5, 1), Decimal('1'), lager),
            make_record(date(2024, 5, 2), Decimal('2'), None),
        ]

        summary = summarize(records)

        assert summary['total_quantity'] == Decimal('3')
        assert summary['drinking_days'] == 2
        assert summary['total_volume'] == Decimal('500')
        assert summary['total_alcohol'] == Decimal('25')
        assert len(summary['ranking']) == 1

    def test_non_decimal_inputs(self):
        """Floats and ints are converted without binary rounding noise."""
        drink = make_drink('x', 330, 4.5)
        records = [
            make_record(date(2024, 5, 1), 0.1, drink),
            make_record(date(2024, 5, 1), 0.2, drink),
        ]

        summary = summarize(records)

        assert summary['total_quantity'] == Decimal('0.3')
        assert summary['total_volume'] == Decimal('99')

    def test_fractional_average(self, lager):
        records = [
            make_record(date(2024, 5, 1), Decimal('1'), lager),
            make_record(date(2024, 5, 2), Decimal('1'), lager),
            make_record(date(2024, 5, 3), Decimal('2'), lager),
        ]

        avg = summarize(records)['avg_per_day']
        assert avg.quantize(Decimal('0.01')) == Decimal('1.33')


# =============================================================================
# Calendar and boundaries
# =============================================================================

class TestProjectCalendar:
    """Tests for project_calendar() and date boundaries."""

    def test_daily_totals(self, sample_records):
        start, end = month_bounds(2024, 5)

        calendar = project_calendar(sample_records, start, end)

        assert calendar == {
            date(2024, 5, 1): Decimal('3'),
            date(2024, 5, 3): Decimal('3'),
        }

    def test_days_outside_month_ignored(self, year_records):
        start, end = month_bounds(2024, 1)

        calendar = project_calendar(year_records, start, end)

        assert list(calendar) == [date(2024, 1, 1), date(2024, 1, 31)]

    def test_sorted_by_date(self, lager):
        records = [
            make_record(date(2024, 5, 20), Decimal('1'), lager),
            make_record(date(2024, 5, 2), Decimal('1'), lager),
        ]
        start, end = month_bounds(2024, 5)

        assert list(project_calendar(records, start, end)) == [date(2024, 5, 2), date(2024, 5, 20)]

    def test_empty(self):
        start, end = month_bounds(2024, 5)
        assert project_calendar([], start, end) == {}

    @pytest.mark.parametrize('year,month,last_day', [
        (2024, 2, 29),
        (2023, 2, 28),
        (2024, 4, 30),
        (2024, 12, 31),
    ])
    def test_month_bounds(self, year, month, last_day):
        start, end = month_bounds(year, month)

        assert start == date(year, month, 1)
        assert end == date(year, month, last_day)

    def test_year_bounds(self):
        assert year_bounds(2024) == (date(2024, 1, 1), date(2024, 12, 31))


# =============================================================================
# monthly_breakdown
# =============================================================================

class TestMonthlyBreakdown:
    """Tests for monthly_breakdown()."""

    def test_twelve_months(self, year_records):
        months = monthly_breakdown(year_records)

        assert len(months) == 12
        assert months[0]['total_quantity'] == Decimal('1.5')
        assert months[0]['drinking_days'] == 2
        assert months[1]['total_quantity'] == Decimal('2')
        assert months[6]['total_quantity'] == Decimal('4')
        assert months[11]['total_quantity'] == Decimal('1.25')

    def test_empty_months_are_zero(self, year_records):
        months = monthly_breakdown(year_records)

        for index in (2, 3, 4, 5, 7, 8, 9, 10):
            assert months[index] == empty_summary()

    def test_empty_year(self):
        assert monthly_breakdown([]) == [empty_summary() for _ in range(12)]

    @pytest.mark.parametrize('key', ['total_quantity', 'total_volume', 'total_alcohol'])
    def test_months_add_up_to_year(self, year_records, key):
        months = monthly_breakdown(year_records)
        year = summarize(year_records)

        assert sum((month[key] for month in months), Decimal('0')) == year[key]
