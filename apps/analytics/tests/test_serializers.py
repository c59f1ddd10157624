"""
Tests for analytics serializers.

Input serializers validate query parameters; response serializers round
amounts to two decimal places.
"""
from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import patch

from apps.analytics.aggregation import summarize
from apps.analytics.serializers import (
    PeriodQuerySerializer,
    MonthQuerySerializer,
    YearQuerySerializer,
    SummarySerializer,
)


class TestPeriodQuerySerializer:
    """Test PeriodQuerySerializer validation."""

    def test_valid_period_format(self):
        """Test valid period format (YYYY-MM)."""
        serializer = PeriodQuerySerializer(data={'period': '2025-01'})
        assert serializer.is_valid()
        assert serializer.validated_data['start_date'] == date(2025, 1, 1)
        assert serializer.validated_data['end_date'] == date(2025, 1, 31)

    def test_valid_period_leap_february(self):
        serializer = PeriodQuerySerializer(data={'period': '2024-02'})
        assert serializer.is_valid()
        assert serializer.validated_data['end_date'] == date(2024, 2, 29)

    def test_period_takes_precedence(self):
        """Period wins over explicit dates."""
        serializer = PeriodQuerySerializer(data={
            'period': '2024-12',
            'start_date': '2020-01-01',
            'end_date': '2020-01-02',
        })
        assert serializer.is_valid()
        assert serializer.validated_data['start_date'] == date(2024, 12, 1)
        assert serializer.validated_data['end_date'] == date(2024, 12, 31)

    def test_invalid_period_format(self):
        """Test invalid period format (missing leading zero)."""
        serializer = PeriodQuerySerializer(data={'period': '2025-1'})
        assert not serializer.is_valid()
        assert 'period' in serializer.errors

    def test_invalid_period_month(self):
        serializer = PeriodQuerySerializer(data={'period': '2025-00'})
        assert not serializer.is_valid()
        assert 'period' in serializer.errors

    def test_period_year_zero_rejected(self):
        serializer = PeriodQuerySerializer(data={'period': '0000-05'})
        assert not serializer.is_valid()
        assert 'period' in serializer.errors

    def test_date_range_valid(self):
        serializer = PeriodQuerySerializer(data={
            'start_date': '2025-01-01',
            'end_date': '2025-01-31',
        })
        assert serializer.is_valid()
        assert serializer.validated_data['start_date'] == date(2025, 1, 1)

    def test_date_range_reversed(self):
        serializer = PeriodQuerySerializer(data={
            'start_date': '2025-01-31',
            'end_date': '2025-01-01',
        })
        assert not serializer.is_valid()
        assert 'start_date' in serializer.errors

    def test_single_date_rejected(self):
        """Only one end of the range is not enough."""
        serializer = PeriodQuerySerializer(data={'start_date': '2025-01-01'})
        assert not serializer.is_valid()

    def test_nothing_given_rejected(self):
        serializer = PeriodQuerySerializer(data={})
        assert not serializer.is_valid()


class TestMonthAndYearQuerySerializers:
    """Test MonthQuerySerializer and YearQuerySerializer."""

    def test_month_split(self):
        serializer = MonthQuerySerializer(data={'period': '2024-05'})
        assert serializer.is_valid()
        assert serializer.validated_data['year'] == 2024
        assert serializer.validated_data['month'] == 5

    def test_month_year_zero_rejected(self):
        serializer = MonthQuerySerializer(data={'period': '0000-05'})
        assert not serializer.is_valid()
        assert 'period' in serializer.errors

    @patch('apps.analytics.serializers.timezone.localdate', return_value=date(2024, 7, 9))
    def test_month_defaults_to_today(self, _localdate):
        serializer = MonthQuerySerializer(data={})
        assert serializer.is_valid()
        assert serializer.validated_data['year'] == 2024
        assert serializer.validated_data['month'] == 7

    def test_year_valid(self):
        serializer = YearQuerySerializer(data={'year': '2024'})
        assert serializer.is_valid()
        assert serializer.validated_data['year'] == 2024

    @patch('apps.analytics.serializers.timezone.localdate', return_value=date(2023, 3, 1))
    def test_year_defaults_to_today(self, _localdate):
        serializer = YearQuerySerializer(data={})
        assert serializer.is_valid()
        assert serializer.validated_data['year'] == 2023

    def test_year_out_of_range(self):
        serializer = YearQuerySerializer(data={'year': '0'})
        assert not serializer.is_valid()
        assert 'year' in serializer.errors


class TestSummarySerializer:
    """Test rounding in SummarySerializer."""

    def test_amounts_rounded_to_two_places(self):
        drink = SimpleNamespace(
            id='x', name='Strong', type='can',
            volume=Decimal('333'), alcohol_percentage=Decimal('7.7'),
        )
        records = [
            SimpleNamespace(date=date(2024, 5, 1), quantity=Decimal('1'), drink=drink),
            SimpleNamespace(date=date(2024, 5, 2), quantity=Decimal('1'), drink=drink),
            SimpleNamespace(date=date(2024, 5, 3), quantity=Decimal('1.5'), drink=drink),
        ]

        data = SummarySerializer(summarize(records)).data

        # 3.5 / 3
        assert data['avg_per_day'] == Decimal('1.17')
        # 3.5 * 333 * 7.7 / 100 = 89.7435
        assert data['total_alcohol'] == Decimal('89.74')
        assert data['drinking_days'] == 3
        assert data['ranking'][0]['drink']['name'] == 'Strong'
