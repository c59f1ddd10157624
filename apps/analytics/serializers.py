"""
Serializers for analytics app.

This module contains:
1. Input serializers - Query parameter validation
2. Response serializers - API documentation and output formatting

Input Serializers:
    PeriodQuerySerializer - Validates period or date range parameters
    MonthQuerySerializer - Validates the YYYY-MM period of a month
    YearQuerySerializer - Validates the year parameter

Response Serializers:
    SummarySerializer - Totals, drinking days and ranking
    RangeSummarySerializer - Summary of a date window
    MonthlyStatsSerializer - Month summary with calendar
    YearlyStatsSerializer - Year summary with 12 months
    DaySummarySerializer - Records and summary of one day
    OverviewSerializer - Home dashboard numbers

Quantities, volumes and alcohol are rendered as numbers rounded to
2 decimal places.
"""

from django.utils import timezone
from rest_framework import serializers
from apps.drinks.serializers import DrinkMinimalSerializer, ConsumptionRecordSerializer
from .aggregation import month_bounds


def _amount_field(**kwargs):
    return serializers.DecimalField(
        max_digits=16,
        decimal_places=2,
        coerce_to_string=False,
        read_only=True,
        **kwargs
    )


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

PERIOD_REGEX = r'^(?!0000)\d{4}-(0[1-9]|1[0-2])$'


def _parse_period(period):
    year, month = period.split('-')
    return int(year), int(month)


class PeriodQuerySerializer(serializers.Serializer):
    """
    Validate period and date range query parameters.

    Used by: summary

    Query Parameters:
        period (str): Month period in YYYY-MM format (e.g., '2025-01')
        start_date (date): Start of date range
        end_date (date): End of date range

    Note:
        If 'period' is provided, it takes precedence and is converted
        to start_date and end_date for the full month. Otherwise both
        dates are required.
    """

    period = serializers.RegexField(
        regex=PERIOD_REGEX,
        required=False,
        allow_blank=True,
        help_text='Month period in YYYY-MM format'
    )
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)

    def validate(self, attrs):
        """Turn period into a date range, or require both dates."""
        period = attrs.get('period')

        if period:
            year, month = _parse_period(period)
            attrs['start_date'], attrs['end_date'] = month_bounds(year, month)

        start = attrs.get('start_date')
        end = attrs.get('end_date')

        if start is None or end is None:
            raise serializers.ValidationError(
                'Provide either period or both start_date and end_date'
            )

        if start > end:
            raise serializers.ValidationError({
                'start_date': 'Start date must be before end date'
            })

        return attrs


class MonthQuerySerializer(serializers.Serializer):
    """
    Validate the month of the monthly statistics endpoint.

    Query Parameters:
        period (str): Month in YYYY-MM format; defaults to the current month
    """

    period = serializers.RegexField(
        regex=PERIOD_REGEX,
        required=False,
        help_text='Month period in YYYY-MM format'
    )

    def validate(self, attrs):
        """Split period into year and month."""
        period = attrs.get('period') or timezone.localdate().strftime('%Y-%m')
        attrs['year'], attrs['month'] = _parse_period(period)
        return attrs


class YearQuerySerializer(serializers.Serializer):
    """
    Validate the year of the yearly statistics endpoint.

    Query Parameters:
        year (int): Calendar year; defaults to the current year
    """

    year = serializers.IntegerField(
        min_value=1,
        max_value=9999,
        required=False,
        help_text='Calendar year (e.g., 2025)'
    )

    def validate(self, attrs):
        attrs.setdefault('year', timezone.localdate().year)
        return attrs


# =============================================================================
# Response Serializers (API Documentation)
# =============================================================================

class RankingEntrySerializer(serializers.Serializer):
    """One drink in the consumption ranking."""

    drink = DrinkMinimalSerializer()
    quantity = _amount_field()
    volume = _amount_field(help_text='Total volume in ml')


class SummarySerializer(serializers.Serializer):
    """Statistics of a set of records."""

    total_quantity = _amount_field()
    total_volume = _amount_field(help_text='Total volume in ml')
    total_alcohol = _amount_field(help_text='Pure alcohol in ml')
    drinking_days = serializers.IntegerField()
    max_in_day = _amount_field()
    avg_per_day = _amount_field()
    ranking = RankingEntrySerializer(many=True)


class RangeSummarySerializer(serializers.Serializer):
    """Summary of a date window."""

    period_start = serializers.DateField()
    period_end = serializers.DateField()
    summary = SummarySerializer()


class CalendarDaySerializer(serializers.Serializer):
    """Total quantity on one calendar day."""

    date = serializers.DateField()
    quantity = _amount_field()


class MonthlyStatsSerializer(serializers.Serializer):
    """Month summary with per-day calendar."""

    period_start = serializers.DateField()
    period_end = serializers.DateField()
    summary = SummarySerializer()
    calendar = CalendarDaySerializer(many=True)


class MonthSummarySerializer(SummarySerializer):
    """Summary of one month within a year."""

    month = serializers.IntegerField()


class YearlyStatsSerializer(serializers.Serializer):
    """Year summary with a breakdown for each of the 12 months."""

    year = serializers.IntegerField()
    summary = SummarySerializer()
    months = MonthSummarySerializer(many=True)


class DaySummarySerializer(serializers.Serializer):
    """Records and totals of one day."""

    date = serializers.DateField()
    records = ConsumptionRecordSerializer(many=True)
    summary = SummarySerializer()


class OverviewSerializer(serializers.Serializer):
    """Home dashboard numbers."""

    today = serializers.DateField()
    drinks_count = serializers.IntegerField()
    this_month_quantity = _amount_field()
    total_quantity = _amount_field()
    average_daily = _amount_field()


class ErrorSerializer(serializers.Serializer):
    """Standard error response."""

    error = serializers.CharField()
