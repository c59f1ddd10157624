"""
Analytics Module
=================

Read-only statistics over a user's consumption records. Each method fetches
the records of one window in a single query and hands them to the pure
functions in :mod:`apps.analytics.aggregation`.

Classes:
    AnalyticsQueries: Static methods backing the analytics endpoints.

Key Features:
    - Summary of any date window (totals, alcohol, busiest day, ranking)
    - Monthly statistics with a per-day calendar
    - Yearly statistics with a per-month breakdown
    - Day preview for the record entry screen
    - Home dashboard overview

Example:
    Getting this month's statistics::

        from apps.analytics.analytics import AnalyticsQueries

        stats = AnalyticsQueries.monthly_stats(user.id, 2024, 5)
        print(f"You had {stats['summary']['total_quantity']} drinks")
        for day in stats['calendar']:
            print(day['date'], day['quantity'])

Note:
    This module never modifies data. All methods are static and return
    plain dictionaries, ready for the response serializers.
"""

from django.conf import settings
from django.db.models import Sum
from django.db.models.functions import Coalesce
from decimal import Decimal

from apps.drinks.models import ConsumptionRecord, Drink
from apps.drinks.services import get_records, get_day_records
from .aggregation import (
    summarize,
    project_calendar,
    monthly_breakdown,
    month_bounds,
    year_bounds,
)
from .exceptions import InvalidPeriodError, InvalidDateRangeError


def _fetch_records(user_id, start_date, end_date):
    return list(get_records(owner=user_id, start_date=start_date, end_date=end_date))


def _check_year(year):
    if not 1 <= year <= 9999:
        raise InvalidPeriodError("Year must be between 1 and 9999")


def _check_month(year, month):
    _check_year(year)
    if not 1 <= month <= 12:
        raise InvalidPeriodError("Month must be between 1 and 12")


class AnalyticsQueries:
    """
    Statistics queries for the analytics endpoints.

    Methods:
        range_summary: Summary of an arbitrary inclusive date window.
        monthly_stats: Month summary plus a per-day calendar.
        yearly_stats: Year summary plus twelve monthly summaries.
        day_summary: Records and summary of a single day.
        overview: Headline numbers for the home dashboard.

    Example:
        Dashboard data::

            overview = AnalyticsQueries.overview(user.id, date.today())
            year = AnalyticsQueries.yearly_stats(user.id, 2024)
    """

    @staticmethod
    def range_summary(user_id, start_date, end_date):
        """
        Summarize a user's records between two dates, inclusive.

        Args:
            user_id (UUID): The user's unique identifier.
            start_date (date): First day of the window.
            end_date (date): Last day of the window.

        Returns:
            dict: ``period_start``, ``period_end`` and ``summary`` (see
            :func:`apps.analytics.aggregation.summarize`).

        Raises:
            InvalidDateRangeError: If start_date is after end_date, or the
                window is longer than ``DRINKS_STATS_MAX_RANGE_DAYS``.
        """
        if start_date > end_date:
            raise InvalidDateRangeError("Start date must be before end date")

        max_days = settings.DRINKS_STATS_MAX_RANGE_DAYS
        if (end_date - start_date).days + 1 > max_days:
            raise InvalidDateRangeError(f"Date range cannot exceed {max_days} days")

        records = _fetch_records(user_id, start_date, end_date)

        return {
            'period_start': start_date,
            'period_end': end_date,
            'summary': summarize(records),
        }

    @staticmethod
    def monthly_stats(user_id, year, month):
        """
        Statistics for one calendar month.

        The summary and the calendar are built from the same fetch, so they
        always agree with each other.

        Returns:
            dict: A dictionary containing:
                - period_start (date): First day of the month.
                - period_end (date): Last day of the month.
                - summary (dict): Summary of the month.
                - calendar (list[dict]): ``{date, quantity}`` for every day
                  of the month that has records, in date order.

        Raises:
            InvalidPeriodError: If year or month is out of range.
        """
        _check_month(year, month)
        start, end = month_bounds(year, month)
        records = _fetch_records(user_id, start, end)

        return {
            'period_start': start,
            'period_end': end,
            'summary': summarize(records),
            'calendar': [
                {'date': day, 'quantity': quantity}
                for day, quantity in project_calendar(records, start, end).items()
            ],
        }

    @staticmethod
    def yearly_stats(user_id, year):
        """
        Statistics for one calendar year.

        Returns:
            dict: A dictionary containing:
                - year (int): The requested year.
                - summary (dict): Summary of the whole year.
                - months (list[dict]): Exactly 12 entries, January first.
                  Each is a summary with an extra ``month`` key (1-12).

        Raises:
            InvalidPeriodError: If year is out of range.
        """
        _check_year(year)
        start, end = year_bounds(year)
        records = _fetch_records(user_id, start, end)

        months = [
            {'month': index + 1, **month_summary}
            for index, month_summary in enumerate(monthly_breakdown(records))
        ]

        return {
            'year': year,
            'summary': summarize(records),
            'months': months,
        }

    @staticmethod
    def day_summary(user_id, day):
        """
        Records and totals of a single day.

        Used by the record entry screen to preview what has been logged.
        """
        records = list(get_day_records(owner=user_id, day=day))

        return {
            'date': day,
            'records': records,
            'summary': summarize(records),
        }

    @staticmethod
    def overview(user_id, today):
        """
        Headline numbers for the home dashboard.

        Args:
            user_id (UUID): The user's unique identifier.
            today (date): Reference day; its month is "this month".

        Returns:
            dict: A dictionary containing:
                - today (date): The reference day.
                - drinks_count (int): Number of drinks the user has set up.
                - this_month_quantity (Decimal): Servings logged this month,
                  up to and including today.
                - total_quantity (Decimal): All-time servings.
                - average_daily (Decimal): this_month_quantity divided by
                  the day of month.

        Note:
            "This month" stops at ``today``. Records dated later in the
            month are left out, unlike the older dashboard which summed
            the whole calendar month.
        """
        month_start = today.replace(day=1)

        this_month = ConsumptionRecord.objects.filter(
            owner_id=user_id,
            date__gte=month_start,
            date__lte=today,
        ).aggregate(
            total=Coalesce(Sum('quantity'), Decimal('0'))
        )['total']

        total = ConsumptionRecord.objects.filter(owner_id=user_id).aggregate(
            total=Coalesce(Sum('quantity'), Decimal('0'))
        )['total']

        return {
            'today': today,
            'drinks_count': Drink.objects.filter(owner_id=user_id).count(),
            'this_month_quantity': this_month,
            'total_quantity': total,
            'average_daily': this_month / Decimal(today.day),
        }
