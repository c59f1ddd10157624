"""
Aggregation Module
==================

Pure functions that turn a list of consumption records into statistics.
Nothing here touches the database: callers fetch records (each with its
drink joined in) and pass them in.

Functions:
    summarize: Totals, drinking days, busiest day, average and ranking.
    project_calendar: Per-day total quantity for a calendar month.
    monthly_breakdown: Twelve per-month summaries for a year.
    month_bounds / year_bounds: Inclusive date boundaries.

A record is anything exposing ``date``, ``quantity`` and ``drink``; a drink
exposes ``id``, ``volume`` and ``alcohol_percentage``. ``drink`` may be
None, in which case the record counts towards quantity and drinking days
but adds no volume, no alcohol and no ranking entry.

Example:
    Summarizing a month::

        from apps.analytics.aggregation import summarize, month_bounds

        start, end = month_bounds(2024, 5)
        records = get_records(owner=user, start_date=start, end_date=end)
        summary = summarize(records)
        print(f"{summary['total_quantity']} servings on {summary['drinking_days']} days")

Note:
    All arithmetic is done with Decimal so totals don't depend on the order
    records arrive in. Inputs are never mutated.
"""

import calendar
from datetime import date
from decimal import Decimal

ZERO = Decimal('0')
HUNDRED = Decimal('100')


def _to_decimal(value):
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def month_bounds(year, month):
    """Return the first and last day of a calendar month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def year_bounds(year):
    """Return January 1st and December 31st of a year."""
    return date(year, 1, 1), date(year, 12, 31)


def empty_summary():
    """Summary of no records at all."""
    return {
        'total_quantity': ZERO,
        'total_volume': ZERO,
        'total_alcohol': ZERO,
        'drinking_days': 0,
        'max_in_day': ZERO,
        'avg_per_day': ZERO,
        'ranking': [],
    }


def summarize(records):
    """
    Aggregate consumption records into summary statistics.

    Args:
        records (Iterable): Records with ``date``, ``quantity`` and ``drink``.

    Returns:
        dict: A dictionary containing:
            - total_quantity (Decimal): Sum of all quantities.
            - total_volume (Decimal): Sum of quantity x drink volume (ml).
            - total_alcohol (Decimal): Sum of quantity x volume x abv / 100,
              i.e. milliliters of pure alcohol.
            - drinking_days (int): Number of distinct dates.
            - max_in_day (Decimal): Largest per-date quantity sum.
            - avg_per_day (Decimal): total_quantity / drinking_days, 0 when
              there are no drinking days.
            - ranking (list[dict]): One entry per distinct drink id with
              ``drink``, ``quantity`` and ``volume``, highest quantity first.
              Equal quantities keep the order drinks were first seen in.

    Example:
        >>> summary = summarize([])
        >>> summary['avg_per_day'], summary['ranking']
        (Decimal('0'), [])
    """
    total_quantity = ZERO
    total_volume = ZERO
    total_alcohol = ZERO
    per_day = {}
    per_drink = {}

    for record in records:
        quantity = _to_decimal(record.quantity)
        total_quantity += quantity
        per_day[record.date] = per_day.get(record.date, ZERO) + quantity

        drink = getattr(record, 'drink', None)
        if drink is None:
            continue

        volume = quantity * _to_decimal(drink.volume)
        total_volume += volume
        total_alcohol += volume * _to_decimal(drink.alcohol_percentage) / HUNDRED

        entry = per_drink.get(drink.id)
        if entry is None:
            entry = per_drink[drink.id] = {
                'drink': drink,
                'quantity': ZERO,
                'volume': ZERO,
                'first_seen': len(per_drink),
            }
        entry['quantity'] += quantity
        entry['volume'] += volume

    drinking_days = len(per_day)

    ranked = sorted(
        per_drink.values(),
        key=lambda entry: (-entry['quantity'], entry['first_seen'])
    )

    return {
        'total_quantity': total_quantity,
        'total_volume': total_volume,
        'total_alcohol': total_alcohol,
        'drinking_days': drinking_days,
        'max_in_day': max(per_day.values()) if per_day else ZERO,
        'avg_per_day': total_quantity / drinking_days if drinking_days else ZERO,
        'ranking': [
            {
                'drink': entry['drink'],
                'quantity': entry['quantity'],
                'volume': entry['volume'],
            }
            for entry in ranked
        ],
    }


def project_calendar(records, month_start, month_end):
    """
    Total quantity per day, for rendering a month as a calendar grid.

    Only days between ``month_start`` and ``month_end`` (inclusive) that have
    at least one record appear in the result; a missing day means zero.

    Args:
        records (Iterable): Records of the month.
        month_start (date): First day of the month.
        month_end (date): Last day of the month.

    Returns:
        dict[date, Decimal]: Day -> summed quantity, in date order.
    """
    totals = {}
    for record in records:
        if month_start <= record.date <= month_end:
            totals[record.date] = totals.get(record.date, ZERO) + _to_decimal(record.quantity)

    return dict(sorted(totals.items()))


def monthly_breakdown(records):
    """
    Summarize a year of records month by month.

    Records are partitioned by calendar month and each partition goes
    through :func:`summarize` on its own.

    Returns:
        list[dict]: Exactly 12 summaries; index 0 is January. Months
        without records get an all-zero summary.
    """
    months = [[] for _ in range(12)]
    for record in records:
        months[record.date.month - 1].append(record)

    return [summarize(month_records) for month_records in months]
