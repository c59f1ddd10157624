"""
Domain exceptions for analytics app.

These are raised by AnalyticsQueries when a requested statistics window
makes no sense. Views translate them into HTTP 400 responses.

Exception Hierarchy:
    AnalyticsServiceError (base)
    ├── InvalidPeriodError
    └── InvalidDateRangeError

Usage:
    from apps.analytics.exceptions import InvalidDateRangeError

    if start_date > end_date:
        raise InvalidDateRangeError("Start date must be before end date")
"""


class AnalyticsServiceError(Exception):
    """
    Base exception for all analytics service errors.

    Catch this in views to handle every analytics error at once:

        try:
            data = AnalyticsQueries.yearly_stats(user.id, year)
        except AnalyticsServiceError as e:
            raise ValidationError(str(e))
    """

    pass


class InvalidPeriodError(AnalyticsServiceError):
    """
    Raised when a year or month is outside the calendar.

    Example:
        raise InvalidPeriodError("Month must be between 1 and 12")
    """

    pass


class InvalidDateRangeError(AnalyticsServiceError):
    """
    Raised when a date range is reversed or longer than allowed.

    Example:
        raise InvalidDateRangeError("Start date must be before end date")
    """

    pass
