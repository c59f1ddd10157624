from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from django.utils import timezone
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from apps.drinks.serializers import DayParamSerializer
from .analytics import AnalyticsQueries
from .serializers import (
    # Input serializers
    PeriodQuerySerializer,
    MonthQuerySerializer,
    YearQuerySerializer,
    # Response serializers
    RangeSummarySerializer,
    MonthlyStatsSerializer,
    YearlyStatsSerializer,
    DaySummarySerializer,
    OverviewSerializer,
    ErrorSerializer,
)
from .exceptions import AnalyticsServiceError


@extend_schema(
    parameters=[
        OpenApiParameter('period', OpenApiTypes.STR, description='Month period (YYYY-MM)'),
        OpenApiParameter('start_date', OpenApiTypes.DATE, description='Start date (YYYY-MM-DD)'),
        OpenApiParameter('end_date', OpenApiTypes.DATE, description='End date (YYYY-MM-DD)'),
    ],
    responses={
        200: RangeSummarySerializer,
        400: ErrorSerializer,
    },
    description="Get consumption statistics for a month or an arbitrary date range.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def summary(request):
    """Get statistics for a date window - thin HTTP handler."""
    query_serializer = PeriodQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data

    try:
        data = AnalyticsQueries.range_summary(
            user_id=request.user.id,
            start_date=params['start_date'],
            end_date=params['end_date'],
        )
    except AnalyticsServiceError as e:
        raise ValidationError({'error': str(e)})

    return Response(RangeSummarySerializer(data).data)


@extend_schema(
    parameters=[
        OpenApiParameter('period', OpenApiTypes.STR, description='Month period (YYYY-MM), defaults to current month'),
    ],
    responses={
        200: MonthlyStatsSerializer,
        400: ErrorSerializer,
    },
    description="Get statistics for one month together with a per-day calendar.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def monthly_stats(request):
    """Get month statistics and calendar - thin HTTP handler."""
    query_serializer = MonthQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data

    try:
        data = AnalyticsQueries.monthly_stats(
            user_id=request.user.id,
            year=params['year'],
            month=params['month'],
        )
    except AnalyticsServiceError as e:
        raise ValidationError({'error': str(e)})

    return Response(MonthlyStatsSerializer(data).data)


@extend_schema(
    parameters=[
        OpenApiParameter('year', OpenApiTypes.INT, description='Calendar year, defaults to current year'),
    ],
    responses={
        200: YearlyStatsSerializer,
        400: ErrorSerializer,
    },
    description="Get statistics for one year with a breakdown for each month.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def yearly_stats(request):
    """Get year statistics and per-month breakdown - thin HTTP handler."""
    query_serializer = YearQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    try:
        data = AnalyticsQueries.yearly_stats(
            user_id=request.user.id,
            year=query_serializer.validated_data['year'],
        )
    except AnalyticsServiceError as e:
        raise ValidationError({'error': str(e)})

    return Response(YearlyStatsSerializer(data).data)


@extend_schema(
    responses={
        200: DaySummarySerializer,
        400: ErrorSerializer,
    },
    description="Get the records and totals of one day.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def day_summary(request, day):
    """Get one day's records and totals - thin HTTP handler."""
    day_serializer = DayParamSerializer(data={'date': day})
    day_serializer.is_valid(raise_exception=True)

    data = AnalyticsQueries.day_summary(
        user_id=request.user.id,
        day=day_serializer.validated_data['date'],
    )

    return Response(DaySummarySerializer(data).data)


@extend_schema(
    responses={200: OverviewSerializer},
    description="Get headline numbers for the home dashboard.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def overview(request):
    """Get home dashboard data - thin HTTP handler."""
    data = AnalyticsQueries.overview(
        user_id=request.user.id,
        today=timezone.localdate(),
    )

    return Response(OverviewSerializer(data).data)
