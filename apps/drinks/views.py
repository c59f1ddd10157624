from rest_framework import viewsets, status, serializers as drf_serializers
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .models import Drink
from .serializers import (
    DrinkSerializer,
    ConsumptionRecordSerializer,
    # Input serializers
    RecordRangeQuerySerializer,
    DayParamSerializer,
    MoveDrinkInputSerializer,
    ReorderDrinksInputSerializer,
    ReplaceDayInputSerializer,
)
from .permissions import IsDrinkOwner
from .services import (
    create_drink,
    update_drink,
    delete_drink,
    reorder_drinks,
    move_drink,
    get_records,
    get_day_records,
    replace_day_records,
    DrinkNotFoundError,
    InvalidDrinkError,
    InvalidReorderError,
    InvalidQuantityError,
)


# Response serializers for API documentation
class DayRecordsResponseSerializer(drf_serializers.Serializer):
    date = drf_serializers.DateField()
    records = ConsumptionRecordSerializer(many=True)


class DrinkViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Drink CRUD operations.

    list: Get the current user's drinks in display order
    create: Register a new drink (appended at the end)
    retrieve: Get a specific drink
    update: Update a drink
    destroy: Delete a drink and its consumption records
    """

    serializer_class = DrinkSerializer
    permission_classes = [IsAuthenticated, IsDrinkOwner]
    pagination_class = None

    def get_queryset(self):
        """Only the requesting user's drinks are visible."""
        return Drink.objects.filter(owner=self.request.user).order_by('sort_order', 'created_at')

    def perform_create(self, serializer):
        """Create drink using service layer."""
        try:
            drink = create_drink(
                owner=self.request.user,
                name=serializer.validated_data['name'],
                type=serializer.validated_data.get('type', 'can'),
                volume=serializer.validated_data['volume'],
                alcohol_percentage=serializer.validated_data['alcohol_percentage'],
            )
        except InvalidDrinkError as e:
            raise ValidationError(str(e))

        serializer.instance = drink

    def perform_update(self, serializer):
        """Update drink using service layer."""
        try:
            drink = update_drink(
                owner=self.request.user,
                drink_id=serializer.instance.id,
                name=serializer.validated_data.get('name'),
                type=serializer.validated_data.get('type'),
                volume=serializer.validated_data.get('volume'),
                alcohol_percentage=serializer.validated_data.get('alcohol_percentage'),
            )
        except DrinkNotFoundError as e:
            raise NotFound(str(e))
        except InvalidDrinkError as e:
            raise ValidationError(str(e))

        serializer.instance = drink

    def perform_destroy(self, instance):
        """Delete drink (cascades to its records) using service layer."""
        try:
            delete_drink(owner=self.request.user, drink_id=instance.id)
        except DrinkNotFoundError as e:
            raise NotFound(str(e))

    @extend_schema(
        request=MoveDrinkInputSerializer,
        responses={200: DrinkSerializer(many=True)},
        description="Swap a drink with its neighbour in the display order.",
    )
    @action(detail=True, methods=['post'])
    def move(self, request, pk=None):
        """
        Move a drink one position up or down.

        POST /api/drinks/{id}/move/
        Body: {"direction": "up"}
        """
        drink = self.get_object()

        input_serializer = MoveDrinkInputSerializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)

        try:
            drinks = move_drink(
                owner=request.user,
                drink_id=drink.id,
                direction=input_serializer.validated_data['direction'],
            )
        except DrinkNotFoundError as e:
            raise NotFound(str(e))
        except InvalidReorderError as e:
            raise ValidationError(str(e))

        return Response(DrinkSerializer(drinks, many=True).data)

    @extend_schema(
        request=ReorderDrinksInputSerializer,
        responses={200: DrinkSerializer(many=True)},
        description="Rewrite the display order of the given drinks.",
    )
    @action(detail=False, methods=['post'])
    def reorder(self, request):
        """
        Bulk-update sort positions.

        POST /api/drinks/reorder/
        Body: {"drink_ids": ["...", "..."]}
        """
        input_serializer = ReorderDrinksInputSerializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)

        try:
            drinks = reorder_drinks(
                owner=request.user,
                drink_ids=input_serializer.validated_data['drink_ids'],
            )
        except InvalidReorderError as e:
            raise ValidationError(str(e))

        return Response(DrinkSerializer(drinks, many=True).data)


@extend_schema(
    parameters=[
        OpenApiParameter('start_date', OpenApiTypes.DATE, description='Start date (YYYY-MM-DD)', required=True),
        OpenApiParameter('end_date', OpenApiTypes.DATE, description='End date (YYYY-MM-DD)', required=True),
    ],
    responses={200: ConsumptionRecordSerializer(many=True)},
    description="List the current user's consumption records in an inclusive date range.",
    tags=['records'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def record_list(request):
    """List records in a date range - thin HTTP handler."""
    query_serializer = RecordRangeQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data

    records = get_records(
        owner=request.user,
        start_date=params['start_date'],
        end_date=params['end_date'],
    )

    return Response(ConsumptionRecordSerializer(records, many=True).data)


@extend_schema(
    methods=['GET'],
    responses={200: DayRecordsResponseSerializer},
    description="Get the records logged on one day.",
    tags=['records'],
)
@extend_schema(
    methods=['PUT'],
    request=ReplaceDayInputSerializer,
    responses={200: DayRecordsResponseSerializer},
    description="Replace everything logged on one day. Zero quantities are not stored.",
    tags=['records'],
)
@api_view(['GET', 'PUT'])
@permission_classes([IsAuthenticated])
def day_records(request, day):
    """
    Read or replace one day's records.

    GET /api/drinks/records/{YYYY-MM-DD}/
    PUT /api/drinks/records/{YYYY-MM-DD}/
    Body: {"entries": [{"drink": "...", "quantity": "2"}]}
    """
    day_serializer = DayParamSerializer(data={'date': day})
    day_serializer.is_valid(raise_exception=True)
    selected = day_serializer.validated_data['date']

    if request.method == 'PUT':
        input_serializer = ReplaceDayInputSerializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)

        quantities = {
            entry['drink']: entry['quantity']
            for entry in input_serializer.validated_data['entries']
        }

        try:
            replace_day_records(owner=request.user, day=selected, quantities=quantities)
        except InvalidQuantityError as e:
            raise ValidationError(str(e))
        except DrinkNotFoundError as e:
            raise ValidationError({'entries': str(e)})

    records = get_day_records(owner=request.user, day=selected)

    return Response({
        'date': selected,
        'records': ConsumptionRecordSerializer(records, many=True).data,
    }, status=status.HTTP_200_OK)
