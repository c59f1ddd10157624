from rest_framework import serializers
from decimal import Decimal
from .models import Drink, ConsumptionRecord


# =============================================================================
# Input Serializers
# =============================================================================

class RecordRangeQuerySerializer(serializers.Serializer):
    """
    Validate query parameters for listing records.

    Query Parameters:
        start_date (date): First day of the range (inclusive)
        end_date (date): Last day of the range (inclusive)
    """

    start_date = serializers.DateField()
    end_date = serializers.DateField()

    def validate(self, attrs):
        """Validate date range."""
        if attrs['start_date'] > attrs['end_date']:
            raise serializers.ValidationError({
                'end_date': 'End date must be after start date'
            })
        return attrs


class DayParamSerializer(serializers.Serializer):
    """Validate a YYYY-MM-DD date taken from the URL."""

    date = serializers.DateField(input_formats=['%Y-%m-%d'])


class MoveDrinkInputSerializer(serializers.Serializer):
    """
    Validate input for moving a drink one position.

    Fields:
        direction (str): 'up' or 'down'
    """

    direction = serializers.ChoiceField(choices=['up', 'down'])


class ReorderDrinksInputSerializer(serializers.Serializer):
    """
    Validate input for rewriting the drink display order.

    Fields:
        drink_ids (list[UUID]): Drink ids in the desired order
    """

    drink_ids = serializers.ListField(
        child=serializers.UUIDField(),
        allow_empty=False,
        help_text="Drink ids in the desired display order."
    )


class DayEntrySerializer(serializers.Serializer):
    """One drink and the servings consumed on the day."""

    drink = serializers.UUIDField()
    quantity = serializers.DecimalField(
        max_digits=8,
        decimal_places=2,
        min_value=Decimal('0'),
    )


class ReplaceDayInputSerializer(serializers.Serializer):
    """
    Validate the full set of quantities saved for a day.

    Fields:
        entries (list): {drink, quantity} pairs; zero quantities are dropped
    """

    entries = DayEntrySerializer(many=True, allow_empty=True)

    def validate_entries(self, value):
        """Each drink may appear only once per day."""
        drink_ids = [entry['drink'] for entry in value]
        if len(set(drink_ids)) != len(drink_ids):
            raise serializers.ValidationError('Each drink can only be listed once')
        return value


# =============================================================================
# Output Serializers
# =============================================================================

class DrinkMinimalSerializer(serializers.ModelSerializer):
    """Minimal drink info for nested serialization."""

    class Meta:
        model = Drink
        fields = ['id', 'name', 'type', 'volume', 'alcohol_percentage']
        read_only_fields = fields


class DrinkSerializer(serializers.ModelSerializer):
    """Main serializer for drinks."""

    pure_alcohol_ml = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        read_only=True,
        help_text="Pure alcohol in one serving (ml)."
    )

    class Meta:
        model = Drink
        fields = [
            'id',
            'name',
            'type',
            'volume',
            'alcohol_percentage',
            'pure_alcohol_ml',
            'sort_order',
            'created_at',
            'updated_at',
        ]
        read_only_fields = [
            'id',
            'sort_order',
            'created_at',
            'updated_at',
        ]


class ConsumptionRecordSerializer(serializers.ModelSerializer):
    """Serializer for consumption records with their drink."""

    drink = DrinkMinimalSerializer(read_only=True)

    class Meta:
        model = ConsumptionRecord
        fields = ['id', 'date', 'drink', 'quantity', 'created_at']
        read_only_fields = fields
