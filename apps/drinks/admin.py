# ==========================================
# apps/drinks/admin.py
# ==========================================

from django.contrib import admin
from django.db.models import Sum
from decimal import Decimal
from .models import Drink, ConsumptionRecord


class ConsumptionRecordInline(admin.TabularInline):
    """Inline admin for the most recent records of a drink."""
    model = ConsumptionRecord
    extra = 0
    fields = ['date', 'quantity', 'created_at']
    readonly_fields = ['created_at']
    ordering = ['-date']
    show_change_link = True


@admin.register(Drink)
class DrinkAdmin(admin.ModelAdmin):
    """
    Admin interface for Drinks.

    Provides drink listing per owner in display order, with the
    total quantity ever logged for each drink.
    """

    list_display = [
        'name',
        'owner',
        'type',
        'volume',
        'alcohol_percentage',
        'sort_order',
        'get_total_quantity',
        'created_at',
    ]
    list_filter = ['type', 'created_at']
    search_fields = ['name', 'owner__email']
    ordering = ['owner', 'sort_order']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [ConsumptionRecordInline]

    def get_total_quantity(self, obj):
        """Sum of all logged servings."""
        total = obj.records.aggregate(total=Sum('quantity'))['total']
        return total or Decimal('0')
    get_total_quantity.short_description = 'Total servings'


@admin.register(ConsumptionRecord)
class ConsumptionRecordAdmin(admin.ModelAdmin):
    """Admin interface for Consumption Records."""

    list_display = ['date', 'owner', 'drink', 'quantity', 'created_at']
    list_filter = ['date', 'drink__type']
    search_fields = ['owner__email', 'drink__name']
    date_hierarchy = 'date'
    ordering = ['-date', 'created_at']
    readonly_fields = ['created_at']
    list_select_related = ['owner', 'drink']
