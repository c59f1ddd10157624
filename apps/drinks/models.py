from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal
import uuid


class DrinkType(models.TextChoices):
    CAN = 'can', 'Can'
    BOTTLE = 'bottle', 'Bottle'
    DRAFT = 'draft', 'Draft'
    OTHER = 'other', 'Other'


class Drink(models.Model):
    """A user-defined beverage with serving volume and strength."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    owner = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='drinks'
    )

    name = models.CharField(max_length=200)
    type = models.CharField(
        max_length=20,
        choices=DrinkType.choices,
        default=DrinkType.CAN
    )

    # Serving size in milliliters
    volume = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    alcohol_percentage = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        validators=[
            MinValueValidator(Decimal('0')),
            MaxValueValidator(Decimal('100')),
        ]
    )

    # Display position, not necessarily contiguous
    sort_order = models.IntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'drinks'
        indexes = [
            models.Index(fields=['owner', 'sort_order'], name='drinks_owner_sort_idx'),
        ]
        ordering = ['sort_order', 'created_at']

    def __str__(self):
        return f"{self.name} ({self.volume} ml, {self.alcohol_percentage}%)"

    @property
    def pure_alcohol_ml(self):
        """Milliliters of pure alcohol in one serving."""
        return self.volume * self.alcohol_percentage / Decimal('100')


class ConsumptionRecord(models.Model):
    """Quantity of one drink consumed on one calendar day."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    owner = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='consumption_records'
    )
    drink = models.ForeignKey(
        Drink,
        on_delete=models.CASCADE,
        related_name='records'
    )

    date = models.DateField()

    # Servings; fractional values such as 0.5 are allowed
    quantity = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'consumption_records'
        indexes = [
            models.Index(fields=['owner', 'date'], name='records_owner_date_idx'),
            models.Index(fields=['drink'], name='records_drink_idx'),
        ]
        ordering = ['date', 'created_at']

    def __str__(self):
        return f"{self.date}: {self.quantity} x {self.drink.name}"
