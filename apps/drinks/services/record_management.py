"""Consumption record service - reading and saving daily drink logs."""

import logging
from datetime import date
from decimal import Decimal
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.drinks.models import ConsumptionRecord, Drink
from .exceptions import DrinkNotFoundError, InvalidQuantityError

logger = logging.getLogger(__name__)


def get_records(
    *,
    owner: User | UUID,
    start_date: date,
    end_date: date
) -> QuerySet[ConsumptionRecord]:
    """
    Return the owner's records between two dates, inclusive on both ends.

    Each record comes with its drink joined in, ready for aggregation.
    """
    return (
        ConsumptionRecord.objects
        .filter(owner=owner, date__gte=start_date, date__lte=end_date)
        .select_related('drink')
        .order_by('date', 'created_at')
    )


def get_day_records(*, owner: User | UUID, day: date) -> QuerySet[ConsumptionRecord]:
    """Return the owner's records for a single date, in drink display order."""
    return (
        ConsumptionRecord.objects
        .filter(owner=owner, date=day)
        .select_related('drink')
        .order_by('drink__sort_order', 'created_at')
    )


@transaction.atomic
def replace_day_records(
    *,
    owner: User,
    day: date,
    quantities: dict[UUID, Decimal]
) -> list[ConsumptionRecord]:
    """
    Replace everything logged for one day with a new set of quantities.

    A day is always saved as a whole: the previous records for
    ``(owner, day)`` are deleted and one record per drink with a non-zero
    quantity is inserted. Both steps run in one transaction, so a failed
    insert leaves the previous records in place.

    This operation:
    1. Rejects negative quantities
    2. Verifies every drink id belongs to the owner
    3. Deletes the day's existing records
    4. Bulk inserts the non-zero quantities

    Args:
        owner: User whose log is written
        day: Calendar date being saved
        quantities: Mapping of drink UUID to servings consumed (0 allowed)

    Returns:
        The records now stored for that day

    Raises:
        InvalidQuantityError: If any quantity is negative
        DrinkNotFoundError: If a drink doesn't exist or belongs to someone else

    Example:
        >>> records = replace_day_records(
        ...     owner=user,
        ...     day=date(2024, 5, 1),
        ...     quantities={pils.id: Decimal('2'), stout.id: Decimal('0.5')},
        ... )
        >>> len(records)
        2
    """
    for drink_id, quantity in quantities.items():
        if quantity < 0:
            raise InvalidQuantityError(f"Quantity for drink {drink_id} must not be negative")

    drinks = {
        drink.id: drink
        for drink in Drink.objects.filter(owner=owner, id__in=list(quantities.keys()))
    }
    missing = [str(drink_id) for drink_id in quantities if drink_id not in drinks]
    if missing:
        logger.warning("Rejected save for %s: unknown drinks %s", day, ', '.join(missing))
        raise DrinkNotFoundError(f"Drink not found: {', '.join(missing)}")

    deleted, _ = ConsumptionRecord.objects.filter(owner=owner, date=day).delete()

    records = ConsumptionRecord.objects.bulk_create([
        ConsumptionRecord(
            owner=owner,
            drink=drinks[drink_id],
            date=day,
            quantity=quantity,
        )
        for drink_id, quantity in quantities.items()
        if quantity > 0
    ])

    logger.info(
        "Replaced records for user %s on %s: %d removed, %d saved",
        owner.id, day, deleted, len(records)
    )
    return records
