"""Drink management service - CRUD and ordering of a user's drinks."""

import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.drinks.models import Drink, DrinkType
from .exceptions import DrinkNotFoundError, InvalidDrinkError, InvalidReorderError

logger = logging.getLogger(__name__)

MOVE_UP = 'up'
MOVE_DOWN = 'down'


def _validate_drink_fields(
    *,
    name: Optional[str] = None,
    type: Optional[str] = None,
    volume: Optional[Decimal] = None,
    alcohol_percentage: Optional[Decimal] = None,
) -> None:
    if name is not None and not name.strip():
        raise InvalidDrinkError("Drink name must not be empty")

    if type is not None and type not in DrinkType.values:
        raise InvalidDrinkError(
            f"Invalid drink type: '{type}'. Valid options: {', '.join(DrinkType.values)}"
        )

    if volume is not None and volume <= 0:
        raise InvalidDrinkError("Volume must be greater than 0 ml")

    if alcohol_percentage is not None and not (0 <= alcohol_percentage <= 100):
        raise InvalidDrinkError("Alcohol percentage must be between 0 and 100")


def list_drinks(*, owner: User) -> QuerySet[Drink]:
    """Return the owner's drinks in display order."""
    return Drink.objects.filter(owner=owner).order_by('sort_order', 'created_at')


def get_drink(*, owner: User, drink_id: UUID) -> Drink:
    """
    Fetch a single drink owned by the user.

    Raises:
        DrinkNotFoundError: If the drink doesn't exist or belongs to someone else
    """
    try:
        return Drink.objects.get(id=drink_id, owner=owner)
    except Drink.DoesNotExist:
        raise DrinkNotFoundError("Drink not found")


@transaction.atomic
def create_drink(
    *,
    owner: User,
    name: str,
    volume: Decimal,
    alcohol_percentage: Decimal,
    type: str = DrinkType.CAN,
) -> Drink:
    """
    Register a new drink for the user.

    New drinks are appended to the end of the display order: their sort
    position is the number of drinks the user already has.

    Args:
        owner: User the drink belongs to
        name: Display name (e.g. 'Pilsner Urquell')
        volume: Serving size in milliliters, must be positive
        alcohol_percentage: Strength in percent, 0-100
        type: One of DrinkType values

    Returns:
        Created Drink instance

    Raises:
        InvalidDrinkError: If any field is out of range
    """
    _validate_drink_fields(
        name=name,
        type=type,
        volume=volume,
        alcohol_percentage=alcohol_percentage,
    )

    sort_order = Drink.objects.filter(owner=owner).count()

    drink = Drink.objects.create(
        owner=owner,
        name=name.strip(),
        type=type,
        volume=volume,
        alcohol_percentage=alcohol_percentage,
        sort_order=sort_order,
    )

    logger.info("Drink %s created for user %s at position %d", drink.id, owner.id, sort_order)
    return drink


@transaction.atomic
def update_drink(
    *,
    owner: User,
    drink_id: UUID,
    name: Optional[str] = None,
    type: Optional[str] = None,
    volume: Optional[Decimal] = None,
    alcohol_percentage: Optional[Decimal] = None,
) -> Drink:
    """
    Update drink fields; fields left as None are unchanged.

    The sort position is never touched here, use reorder_drinks or
    move_drink for that.

    Raises:
        DrinkNotFoundError: If the drink doesn't exist or belongs to someone else
        InvalidDrinkError: If any field is out of range
    """
    try:
        drink = Drink.objects.select_for_update().get(id=drink_id, owner=owner)
    except Drink.DoesNotExist:
        raise DrinkNotFoundError("Drink not found")

    _validate_drink_fields(
        name=name,
        type=type,
        volume=volume,
        alcohol_percentage=alcohol_percentage,
    )

    if name is not None:
        drink.name = name.strip()
    if type is not None:
        drink.type = type
    if volume is not None:
        drink.volume = volume
    if alcohol_percentage is not None:
        drink.alcohol_percentage = alcohol_percentage

    drink.save()
    return drink


@transaction.atomic
def delete_drink(*, owner: User, drink_id: UUID) -> None:
    """
    Delete a drink together with all of its consumption records.

    Raises:
        DrinkNotFoundError: If the drink doesn't exist or belongs to someone else
    """
    drink = get_drink(owner=owner, drink_id=drink_id)
    record_count = drink.records.count()
    drink.delete()

    logger.info(
        "Drink %s deleted for user %s (%d consumption records removed)",
        drink_id, owner.id, record_count
    )


@transaction.atomic
def reorder_drinks(*, owner: User, drink_ids: list[UUID]) -> list[Drink]:
    """
    Rewrite sort positions so drinks appear in the given order.

    This operation:
    1. Checks that every id belongs to the owner (no duplicates)
    2. Assigns positions 0..n-1 following the list order
    3. Writes all positions with a single bulk update

    Drinks the owner has but that are missing from ``drink_ids`` keep their
    old positions.

    Args:
        owner: User whose drinks are reordered
        drink_ids: Drink UUIDs in the desired display order

    Returns:
        Reordered drinks, in the requested order

    Raises:
        InvalidReorderError: If the list is empty, has duplicates, or
            references drinks the owner doesn't have
    """
    if not drink_ids:
        raise InvalidReorderError("At least one drink is required")

    if len(set(drink_ids)) != len(drink_ids):
        raise InvalidReorderError("Drink list contains duplicates")

    drinks_by_id = {
        drink.id: drink
        for drink in Drink.objects.select_for_update().filter(owner=owner, id__in=drink_ids)
    }

    missing = [str(drink_id) for drink_id in drink_ids if drink_id not in drinks_by_id]
    if missing:
        raise InvalidReorderError(f"Unknown drinks: {', '.join(missing)}")

    ordered = []
    for position, drink_id in enumerate(drink_ids):
        drink = drinks_by_id[drink_id]
        drink.sort_order = position
        ordered.append(drink)

    Drink.objects.bulk_update(ordered, ['sort_order'])

    logger.info("Reordered %d drinks for user %s", len(ordered), owner.id)
    return ordered


def move_drink(*, owner: User, drink_id: UUID, direction: str) -> list[Drink]:
    """
    Swap a drink with its neighbour in the display order.

    The full list is rewritten with contiguous positions afterwards. Moving
    the first drink up or the last drink down leaves the order unchanged.

    Args:
        owner: User whose drink is moved
        drink_id: Drink to move
        direction: 'up' or 'down'

    Returns:
        All of the owner's drinks in their new order

    Raises:
        DrinkNotFoundError: If the drink doesn't exist or belongs to someone else
        InvalidReorderError: If direction is not 'up' or 'down'
    """
    if direction not in (MOVE_UP, MOVE_DOWN):
        raise InvalidReorderError("Direction must be 'up' or 'down'")

    drinks = list(list_drinks(owner=owner))
    ids = [drink.id for drink in drinks]

    if drink_id not in ids:
        raise DrinkNotFoundError("Drink not found")

    index = ids.index(drink_id)
    target = index - 1 if direction == MOVE_UP else index + 1

    if target < 0 or target >= len(drinks):
        return drinks

    ids[index], ids[target] = ids[target], ids[index]
    return reorder_drinks(owner=owner, drink_ids=ids)
