"""
Drinks services - Business logic layer.

This package contains all business operations for the drinks app:
- Drink CRUD and display ordering
- Daily consumption records (read by range, replace a day)
"""

from .drink_management import (
    list_drinks,
    get_drink,
    create_drink,
    update_drink,
    delete_drink,
    reorder_drinks,
    move_drink,
)

from .record_management import (
    get_records,
    get_day_records,
    replace_day_records,
)

from .exceptions import (
    DrinksServiceError,
    DrinkNotFoundError,
    InvalidDrinkError,
    InvalidReorderError,
    InvalidQuantityError,
)

__all__ = [
    # Drink Management Services
    'list_drinks',
    'get_drink',
    'create_drink',
    'update_drink',
    'delete_drink',
    'reorder_drinks',
    'move_drink',
    # Record Services
    'get_records',
    'get_day_records',
    'replace_day_records',
    # Exceptions
    'DrinksServiceError',
    'DrinkNotFoundError',
    'InvalidDrinkError',
    'InvalidReorderError',
    'InvalidQuantityError',
]
