"""Domain exceptions for drinks app."""


class DrinksServiceError(Exception):
    """Base exception for all drinks service errors."""
    pass


class DrinkNotFoundError(DrinksServiceError):
    """Drink does not exist or belongs to another user."""
    pass


class InvalidDrinkError(DrinksServiceError):
    """Drink fields are out of range (name, volume, alcohol percentage)."""
    pass


class InvalidReorderError(DrinksServiceError):
    """Reorder request does not match the user's drinks."""
    pass


class InvalidQuantityError(DrinksServiceError):
    """Consumed quantity is negative."""
    pass
