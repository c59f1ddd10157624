import pytest
from decimal import Decimal
from datetime import date
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.drinks.models import Drink, ConsumptionRecord, DrinkType


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


# =============================================================================
# Users
# =============================================================================

@pytest.fixture
def analytics_user(db):
    """Create the main analytics test user."""
    return User.objects.create_user(
        email='analytics_user@example.com',
        password='TestPass123!',
        display_name='Analytics User',
    )


@pytest.fixture
def analytics_outsider(db):
    """Create a user whose records must never show up in someone else's stats."""
    return User.objects.create_user(
        email='analytics_outsider@example.com',
        password='TestPass123!',
        display_name='Analytics Outsider',
    )


@pytest.fixture
def analytics_user_client(api_client, analytics_user):
    """Return API client authenticated as analytics user."""
    refresh = RefreshToken.for_user(analytics_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


# =============================================================================
# Drinks
# =============================================================================

@pytest.fixture
def lager(analytics_user):
    """500 ml at 4 %: 20 ml of pure alcohol per serving."""
    return Drink.objects.create(
        owner=analytics_user,
        name='Lager',
        type=DrinkType.DRAFT,
        volume=Decimal('500'),
        alcohol_percentage=Decimal('4'),
        sort_order=0,
    )


@pytest.fixture
def ipa(analytics_user):
    """330 ml at 6 %: 19.8 ml of pure alcohol per serving."""
    return Drink.objects.create(
        owner=analytics_user,
        name='IPA',
        type=DrinkType.CAN,
        volume=Decimal('330'),
        alcohol_percentage=Decimal('6'),
        sort_order=1,
    )


@pytest.fixture
def outsider_drink(analytics_outsider):
    return Drink.objects.create(
        owner=analytics_outsider,
        name='Outsider Ale',
        volume=Decimal('500'),
        alcohol_percentage=Decimal('5'),
        sort_order=0,
    )


# =============================================================================
# Consumption Records
# =============================================================================

def _record(owner, drink, day, quantity):
    return ConsumptionRecord.objects.create(
        owner=owner,
        drink=drink,
        date=day,
        quantity=Decimal(quantity),
    )


@pytest.fixture
def analytics_records(analytics_user, lager, ipa):
    """
    Records of 2024:
        Jan 10: 2 x Lager
        May 1:  2 x Lager, 1 x IPA
        May 3:  3 x IPA
        Dec 31: 1 x Lager
    """
    return [
        _record(analytics_user, lager, date(2024, 1, 10), '2'),
        _record(analytics_user, lager, date(2024, 5, 1), '2'),
        _record(analytics_user, ipa, date(2024, 5, 1), '1'),
        _record(analytics_user, ipa, date(2024, 5, 3), '3'),
        _record(analytics_user, lager, date(2024, 12, 31), '1'),
    ]


@pytest.fixture
def outsider_records(analytics_outsider, outsider_drink):
    """Records of the outsider on the same days as the main user."""
    return [
        _record(analytics_outsider, outsider_drink, date(2024, 5, 1), '5'),
        _record(analytics_outsider, outsider_drink, date(2024, 5, 3), '5'),
    ]
