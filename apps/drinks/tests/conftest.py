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
def drinker(db):
    """Create the main test user."""
    return User.objects.create_user(
        email='drinker@example.com',
        password='TestPass123!',
        display_name='Drinker',
    )


@pytest.fixture
def other_drinker(db):
    """Create a second user whose data must stay invisible."""
    return User.objects.create_user(
        email='other@example.com',
        password='TestPass123!',
        display_name='Other Drinker',
    )


@pytest.fixture
def drinker_client(api_client, drinker):
    """Return API client authenticated as the main user."""
    refresh = RefreshToken.for_user(drinker)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def other_client(other_drinker):
    """Return a separate API client authenticated as the second user."""
    client = APIClient()
    refresh = RefreshToken.for_user(other_drinker)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


# =============================================================================
# Drinks
# =============================================================================

@pytest.fixture
def pilsner(drinker):
    """Half-liter lager, first in display order."""
    return Drink.objects.create(
        owner=drinker,
        name='Pilsner',
        type=DrinkType.DRAFT,
        volume=Decimal('500'),
        alcohol_percentage=Decimal('4.4'),
        sort_order=0,
    )


@pytest.fixture
def stout(drinker):
    """Can of stout, second in display order."""
    return Drink.objects.create(
        owner=drinker,
        name='Stout',
        type=DrinkType.CAN,
        volume=Decimal('330'),
        alcohol_percentage=Decimal('6.0'),
        sort_order=1,
    )


@pytest.fixture
def cola(drinker):
    """Non-alcoholic bottle, third in display order."""
    return Drink.objects.create(
        owner=drinker,
        name='Cola',
        type=DrinkType.BOTTLE,
        volume=Decimal('250'),
        alcohol_percentage=Decimal('0'),
        sort_order=2,
    )


@pytest.fixture
def drinks(pilsner, stout, cola):
    """All three drinks of the main user, in display order."""
    return [pilsner, stout, cola]


@pytest.fixture
def foreign_drink(other_drinker):
    """A drink belonging to the second user."""
    return Drink.objects.create(
        owner=other_drinker,
        name='Foreign Lager',
        volume=Decimal('500'),
        alcohol_percentage=Decimal('5.0'),
        sort_order=0,
    )


# =============================================================================
# Consumption Records
# =============================================================================

@pytest.fixture
def may_records(drinker, pilsner, stout):
    """
    Records in May 2024:
        May 1: 2 x Pilsner, 1 x Stout
        May 3: 1 x Pilsner
        June 1: 4 x Stout (outside May)
    """
    return [
        ConsumptionRecord.objects.create(
            owner=drinker, drink=pilsner, date=date(2024, 5, 1), quantity=Decimal('2')
        ),
        ConsumptionRecord.objects.create(
            owner=drinker, drink=stout, date=date(2024, 5, 1), quantity=Decimal('1')
        ),
        ConsumptionRecord.objects.create(
            owner=drinker, drink=pilsner, date=date(2024, 5, 3), quantity=Decimal('1')
        ),
        ConsumptionRecord.objects.create(
            owner=drinker, drink=stout, date=date(2024, 6, 1), quantity=Decimal('4')
        ),
    ]


@pytest.fixture
def foreign_record(other_drinker, foreign_drink):
    """A record of the second user on May 1st 2024."""
    return ConsumptionRecord.objects.create(
        owner=other_drinker,
        drink=foreign_drink,
        date=date(2024, 5, 1),
        quantity=Decimal('3'),
    )
