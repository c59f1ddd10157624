"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data
    python manage.py create_sample_data --days 90 --clear

This creates:
- 2 users (admin, alice)
- A handful of drinks for alice, in display order
- Random daily consumption records for the last N days
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone
from decimal import Decimal
from datetime import timedelta
import random

from apps.accounts.models import User
from apps.drinks.models import Drink, DrinkType
from apps.drinks.services import create_drink, replace_day_records


SAMPLE_DRINKS = [
    ('Pilsner Urquell', DrinkType.DRAFT, Decimal('500'), Decimal('4.4')),
    ('Guinness', DrinkType.CAN, Decimal('440'), Decimal('4.2')),
    ('Weizen', DrinkType.BOTTLE, Decimal('500'), Decimal('5.4')),
    ('Cider', DrinkType.BOTTLE, Decimal('330'), Decimal('4.5')),
    ('Alcohol-free Lager', DrinkType.CAN, Decimal('330'), Decimal('0')),
]


class Command(BaseCommand):
    help = 'Create sample drinks and consumption records'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help="Delete the sample user's drinks and records first",
        )
        parser.add_argument(
            '--days',
            type=int,
            default=60,
            help='Number of past days to fill with records (default: 60)',
        )
        parser.add_argument(
            '--seed',
            type=int,
            default=None,
            help='Random seed for reproducible data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        rng = random.Random(options['seed'])

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        alice = users['alice']

        if options['clear']:
            self.stdout.write('  Clearing existing drinks...')
            Drink.objects.filter(owner=alice).delete()

        drinks = self.create_drinks(alice)
        saved = self.create_records(alice, drinks, options['days'], rng)

        self.stdout.write(self.style.SUCCESS(
            f'Sample data created successfully! ({len(drinks)} drinks, {saved} records)'
        ))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (superuser)')
        self.stdout.write('  alice@example.com / password123')

    def create_users(self):
        """Create test users."""
        self.stdout.write('  Creating users...')

        admin, _ = User.objects.get_or_create(
            email='admin@example.com',
            defaults={
                'display_name': 'Admin User',
                'is_staff': True,
                'is_superuser': True,
            }
        )
        admin.set_password('admin123')
        admin.save()

        alice, _ = User.objects.get_or_create(
            email='alice@example.com',
            defaults={'display_name': 'Alice'}
        )
        alice.set_password('password123')
        alice.save()

        return {
            'admin': admin,
            'alice': alice,
        }

    def create_drinks(self, owner):
        """Create the sample drinks that don't exist yet."""
        self.stdout.write('  Creating drinks...')

        existing = {drink.name: drink for drink in Drink.objects.filter(owner=owner)}
        drinks = []
        for name, drink_type, volume, abv in SAMPLE_DRINKS:
            drink = existing.get(name)
            if drink is None:
                drink = create_drink(
                    owner=owner,
                    name=name,
                    type=drink_type,
                    volume=volume,
                    alcohol_percentage=abv,
                )
            drinks.append(drink)

        return drinks

    def create_records(self, owner, drinks, days, rng):
        """Fill the last ``days`` days with random quantities."""
        self.stdout.write(f'  Creating records for the last {days} days...')

        today = timezone.localdate()
        saved = 0
        for offset in range(days):
            day = today - timedelta(days=offset)

            # Roughly one dry day in three
            if rng.random() < 0.35:
                quantities = {}
            else:
                picked = rng.sample(drinks, k=rng.randint(1, 2))
                quantities = {
                    drink.id: Decimal(rng.choice(['0.5', '1', '1', '2', '3']))
                    for drink in picked
                }

            saved += len(replace_day_records(owner=owner, day=day, quantities=quantities))

        return saved
