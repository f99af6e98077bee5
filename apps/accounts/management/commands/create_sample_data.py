"""
Management command to create sample data for trying out the shop.

Usage:
    python manage.py create_sample_data

This creates:
- 2 users (admin, alice)
- 8 coffees with stock, prices and taste profiles
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from decimal import Decimal

from apps.accounts.models import User
from apps.products.models import Product


PRODUCTS = [
    {
        'name': 'Ethiopia Yirgacheffe',
        'description': 'Washed Ethiopian with jasmine and bergamot notes.',
        'price': Decimal('54.90'),
        'stock_quantity': 40,
        'roast_level': 1,
        'caffeine_level': 2,
        'sweetness': 2,
        'acidity': 3,
        'weight': '250g',
    },
    {
        'name': 'Colombia Huila',
        'description': 'Caramel sweetness with a round, balanced body.',
        'price': Decimal('49.90'),
        'stock_quantity': 35,
        'roast_level': 2,
        'caffeine_level': 2,
        'sweetness': 3,
        'acidity': 2,
        'weight': '250g',
    },
    {
        'name': 'Brazil Santos',
        'description': 'Nutty, chocolatey and low in acidity.',
        'price': Decimal('39.90'),
        'stock_quantity': 60,
        'roast_level': 2,
        'caffeine_level': 2,
        'sweetness': 2,
        'acidity': 1,
        'weight': '250g',
    },
    {
        'name': 'Kenya AA',
        'description': 'Blackcurrant and grapefruit, juicy and bright.',
        'price': Decimal('59.90'),
        'stock_quantity': 20,
        'roast_level': 1,
        'caffeine_level': 2,
        'sweetness': 2,
        'acidity': 3,
        'weight': '250g',
    },
    {
        'name': 'Sumatra Mandheling',
        'description': 'Earthy and spicy with a heavy body.',
        'price': Decimal('52.90'),
        'stock_quantity': 25,
        'roast_level': 3,
        'caffeine_level': 2,
        'sweetness': 1,
        'acidity': 1,
        'weight': '250g',
    },
    {
        'name': 'Espresso Blend',
        'description': 'House espresso: cocoa, hazelnut, long finish.',
        'price': Decimal('89.90'),
        'stock_quantity': 50,
        'roast_level': 3,
        'caffeine_level': 3,
        'sweetness': 2,
        'acidity': 1,
        'weight': '1kg',
    },
    {
        'name': 'Decaf Mexico',
        'description': 'Swiss Water decaf with milk chocolate notes.',
        'price': Decimal('44.90'),
        'stock_quantity': 15,
        'roast_level': 2,
        'caffeine_level': 0,
        'sweetness': 2,
        'acidity': 1,
        'weight': '250g',
    },
    {
        'name': 'Guatemala Antigua',
        'description': 'Seasonal lot, currently sold out.',
        'price': Decimal('57.90'),
        'stock_quantity': 0,
        'product_available': False,
        'roast_level': 2,
        'caffeine_level': 2,
        'sweetness': 2,
        'acidity': 2,
        'weight': '250g',
    },
]


class Command(BaseCommand):
    help = 'Create sample data for trying out the shop API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        self.create_users()
        self.create_products()

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin / admin123 (shop admin)')
        self.stdout.write('  alice / password123')

    def clear_data(self):
        """Clear all shop data from the database."""
        Product.objects.all().delete()
        User.objects.all().delete()

    def create_users(self):
        """Create test users."""
        self.stdout.write('  Creating users...')

        User.objects.update_or_create(
            username='admin',
            defaults={
                'password': 'admin123',
                'email': 'admin@example.com',
                'is_admin': True,
            }
        )
        User.objects.update_or_create(
            username='alice',
            defaults={
                'password': 'password123',
                'email': 'alice@example.com',
                'is_admin': False,
            }
        )

    def create_products(self):
        """Create the coffee catalog."""
        self.stdout.write('  Creating products...')

        for data in PRODUCTS:
            Product.objects.update_or_create(
                name=data['name'],
                defaults={key: value for key, value in data.items() if key != 'name'},
            )
