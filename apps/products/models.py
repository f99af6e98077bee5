from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal


# Taste attributes are shown as 0-3 dots in the shop frontend
LEVEL_VALIDATORS = [MinValueValidator(0), MaxValueValidator(3)]


class Product(models.Model):
    """Coffee sold in the shop."""

    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    stock_quantity = models.PositiveIntegerField(default=0)
    sales = models.PositiveIntegerField(default=0)
    product_available = models.BooleanField(default=True)

    # Taste profile
    roast_level = models.PositiveSmallIntegerField(default=0, validators=LEVEL_VALIDATORS)
    caffeine_level = models.PositiveSmallIntegerField(default=0, validators=LEVEL_VALIDATORS)
    sweetness = models.PositiveSmallIntegerField(default=0, validators=LEVEL_VALIDATORS)
    acidity = models.PositiveSmallIntegerField(default=0, validators=LEVEL_VALIDATORS)
    weight = models.CharField(max_length=50, blank=True)

    class Meta:
        db_table = 'products'
        indexes = [
            models.Index(fields=['name'], name='products_name_idx'),
            models.Index(fields=['sales'], name='products_sales_idx'),
        ]
        ordering = ['id']

    def __str__(self):
        return self.name
