from django.contrib import admin
from django.utils.html import format_html
from apps.products.models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for the coffee catalog."""

    list_display = [
        'name',
        'price',
        'stock_badge',
        'sales',
        'product_available',
        'weight',
    ]
    list_filter = [
        'product_available',
        'roast_level',
        'caffeine_level',
    ]
    search_fields = [
        'name',
        'description',
    ]
    readonly_fields = [
        'sales',
    ]
    ordering = ['-sales']

    fieldsets = (
        ('Product', {
            'fields': ('name', 'description', 'price', 'weight', 'product_available')
        }),
        ('Inventory', {
            'fields': ('stock_quantity', 'sales'),
        }),
        ('Taste Profile', {
            'fields': ('roast_level', 'caffeine_level', 'sweetness', 'acidity'),
            'classes': ('collapse',),
        }),
    )

    def stock_badge(self, obj):
        """Display stock level, highlighting sold-out products."""
        if obj.stock_quantity == 0:
            return format_html(
                '<span style="background: #B85C5C; color: white; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">Sold out</span>'
            )
        return obj.stock_quantity
    stock_badge.short_description = 'Stock'
    stock_badge.admin_order_field = 'stock_quantity'

    actions = ['mark_available', 'mark_unavailable']

    @admin.action(description='Mark selected products as available')
    def mark_available(self, request, queryset):
        count = queryset.update(product_available=True)
        self.message_user(request, f'Marked {count} product(s) as available.')

    @admin.action(description='Mark selected products as unavailable')
    def mark_unavailable(self, request, queryset):
        count = queryset.update(product_available=False)
        self.message_user(request, f'Marked {count} product(s) as unavailable.')
