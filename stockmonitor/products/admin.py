from datetime import timedelta

from django.contrib import admin
from django.contrib.admin import SimpleListFilter
from django.db.models import F
from django.utils import timezone
from django.utils.html import format_html
from django.utils.translation import gettext_lazy as _

from .models import Product

# ======================
# Custom Filters
# ======================
class LowStockFilter(SimpleListFilter):
    title = _('stock status')
    parameter_name = 'stock_status'

    def lookups(self, request, model_admin):
        return (
            ('low', _('Low stock')),
            ('out', _('Out of stock')),
            ('ok', _('In stock')),
        )

    def queryset(self, request, queryset):
        if self.value() == 'low':
            return queryset.filter(
                stock_quantity__lt=F('low_stock_threshold'),
                stock_quantity__gt=0
            )
        elif self.value() == 'out':
            return queryset.filter(stock_quantity=0)
        elif self.value() == 'ok':
            return queryset.filter(stock_quantity__gte=F('low_stock_threshold'))
        return queryset


class ExpiryFilter(SimpleListFilter):
    title = _('expiry')
    parameter_name = 'expiry'

    def lookups(self, request, model_admin):
        return (
            ('expired', _('Expired')),
            ('week', _('Expires within 7 days')),
            ('none', _('No expiry date')),
        )

    def queryset(self, request, queryset):
        today = timezone.localdate()
        if self.value() == 'expired':
            return queryset.filter(expiry_date__lt=today)
        elif self.value() == 'week':
            return queryset.filter(expiry_date__range=(today, today + timedelta(days=7)))
        elif self.value() == 'none':
            return queryset.filter(expiry_date__isnull=True)
        return queryset

# ======================
# ModelAdmins
# ======================
@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = (
        'name',
        'category',
        'price',
        'stock_display',
        'expiry_date',
        'owner',
        'created_at'
    )
    list_filter = (LowStockFilter, ExpiryFilter, 'category')
    search_fields = ('name', 'category', 'owner__email')
    readonly_fields = ('owner', 'lot_size', 'created_at', 'updated_at')
    fieldsets = (
        (None, {
            'fields': ('owner', 'name', 'category', 'price')
        }),
        (_("Stock"), {
            'fields': (
                ('stock_quantity', 'lot_size'),
                'procurement_price',
                'expiry_date',
            )
        }),
        (_("Alerts"), {
            'fields': ('low_stock_threshold', 'expiry_alert_days')
        }),
        (_("Metadata"), {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def stock_display(self, obj):
        if obj.stock_quantity < obj.low_stock_threshold:
            return format_html(
                '<strong style="color: #dc2626;">{}</strong> / {}',
                obj.stock_quantity,
                obj.low_stock_threshold
            )
        return f"{obj.stock_quantity} / {obj.low_stock_threshold}"
    stock_display.short_description = _("Stock / Threshold")

    def save_model(self, request, obj, form, change):
        if not change:
            obj.owner = request.user
            obj.lot_size = obj.stock_quantity
        elif 'stock_quantity' in form.changed_data:
            obj.lot_size = obj.stock_quantity
        super().save_model(request, obj, form, change)
