from django.contrib import admin

from .models import Sale


@admin.register(Sale)
class SaleAdmin(admin.ModelAdmin):
    """Read-only view of recorded sales; rows are written by the sale recorder"""
    list_display = ('sale_date', 'product', 'quantity', 'total_price', 'profit', 'owner')
    list_filter = ('sale_date',)
    search_fields = ('product__name', 'owner__email')
    date_hierarchy = 'sale_date'
    list_select_related = ('product', 'owner')
    readonly_fields = ('owner', 'product', 'quantity', 'total_price', 'profit', 'sale_date', 'created_at')
    fields = readonly_fields

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
