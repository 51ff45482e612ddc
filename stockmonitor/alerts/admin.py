from django.contrib import admin

from .models import AlertRun


@admin.register(AlertRun)
class AlertRunAdmin(admin.ModelAdmin):
    list_display = ('user', 'last_run_on', 'updated_at')
    list_filter = ('last_run_on',)
    search_fields = ('user__email',)
    list_select_related = ('user',)
    readonly_fields = ('user', 'created_at', 'updated_at')
