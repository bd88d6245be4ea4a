from django.contrib import admin
from .models import Store


@admin.register(Store)
class StoreAdmin(admin.ModelAdmin):
    """Admin interface for Stores."""

    list_display = ['name', 'region', 'star_rating', 'review_count', 'created_at']
    list_filter = ['region']
    search_fields = ['name', 'region', 'address']
    # Maintained by the review services
    readonly_fields = ['star_rating', 'created_at', 'updated_at']
