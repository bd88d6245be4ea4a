from django.contrib import admin
from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    """Admin interface for Reviews."""

    list_display = ['store', 'author_nickname', 'grade', 'created_at']
    list_filter = ['grade', 'created_at']
    search_fields = ['store__name', 'author__email', 'author_nickname', 'content']
    # Grades change store ratings; edit them through the API so ratings stay in sync
    readonly_fields = ['grade', 'author_nickname', 'author_name', 'created_at', 'updated_at']

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('store', 'author')
