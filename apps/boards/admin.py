from django.contrib import admin
from django.db.models import Count
from .models import Board, Comment


class CommentInline(admin.TabularInline):
    model = Comment
    extra = 0
    fields = ['user', 'content', 'created_at']
    readonly_fields = ['created_at']


@admin.register(Board)
class BoardAdmin(admin.ModelAdmin):
    """Admin interface for Boards."""

    list_display = ['title', 'region', 'meet_date', 'user', 'store', 'comment_count', 'created_at']
    list_filter = ['region', 'meet_date', 'created_at']
    search_fields = ['title', 'content', 'region', 'user__email', 'user__nickname']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [CommentInline]

    def comment_count(self, obj):
        return obj.comment_total
    comment_count.short_description = 'Comments'

    def get_queryset(self, request):
        """Optimize query with annotation."""
        qs = super().get_queryset(request)
        return qs.select_related('user', 'store').annotate(comment_total=Count('comments'))


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    """Admin interface for Comments."""

    list_display = ['board', 'user', 'created_at']
    search_fields = ['content', 'user__email', 'board__title']
    readonly_fields = ['created_at', 'updated_at']
