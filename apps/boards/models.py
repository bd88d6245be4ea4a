from django.db import models
import uuid


class Board(models.Model):
    """Meetup announcement tied to a store and a date."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='boards')
    store = models.ForeignKey('stores.Store', on_delete=models.SET_NULL, null=True, blank=True, related_name='boards')
    title = models.CharField(max_length=200)
    content = models.TextField()
    meet_date = models.DateField()
    region = models.CharField(max_length=100, db_index=True)
    image = models.FileField(upload_to='boards/%Y/%m/')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'boards'
        indexes = [
            models.Index(fields=['region', 'created_at'], name='boards_region_created_idx'),
            models.Index(fields=['created_at'], name='boards_created_at_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.title} ({self.region}, {self.meet_date})"


class Comment(models.Model):
    """Comment on a board post."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='comments')
    board = models.ForeignKey(Board, on_delete=models.CASCADE, related_name='comments')
    content = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'comments'
        indexes = [
            models.Index(fields=['board', 'created_at'], name='comments_board_created_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.user.get_display_name()} on {self.board.title}"
