from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
import uuid


class Review(models.Model):
    """A user's graded review of a store."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    store = models.ForeignKey('stores.Store', on_delete=models.CASCADE, related_name='reviews')
    author = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='reviews')
    grade = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    content = models.TextField()
    # Author details as they were when the review was written
    author_nickname = models.CharField(max_length=50, blank=True)
    author_name = models.CharField(max_length=100, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'reviews'
        indexes = [
            models.Index(fields=['store', 'created_at'], name='reviews_store_created_idx'),
            models.Index(fields=['author', 'created_at'], name='reviews_author_created_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.author_nickname or self.author_id} - {self.store.name} ({self.grade}★)"
