from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
import uuid


class Store(models.Model):
    """Venue that boards meet at and reviews rate."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, db_index=True)
    region = models.CharField(max_length=100, blank=True, db_index=True)
    address = models.CharField(max_length=300, blank=True)
    # Running average of the grades in self.reviews, maintained by the reviews services
    star_rating = models.FloatField(
        default=0.0,
        validators=[MinValueValidator(0.0), MaxValueValidator(5.0)],
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'stores'
        indexes = [
            models.Index(fields=['star_rating'], name='stores_star_rating_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def review_count(self):
        return self.reviews.count()
