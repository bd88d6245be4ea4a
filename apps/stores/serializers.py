from rest_framework import serializers
from .models import Store


class StoreSerializer(serializers.ModelSerializer):
    """Store with its aggregate rating and ordered review ids."""

    review_count = serializers.IntegerField(read_only=True)
    reviews = serializers.SerializerMethodField()

    class Meta:
        model = Store
        fields = [
            'id',
            'name',
            'region',
            'address',
            'star_rating',
            'review_count',
            'reviews',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_reviews(self, obj) -> list[str]:
        return [str(pk) for pk in obj.reviews.order_by('created_at').values_list('id', flat=True)]
