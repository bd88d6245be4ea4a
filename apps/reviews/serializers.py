from rest_framework import serializers
from .models import Review


class ReviewSerializer(serializers.ModelSerializer):
    """Review as stored, including the author snapshot."""

    class Meta:
        model = Review
        fields = [
            'id',
            'store',
            'author',
            'grade',
            'content',
            'author_nickname',
            'author_name',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ReviewWriteRequestSerializer(serializers.Serializer):
    """Request body for creating or editing a review."""

    grade = serializers.IntegerField(min_value=1, max_value=5)
    content = serializers.CharField()
