from django.conf import settings
from rest_framework import serializers
from .models import Board, Comment
from .utils import format_date
from apps.accounts.serializers import UserProfileSerializer, UserNicknameSerializer


class BoardSerializer(serializers.ModelSerializer):
    """Board as stored, owner and store as ids."""

    class Meta:
        model = Board
        fields = [
            'id',
            'user',
            'store',
            'title',
            'content',
            'meet_date',
            'region',
            'image',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class BoardListSerializer(BoardSerializer):
    """Board row in the paged list, owner nickname populated."""

    user = UserNicknameSerializer(read_only=True)


class BoardDetailSerializer(serializers.ModelSerializer):
    """Board detail with owner profile and a YYYY-MM-DD creation date."""

    user = UserProfileSerializer(read_only=True)
    created_at = serializers.SerializerMethodField()

    class Meta:
        model = Board
        fields = [
            'id',
            'user',
            'store',
            'title',
            'content',
            'meet_date',
            'region',
            'image',
            'created_at',
        ]
        read_only_fields = fields

    def get_created_at(self, obj):
        return format_date(obj.created_at)


class CommentSerializer(serializers.ModelSerializer):
    """Comment with owner nickname populated."""

    user = UserNicknameSerializer(read_only=True)

    class Meta:
        model = Comment
        fields = ['id', 'user', 'board', 'content', 'created_at', 'updated_at']
        read_only_fields = fields


class CommentDetailSerializer(CommentSerializer):
    """Comment with owner profile and a YYYY-MM-DD creation date."""

    user = UserProfileSerializer(read_only=True)
    created_at = serializers.SerializerMethodField()

    def get_created_at(self, obj):
        return format_date(obj.created_at)


class BoardPageQuerySerializer(serializers.Serializer):
    """Query parameters of the paged board list."""

    page = serializers.IntegerField(min_value=1, default=1)
    per_page = serializers.IntegerField(
        min_value=1,
        max_value=settings.BOARD_MAX_PAGE_SIZE,
        default=settings.BOARD_PAGE_SIZE,
    )


class BoardPageSerializer(serializers.Serializer):
    """Response envelope of the paged board list."""

    success = serializers.BooleanField()
    data = BoardListSerializer(many=True)
    current_page = serializers.IntegerField()
    total_pages = serializers.IntegerField()
    total_count = serializers.IntegerField()


class BoardDetailResponseSerializer(serializers.Serializer):
    board = BoardDetailSerializer()
    comments = CommentDetailSerializer(many=True)


class BoardCreateRequestSerializer(serializers.Serializer):
    region = serializers.CharField()
    title = serializers.CharField()
    content = serializers.CharField()
    meet_date = serializers.DateField()
    image = serializers.FileField()
    store = serializers.UUIDField(required=False)


class BoardUpdateRequestSerializer(serializers.Serializer):
    title = serializers.CharField(required=False, allow_blank=True)
    content = serializers.CharField(required=False, allow_blank=True)
    meet_date = serializers.DateField(required=False)
    region = serializers.CharField(required=False, allow_blank=True)


class CommentCreateRequestSerializer(serializers.Serializer):
    content = serializers.CharField()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
