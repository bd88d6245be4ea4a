from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.stores.serializers import StoreSerializer
from .serializers import ReviewSerializer, ReviewWriteRequestSerializer
from .services import get_review, create_review as create_review_service, update_review, delete_review


def _current_user(request):
    return request.user if request.user.is_authenticated else None


@extend_schema(
    request=ReviewWriteRequestSerializer,
    responses={201: ReviewSerializer},
    description="Review a store. Its star rating is updated in the same transaction.",
    tags=['reviews'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def create_review(request, store_id):
    """Create a review for a store."""
    review = create_review_service(
        store_id=store_id,
        author=request.user,
        grade=request.data.get('grade'),
        content=request.data.get('content'),
    )
    return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)


@extend_schema(
    methods=['GET'],
    responses={200: ReviewSerializer},
    description="Get a review. The body is null when it does not exist.",
    tags=['reviews'],
)
@extend_schema(
    methods=['PATCH', 'PUT'],
    request=ReviewWriteRequestSerializer,
    responses={201: StoreSerializer},
    description="Change a review's grade and content (author only). Returns the updated store.",
    tags=['reviews'],
)
@extend_schema(
    methods=['DELETE'],
    responses={200: None},
    description="Delete a review (author only) and update the store rating.",
    tags=['reviews'],
)
@api_view(['GET', 'PATCH', 'PUT', 'DELETE'])
def review_detail(request, review_id):
    """Get (GET), edit (PATCH/PUT) or delete (DELETE) a review."""
    if request.method in ('PATCH', 'PUT'):
        store = update_review(
            review_id=review_id,
            user=_current_user(request),
            grade=request.data.get('grade'),
            content=request.data.get('content'),
        )
        return Response(StoreSerializer(store).data, status=status.HTTP_201_CREATED)

    if request.method == 'DELETE':
        delete_review(review_id=review_id, user=_current_user(request))
        return Response(status=status.HTTP_200_OK)

    review = get_review(review_id=review_id)
    return Response(ReviewSerializer(review).data if review is not None else None)
