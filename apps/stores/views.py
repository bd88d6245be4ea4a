from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from django.shortcuts import get_object_or_404
from drf_spectacular.utils import extend_schema

from .models import Store
from .serializers import StoreSerializer


@extend_schema(
    responses={200: StoreSerializer},
    description="Get a store with its star rating and review ids.",
    tags=['stores'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def store_detail(request, store_id):
    """Get a single store."""
    store = get_object_or_404(Store, id=store_id)
    return Response(StoreSerializer(store).data)
