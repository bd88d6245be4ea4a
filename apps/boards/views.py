from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, parser_classes
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .serializers import (
    BoardSerializer,
    BoardListSerializer,
    BoardDetailSerializer,
    CommentSerializer,
    CommentDetailSerializer,
    BoardPageQuerySerializer,
    BoardPageSerializer,
    BoardDetailResponseSerializer,
    BoardCreateRequestSerializer,
    BoardUpdateRequestSerializer,
    CommentCreateRequestSerializer,
    MessageResponseSerializer,
)
from .services import (
    get_board_detail,
    search_boards,
    list_boards_page,
    create_board,
    update_board,
    delete_board,
    create_comment,
    get_comment,
    delete_comment,
    IncompleteBoardError,
    InvalidBoardFieldError,
    BoardNotFoundError,
    UnauthorizedBoardActionError,
    IncompleteCommentError,
    CommentNotFoundError,
    UnauthorizedCommentActionError,
)


def _current_user(request):
    return request.user if request.user.is_authenticated else None


# =============================================================================
# Boards
# =============================================================================

@extend_schema(
    methods=['GET'],
    parameters=[
        OpenApiParameter('page', OpenApiTypes.INT, description='1-based page number', default=1),
        OpenApiParameter('per_page', OpenApiTypes.INT, description='Boards per page'),
    ],
    responses={200: BoardPageSerializer},
    description="List boards newest first. A page past the end returns the last full page.",
    tags=['boards'],
)
@extend_schema(
    methods=['POST'],
    request={'multipart/form-data': BoardCreateRequestSerializer},
    responses={201: BoardSerializer, 400: None},
    description="Create a board. Requires login and an uploaded image.",
    tags=['boards'],
)
@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
@parser_classes([MultiPartParser, FormParser, JSONParser])
def board_list(request):
    """Paged board list (GET) and board creation (POST)."""
    if request.method == 'POST':
        return _create_board(request)

    query = BoardPageQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    page = list_boards_page(
        page=query.validated_data['page'],
        per_page=query.validated_data['per_page'],
    )

    return Response({
        'success': True,
        'data': BoardListSerializer(page.boards, many=True, context={'request': request}).data,
        'current_page': page.current_page,
        'total_pages': page.total_pages,
        'total_count': page.total_count,
    })


def _create_board(request):
    try:
        board = create_board(
            user=_current_user(request),
            region=request.data.get('region'),
            title=request.data.get('title'),
            content=request.data.get('content'),
            meet_date=request.data.get('meet_date'),
            image=request.FILES.get('image'),
            store_id=request.data.get('store') or None,
        )
    except IncompleteBoardError:
        return Response(status=status.HTTP_400_BAD_REQUEST)
    except InvalidBoardFieldError as e:
        return Response({'message': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    serializer = BoardSerializer(board, context={'request': request})
    return Response(serializer.data, status=status.HTTP_201_CREATED)


@extend_schema(
    parameters=[
        OpenApiParameter('value', OpenApiTypes.STR, description='Region to match exactly'),
    ],
    responses={200: BoardSerializer(many=True)},
    description="Boards in a region, newest first.",
    tags=['boards'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def board_search(request):
    """Search boards by region."""
    boards = search_boards(region=request.query_params.get('value'))
    return Response(BoardSerializer(boards, many=True, context={'request': request}).data)


@extend_schema(
    methods=['GET'],
    responses={200: BoardDetailResponseSerializer, 404: None},
    description="Board with its comments. Creation dates are YYYY-MM-DD.",
    tags=['boards'],
)
@extend_schema(
    methods=['PATCH', 'PUT'],
    request=BoardUpdateRequestSerializer,
    responses={200: BoardSerializer, 400: OpenApiTypes.OBJECT, 403: MessageResponseSerializer, 404: MessageResponseSerializer},
    description="Update the submitted fields of a board (owner only).",
    tags=['boards'],
)
@extend_schema(
    methods=['DELETE'],
    responses={200: None, 403: MessageResponseSerializer},
    description="Delete a board (owner only).",
    tags=['boards'],
)
@api_view(['GET', 'PATCH', 'PUT', 'DELETE'])
@permission_classes([AllowAny])
@parser_classes([JSONParser, MultiPartParser, FormParser])
def board_detail(request, board_id):
    """Board detail (GET), partial edit (PATCH/PUT) and delete (DELETE)."""
    if request.method in ('PATCH', 'PUT'):
        return _edit_board(request, board_id)
    if request.method == 'DELETE':
        return _delete_board(request, board_id)

    try:
        board, comments = get_board_detail(board_id=board_id)
    except BoardNotFoundError:
        return Response(status=status.HTTP_404_NOT_FOUND)

    context = {'request': request}
    return Response({
        'board': BoardDetailSerializer(board, context=context).data,
        'comments': CommentDetailSerializer(comments, many=True, context=context).data,
    })


def _edit_board(request, board_id):
    # partial: validated_data only holds the keys that were sent
    serializer = BoardUpdateRequestSerializer(data=request.data, partial=True)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        board = update_board(
            board_id=board_id,
            user=_current_user(request),
            fields=serializer.validated_data,
        )
    except BoardNotFoundError as e:
        return Response({'message': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except UnauthorizedBoardActionError as e:
        return Response({'message': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(BoardSerializer(board, context={'request': request}).data)


def _delete_board(request, board_id):
    try:
        delete_board(board_id=board_id, user=_current_user(request))
    except UnauthorizedBoardActionError as e:
        return Response({'message': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(status=status.HTTP_200_OK)


# =============================================================================
# Comments
# =============================================================================

@extend_schema(
    request=CommentCreateRequestSerializer,
    responses={201: CommentDetailSerializer, 400: None, 404: None},
    description="Comment on a board. Requires login.",
    tags=['comments'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def comment_create(request, board_id):
    """Create a comment on a board."""
    try:
        comment = create_comment(
            board_id=board_id,
            user=_current_user(request),
            content=request.data.get('content'),
        )
    except IncompleteCommentError:
        return Response(status=status.HTTP_400_BAD_REQUEST)
    except BoardNotFoundError:
        return Response(status=status.HTTP_404_NOT_FOUND)

    serializer = CommentDetailSerializer(comment, context={'request': request})
    return Response(serializer.data, status=status.HTTP_201_CREATED)


@extend_schema(
    methods=['GET'],
    responses={200: CommentSerializer, 404: None},
    description="Get a comment with its author's nickname.",
    tags=['comments'],
)
@extend_schema(
    methods=['DELETE'],
    responses={200: None, 403: MessageResponseSerializer},
    description="Delete a comment (author only).",
    tags=['comments'],
)
@api_view(['GET', 'DELETE'])
@permission_classes([AllowAny])
def comment_detail(request, comment_id):
    """Get (GET) or delete (DELETE) a single comment."""
    if request.method == 'DELETE':
        try:
            delete_comment(comment_id=comment_id, user=_current_user(request))
        except UnauthorizedCommentActionError as e:
            return Response({'message': str(e)}, status=status.HTTP_403_FORBIDDEN)
        return Response(status=status.HTTP_200_OK)

    try:
        comment = get_comment(comment_id=comment_id)
    except CommentNotFoundError:
        return Response(status=status.HTTP_404_NOT_FOUND)

    return Response(CommentSerializer(comment, context={'request': request}).data)
