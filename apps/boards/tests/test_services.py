"""
Service layer tests for boards app.

Tests service functions for:
- Page window arithmetic
- Date formatting
- Board management (detail, search, paging, create, update, delete)
- Comment management (create, get, delete)
"""

import pytest
from datetime import date, datetime, timezone as dt_timezone
from uuid import uuid4

from apps.boards.models import Board, Comment
from apps.boards.services import (
    compute_page_window,
    get_board_detail,
    search_boards,
    list_boards_page,
    create_board,
    update_board,
    delete_board,
    create_comment,
    get_comment,
    delete_comment,
)
from apps.boards.services.exceptions import (
    IncompleteBoardError,
    InvalidBoardFieldError,
    BoardNotFoundError,
    UnauthorizedBoardActionError,
    IncompleteCommentError,
    CommentNotFoundError,
    UnauthorizedCommentActionError,
)
from apps.boards.utils import format_date


# ============================================================================
# PAGE WINDOW TESTS
# ============================================================================

class TestComputePageWindow:

    @pytest.mark.parametrize('total_count, per_page, expected', [
        (0, 10, 0),
        (1, 10, 1),
        (10, 10, 1),
        (11, 10, 2),
        (25, 5, 5),
    ])
    def test_total_pages_is_ceiling(self, total_count, per_page, expected):
        window = compute_page_window(total_count=total_count, per_page=per_page, page=1)
        assert window.total_pages == expected

    def test_start_of_page_in_range(self):
        window = compute_page_window(total_count=25, per_page=10, page=3)
        assert window.start == 20

    def test_page_past_end_clamps_to_last_full_page(self):
        window = compute_page_window(total_count=25, per_page=10, page=7)
        assert window.start == 15

    def test_offset_equal_to_total_is_clamped(self):
        window = compute_page_window(total_count=20, per_page=10, page=3)
        assert window.start == 10

    def test_fewer_items_than_page_size(self):
        window = compute_page_window(total_count=3, per_page=10, page=4)
        assert window.start == 0

    def test_rejects_non_positive_arguments(self):
        with pytest.raises(ValueError):
            compute_page_window(total_count=3, per_page=0, page=1)
        with pytest.raises(ValueError):
            compute_page_window(total_count=3, per_page=1, page=0)


# ============================================================================
# DATE FORMAT TESTS
# ============================================================================

class TestFormatDate:

    def test_iso_string(self):
        assert format_date('2024-03-05T10:00:00Z') == '2024-03-05'

    def test_aware_datetime(self):
        value = datetime(2024, 3, 5, 10, 0, tzinfo=dt_timezone.utc)
        assert format_date(value) == '2024-03-05'

    def test_plain_date(self):
        assert format_date(date(2024, 12, 31)) == '2024-12-31'

    def test_empty_value(self):
        assert format_date(None) is None
        assert format_date('') is None

    def test_garbage_string(self):
        with pytest.raises(ValueError):
            format_date('not a date')


# ============================================================================
# BOARD MANAGEMENT TESTS
# ============================================================================

@pytest.mark.django_db
class TestBoardManagement:

    def test_get_board_detail(self, board, comment):
        found, comments = get_board_detail(board_id=board.id)

        assert found == board
        assert list(comments) == [comment]

    def test_get_board_detail_not_found(self):
        with pytest.raises(BoardNotFoundError):
            get_board_detail(board_id=uuid4())

    def test_search_without_region_is_empty(self, board):
        assert list(search_boards(region='')) == []
        assert list(search_boards(region=None)) == []

    def test_list_boards_page(self, make_board):
        boards = [make_board(index=i) for i in range(3)]

        page = list_boards_page(page=2, per_page=2)

        assert page.current_page == 2
        assert page.total_pages == 2
        assert page.total_count == 3
        assert page.boards == [boards[0]]

    def test_list_boards_page_past_end_is_never_empty(self, make_board):
        for i in range(3):
            make_board(index=i)

        page = list_boards_page(page=50, per_page=2)

        assert len(page.boards) == 2

    def test_create_board(self, board_user, image_file):
        board = create_board(
            user=board_user,
            region='Daegu',
            title='Cold brew tasting',
            content='Three roasters, one table.',
            meet_date='2024-08-10',
            image=image_file,
        )

        assert board.meet_date == date(2024, 8, 10)
        assert board.store is None
        assert Board.objects.filter(id=board.id, user=board_user).exists()

    @pytest.mark.parametrize('missing', ['user', 'region', 'title', 'content', 'meet_date', 'image'])
    def test_create_board_requires_every_field(self, board_user, image_file, missing):
        kwargs = {
            'user': board_user,
            'region': 'Daegu',
            'title': 'Cold brew tasting',
            'content': 'Three roasters, one table.',
            'meet_date': '2024-08-10',
            'image': image_file,
        }
        kwargs[missing] = None

        with pytest.raises(IncompleteBoardError):
            create_board(**kwargs)

        assert Board.objects.count() == 0

    def test_create_board_unknown_store(self, board_user, image_file):
        with pytest.raises(InvalidBoardFieldError):
            create_board(
                user=board_user,
                region='Daegu',
                title='Cold brew tasting',
                content='Three roasters, one table.',
                meet_date='2024-08-10',
                image=image_file,
                store_id=uuid4(),
            )

    def test_update_board_ignores_unknown_fields(self, board, board_user, board_other_user):
        updated = update_board(
            board_id=board.id,
            user=board_user,
            fields={'region': 'Incheon', 'user': board_other_user.id},
        )

        assert updated.region == 'Incheon'
        assert updated.user == board_user

    def test_update_board_invalid_date(self, board, board_user):
        with pytest.raises(InvalidBoardFieldError):
            update_board(board_id=board.id, user=board_user, fields={'meet_date': '31/12/2024'})

    def test_update_board_by_non_owner(self, board, board_other_user):
        with pytest.raises(UnauthorizedBoardActionError):
            update_board(board_id=board.id, user=board_other_user, fields={'title': 'x'})

    def test_update_missing_board(self, board_user):
        with pytest.raises(BoardNotFoundError):
            update_board(board_id=uuid4(), user=board_user, fields={'title': 'x'})

    def test_delete_board_by_owner(self, board, board_user):
        delete_board(board_id=board.id, user=board_user)
        assert not Board.objects.filter(id=board.id).exists()

    def test_delete_board_by_non_owner(self, board, board_other_user):
        with pytest.raises(UnauthorizedBoardActionError):
            delete_board(board_id=board.id, user=board_other_user)
        assert Board.objects.filter(id=board.id).exists()

    def test_delete_board_anonymous(self, board):
        with pytest.raises(UnauthorizedBoardActionError):
            delete_board(board_id=board.id, user=None)


# ============================================================================
# COMMENT MANAGEMENT TESTS
# ============================================================================

@pytest.mark.django_db
class TestCommentManagement:

    def test_create_comment_populates_author(self, board, board_other_user):
        comment = create_comment(board_id=board.id, user=board_other_user, content='On my way')

        assert comment.user.nickname == 'guest'
        assert comment.board_id == board.id

    @pytest.mark.parametrize('missing', ['user', 'content', 'board_id'])
    def test_create_comment_requires_fields(self, board, board_user, missing):
        kwargs = {'board_id': board.id, 'user': board_user, 'content': 'Hi'}
        kwargs[missing] = None

        with pytest.raises(IncompleteCommentError):
            create_comment(**kwargs)

        assert Comment.objects.count() == 0

    def test_create_comment_missing_board(self, board_user):
        with pytest.raises(BoardNotFoundError):
            create_comment(board_id=uuid4(), user=board_user, content='Hi')

    def test_get_comment(self, comment):
        assert get_comment(comment_id=comment.id) == comment

    def test_get_missing_comment(self, db):
        with pytest.raises(CommentNotFoundError):
            get_comment(comment_id=uuid4())

    def test_delete_comment_by_non_owner(self, comment, board_other_user):
        with pytest.raises(UnauthorizedCommentActionError):
            delete_comment(comment_id=comment.id, user=board_other_user)
        assert Comment.objects.filter(id=comment.id).exists()

    def test_delete_missing_comment(self, board_user):
        with pytest.raises(UnauthorizedCommentActionError):
            delete_comment(comment_id=uuid4(), user=board_user)
