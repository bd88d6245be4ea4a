import pytest
from datetime import date, timedelta
from django.core.files.uploadedfile import SimpleUploadedFile
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.boards.models import Board, Comment
from apps.stores.models import Store


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Keep uploaded board images out of the project tree."""
    settings.MEDIA_ROOT = str(tmp_path / 'media')
    return settings.MEDIA_ROOT


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def board_user(db):
    """Create and return the board owner."""
    return User.objects.create_user(
        email='host@example.com',
        password='TestPass123!',
        nickname='host',
        name='Meetup Host',
        profile_image='https://cdn.example.com/host.png',
    )


@pytest.fixture
def board_other_user(db):
    """Create and return a user who owns nothing."""
    return User.objects.create_user(
        email='guest@example.com',
        password='TestPass123!',
        nickname='guest',
        name='Meetup Guest',
    )


@pytest.fixture
def board_auth_client(board_user):
    """Return API client authenticated as the board owner."""
    return _client_for(board_user)


@pytest.fixture
def board_other_client(board_other_user):
    """Return API client authenticated as the other user."""
    return _client_for(board_other_user)


@pytest.fixture
def board_store(db):
    """Create and return a store boards can meet at."""
    return Store.objects.create(name='Bean There', region='Seoul', address='1 Coffee St')


@pytest.fixture
def image_file():
    """Return a small uploaded image."""
    return SimpleUploadedFile('meetup.png', b'\x89PNG\r\n\x1a\nfake-image', content_type='image/png')


@pytest.fixture
def make_board(db, board_user):
    """Factory creating boards with a controllable creation time."""
    base = timezone.now() - timedelta(days=30)

    def _make(*, index=0, user=None, region='Seoul', title=None, store=None):
        board = Board.objects.create(
            user=user or board_user,
            store=store,
            title=title or f'Meetup {index}',
            content='Let us drink coffee together.',
            meet_date=date(2024, 5, 1),
            region=region,
            image=SimpleUploadedFile(f'board{index}.png', b'img', content_type='image/png'),
        )
        created_at = base + timedelta(minutes=index)
        Board.objects.filter(id=board.id).update(created_at=created_at)
        board.created_at = created_at
        return board

    return _make


@pytest.fixture
def board(make_board, board_store):
    """Create and return a single board."""
    return make_board(index=0, title='Morning espresso', store=board_store)


@pytest.fixture
def comment(db, board, board_user):
    """Create and return a comment by the board owner."""
    return Comment.objects.create(user=board_user, board=board, content='See you there!')


@pytest.fixture
def other_comment(db, board, board_other_user):
    """Create and return a comment by the other user."""
    return Comment.objects.create(user=board_other_user, board=board, content='Count me in.')
