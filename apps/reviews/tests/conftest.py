import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.stores.models import Store
from apps.reviews.models import Review


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def review_user(db):
    """Create and return a test user for reviews."""
    return User.objects.create_user(
        email='reviewer@example.com',
        password='TestPass123!',
        nickname='elice',
        name='Kim Tokki',
    )


@pytest.fixture
def review_other_user(db):
    """Create and return another test user for reviews."""
    return User.objects.create_user(
        email='review_other@example.com',
        password='TestPass123!',
        nickname='rabbit',
        name='Lee Other',
    )


@pytest.fixture
def review_auth_client(review_user):
    """Return API client authenticated as review user."""
    return _client_for(review_user)


@pytest.fixture
def review_other_client(review_other_user):
    """Return API client authenticated as other user."""
    return _client_for(review_other_user)


@pytest.fixture
def review_store(db):
    """Create and return a store without reviews."""
    return Store.objects.create(name='Blue Bottle', region='Seoul')


@pytest.fixture
def rated_store(db, review_other_user):
    """Store with one grade-4 review by the other user (rating 4.0)."""
    store = Store.objects.create(name='Fritz', region='Seoul', star_rating=4.0)
    Review.objects.create(
        store=store,
        author=review_other_user,
        grade=4,
        content='Solid flat white.',
        author_nickname=review_other_user.nickname,
        author_name=review_other_user.name,
    )
    return store


@pytest.fixture
def review(db, review_user, review_other_user):
    """
    Grade-3 review by review_user on a store that also has a grade-5 review.

    The store's rating is 4.0 over the two reviews.
    """
    store = Store.objects.create(name='Anthracite', region='Seoul', star_rating=4.0)
    Review.objects.create(store=store, author=review_other_user, grade=5, content='Best pour-over in town.')
    return Review.objects.create(
        store=store,
        author=review_user,
        grade=3,
        content='A bit sour.',
        author_nickname=review_user.nickname,
        author_name=review_user.name,
    )
