import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from apps.accounts.models import User
from apps.stores.models import Store
from apps.reviews.models import Review


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def store_reviewer(db):
    return User.objects.create_user(
        email='taster@example.com',
        password='TestPass123!',
        nickname='taster',
        name='Park Taster',
    )


@pytest.fixture
def store(db):
    """Create and return a store without reviews."""
    return Store.objects.create(name='Namusairo', region='Seoul', address='21 Sajik-ro')


@pytest.fixture
def reviewed_store(store, store_reviewer):
    """
    Store with three reviews created a minute apart, newest last.

    Returns (store, reviews) with reviews in creation order.
    """
    base = timezone.now() - timedelta(hours=1)
    reviews = []
    for index, grade in enumerate([5, 3, 4]):
        review = Review.objects.create(
            store=store,
            author=store_reviewer,
            grade=grade,
            content=f'Visit {index}',
        )
        Review.objects.filter(id=review.id).update(created_at=base + timedelta(minutes=index))
        reviews.append(review)
    store.star_rating = 4.0
    store.save()
    return store, reviews
