"""User registration service."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from .exceptions import EmailTakenError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    nickname: str = "",
    name: str = "",
    profile_image: str = "",
) -> User:
    """
    Register a new community member.

    Args:
        email: User's email address (login)
        password: User's password (will be hashed)
        nickname: Name shown on boards, comments and reviews
        name: Real name, snapshotted onto reviews
        profile_image: Optional avatar URL

    Returns:
        Created User instance

    Raises:
        EmailTakenError: If the email is already registered
    """
    if User.objects.filter(email__iexact=email).exists():
        raise EmailTakenError()

    try:
        user = User.objects.create_user(
            email=email,
            password=password,
            nickname=nickname,
            name=name,
            profile_image=profile_image,
        )
    except IntegrityError:
        raise EmailTakenError()

    logger.info("Registered user %s", user.id)
    return user
