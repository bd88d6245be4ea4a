"""Login service - credential check through Django's auth backends."""

import logging

from django.contrib.auth import authenticate, get_user_model
from django.contrib.auth.models import update_last_login

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()
logger = logging.getLogger(__name__)


def authenticate_user(*, email: str, password: str) -> User:
    """
    Log a member in by email and password and stamp last_login.

    The email is matched case-insensitively against the stored address
    before it reaches the auth backend, which compares it exactly.

    Raises:
        InvalidCredentialsError: If no member matches the email and password
        InactiveAccountError: If the password is right but the account is disabled
    """
    stored_email = (
        User.objects
        .filter(email__iexact=email)
        .values_list('email', flat=True)
        .first()
    )
    if stored_email is None:
        raise InvalidCredentialsError()

    user = authenticate(None, email=stored_email, password=password)
    if user is None:
        # ModelBackend refuses inactive accounts the same way as bad passwords
        member = User.objects.get(email=stored_email)
        if not member.is_active and member.check_password(password):
            logger.warning("Login attempt on deactivated account %s", member.id)
            raise InactiveAccountError()
        raise InvalidCredentialsError()

    update_last_login(None, user)
    logger.info("User %s logged in", user.id)
    return user
