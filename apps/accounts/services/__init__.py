from .exceptions import (
    AccountsServiceError,
    EmailTakenError,
    InvalidCredentialsError,
    InactiveAccountError,
)
from .user_registration import register_user
from .user_login import authenticate_user

__all__ = [
    'AccountsServiceError',
    'EmailTakenError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'register_user',
    'authenticate_user',
]
