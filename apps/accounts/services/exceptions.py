"""Errors raised by the accounts services; views turn them into 400/401/403."""


class AccountsServiceError(Exception):
    default_message = 'Account operation failed'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class EmailTakenError(AccountsServiceError):
    default_message = 'A user with this email already exists'


class InvalidCredentialsError(AccountsServiceError):
    default_message = 'Invalid email or password'


class InactiveAccountError(AccountsServiceError):
    default_message = 'Account is deactivated'
