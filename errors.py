"""
Error taxonomy shared by the stores, the services and the API layer.
"""


class LedgerError(Exception):
    """Base class for every failure raised by the account and ledger core."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(LedgerError):
    """A required field is missing, blank or malformed."""


class ConflictError(LedgerError):
    """A unique key (the user email) already exists."""


class AuthError(LedgerError):
    """Credentials did not match. Unknown email and wrong password look the same."""


class StoreError(LedgerError):
    """The database failed in a way not covered by the other errors.

    `detail` keeps the driver's message for diagnostics.
    """

    def __init__(self, message, detail=None):
        super().__init__(message)
        self.detail = detail
