"""
Service layer for the expense ledger.

Services encapsulate business logic separate from route handlers.
"""
from services.account_service import AccountService
from services.ledger_service import LedgerService

__all__ = [
    'AccountService',
    'LedgerService',
]
