"""
Storage layer for the expense ledger.

Stores wrap the shared Flask-SQLAlchemy handle and run one statement per call.
"""
from stores.credential_store import CredentialStore
from stores.ledger_store import LedgerStore

__all__ = [
    'CredentialStore',
    'LedgerStore',
]
