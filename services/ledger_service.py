"""
Ledger service.

Handles expense creation, listing, aggregation and deletion with validation.
"""
import logging
import math
from datetime import datetime

from errors import ValidationError
from utils import is_blank, parse_id

logger = logging.getLogger(__name__)

UNCATEGORIZED = 'Uncategorized'


def parse_amount(value):
    """
    Coerce an amount to a float.

    Numbers and numeric strings are accepted. Booleans, other strings,
    NaN, infinities and numbers too large for a float are rejected.

    Raises:
        ValidationError: If the value is not numeric
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValidationError('Amount must be a number')
    try:
        amount = float(value)
    except (ValueError, OverflowError):
        raise ValidationError('Amount must be a number')
    if not math.isfinite(amount):
        raise ValidationError('Amount must be a number')
    return amount


class LedgerService:
    """Service for expense operations."""

    def __init__(self, ledger_store):
        self.ledger_store = ledger_store

    def add_expense(self, description, amount, category, date, owner_id):
        """
        Create a new expense with validation.

        Args:
            description (str): Expense description
            amount (float/str): Expense amount
            category (str): Category label
            date (str): Date in YYYY-MM-DD format
            owner_id (int/str): ID of the owning user

        Returns:
            int: The new expense ID

        Raises:
            ValidationError: If a field is missing or malformed
            StoreError: If the insert fails
        """
        if any(is_blank(v) for v in (description, amount, category, date, owner_id)):
            raise ValidationError('All fields are required')

        if not isinstance(description, str) or not isinstance(category, str):
            raise ValidationError('Description and category must be text')

        amount = parse_amount(amount)
        # Zero counts as missing, like any other falsy amount
        if amount == 0:
            raise ValidationError('All fields are required')

        if not isinstance(date, str):
            raise ValidationError('Date must be in YYYY-MM-DD format')
        try:
            datetime.strptime(date, '%Y-%m-%d')
        except ValueError:
            raise ValidationError('Date must be in YYYY-MM-DD format')

        parsed_owner_id = parse_id(owner_id)
        if parsed_owner_id is None:
            raise ValidationError('User ID must be an integer')

        expense_id = self.ledger_store.insert_expense(
            description, amount, category, date, parsed_owner_id
        )
        logger.info(f"Added expense {expense_id} for user {parsed_owner_id}")
        return expense_id

    def list_expenses(self, owner_id):
        """
        List a user's expenses, newest date first.

        Returns an empty list when the owner ID is missing or unknown.
        """
        parsed_owner_id = parse_id(owner_id)
        if parsed_owner_id is None:
            return []
        return self.ledger_store.list_expenses_by_owner(parsed_owner_id)

    def category_totals(self, owner_id):
        """
        Total a user's expenses per category, largest first.

        Returns:
            list[tuple]: (category, total) pairs; blank categories are
            reported as "Uncategorized"
        """
        parsed_owner_id = parse_id(owner_id)
        if parsed_owner_id is None:
            return []
        return [
            (UNCATEGORIZED if is_blank(category) else category, total)
            for category, total in self.ledger_store.sum_by_category(parsed_owner_id)
        ]

    def remove_expense(self, expense_id):
        """
        Delete an expense by ID.

        No ownership check is made: any caller holding the ID can delete it.

        Returns:
            dict: {'deleted': bool}
        """
        parsed_id = parse_id(expense_id)
        if parsed_id is None:
            return {'deleted': False}

        deleted = self.ledger_store.delete_expense(parsed_id) > 0
        if deleted:
            logger.info(f"Deleted expense {parsed_id}")
        return {'deleted': deleted}
