"""
Ledger store.

Persists expenses and answers the per-owner listing and aggregation queries.
"""
import logging

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from errors import StoreError
from models import Expense

logger = logging.getLogger(__name__)


class LedgerStore:
    """Store for expense records."""

    def __init__(self, db):
        self.db = db

    def insert_expense(self, description, amount, category, date, owner_id):
        """
        Insert an expense.

        Args:
            description (str): What was bought
            amount (float): Amount spent
            category (str): Free-form category label
            date (str): Date in YYYY-MM-DD format
            owner_id (int): ID of the owning user

        Returns:
            int: The new expense ID

        Raises:
            StoreError: If the insert fails (unknown owner included)
        """
        expense = Expense(
            description=description,
            amount=amount,
            category=category,
            date=date,
            owner_id=owner_id
        )
        try:
            self.db.session.add(expense)
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.exception('Failed to insert expense for user %s', owner_id)
            raise StoreError('Error saving expense', detail=str(e)) from e

        return expense.id

    def list_expenses_by_owner(self, owner_id):
        """
        List an owner's expenses, newest date first.

        Expenses sharing a date come back newest insert first.

        Returns:
            list[Expense]
        """
        try:
            return Expense.query.filter_by(owner_id=owner_id).order_by(
                Expense.date.desc(),
                Expense.id.desc()
            ).all()
        except SQLAlchemyError as e:
            logger.exception('Failed to list expenses for user %s', owner_id)
            raise StoreError('Error fetching expenses', detail=str(e)) from e

    def sum_by_category(self, owner_id):
        """
        Sum an owner's expenses per category.

        Returns:
            list[tuple]: (category, total) rows, largest total first,
            ties ordered by category name
        """
        total = func.sum(Expense.amount).label('total')
        try:
            rows = self.db.session.query(Expense.category, total).filter(
                Expense.owner_id == owner_id
            ).group_by(
                Expense.category
            ).order_by(
                total.desc(),
                Expense.category.asc()
            ).all()
        except SQLAlchemyError as e:
            logger.exception('Failed to group expenses for user %s', owner_id)
            raise StoreError('Error fetching grouped expenses', detail=str(e)) from e

        return [(category, amount) for category, amount in rows]

    def delete_expense(self, expense_id):
        """
        Delete an expense by primary key, whoever owns it.

        Returns:
            int: Number of rows deleted (0 or 1)
        """
        try:
            deleted = Expense.query.filter_by(id=expense_id).delete(synchronize_session=False)
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.exception('Failed to delete expense %s', expense_id)
            raise StoreError('Error deleting expense', detail=str(e)) from e

        return deleted
