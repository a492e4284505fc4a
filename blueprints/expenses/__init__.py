"""
Expenses blueprint for expense CRUD and category totals.
"""
from flask import Blueprint

expenses_bp = Blueprint('expenses', __name__, url_prefix='/gastos')

from blueprints.expenses import routes  # noqa: F401, E402
