"""
Expense routes.

Endpoints:
- POST /gastos - Create expense
- GET /gastos/<usuario_id> - List a user's expenses, newest first
- DELETE /gastos/<expense_id> - Delete expense
- GET /gastos/agrupados/<usuario_id> - Totals per category

The user ID travels with every request and is trusted as given.
"""
from flask import current_app, request, jsonify

from errors import StoreError, ValidationError
from blueprints.expenses import expenses_bp


def _ledger_service():
    return current_app.extensions['ledger_service']


def _store_error(e):
    return jsonify({'message': e.message, 'error': e.detail}), 500


@expenses_bp.route('', methods=['POST'])
def create_expense():
    """Create a new expense.

    Request body:
        {
            "descricao": "Lunch",
            "valor": 25.5,
            "categoria": "Food",
            "data": "2024-01-10",
            "usuarioId": 1
        }

    Returns:
        201 {"message": "...", "gastoId": 1}
    """
    data = request.get_json(silent=True) or {}

    try:
        expense_id = _ledger_service().add_expense(
            data.get('descricao'),
            data.get('valor'),
            data.get('categoria'),
            data.get('data'),
            data.get('usuarioId')
        )
    except ValidationError as e:
        return jsonify({'message': e.message}), 400
    except StoreError as e:
        return _store_error(e)

    return jsonify({'message': 'Expense added successfully!', 'gastoId': expense_id}), 201


@expenses_bp.route('/<usuario_id>', methods=['GET'])
def list_expenses(usuario_id):
    """List a user's expenses ordered by date, newest first."""
    try:
        expenses = _ledger_service().list_expenses(usuario_id)
    except StoreError as e:
        return _store_error(e)

    return jsonify([expense.to_dict() for expense in expenses]), 200


@expenses_bp.route('/<expense_id>', methods=['DELETE'])
def delete_expense(expense_id):
    """Delete an expense. `changes` is 0 when nothing matched."""
    try:
        result = _ledger_service().remove_expense(expense_id)
    except StoreError as e:
        return _store_error(e)

    return jsonify({
        'message': 'Expense deleted successfully!',
        'changes': 1 if result['deleted'] else 0
    }), 200


@expenses_bp.route('/agrupados/<usuario_id>', methods=['GET'])
def grouped_expenses(usuario_id):
    """Totals per category for a user, largest first."""
    try:
        totals = _ledger_service().category_totals(usuario_id)
    except StoreError as e:
        return _store_error(e)

    return jsonify([
        {'categoria': category, 'total': total}
        for category, total in totals
    ]), 200
