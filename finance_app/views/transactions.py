"""Blueprint per le transazioni.

La POST passa per il LedgerService: inserimento e rettifica del saldo del
conto sono un'unica operazione atomica.
"""
from flask import Blueprint, request, jsonify, current_app
from finance_app.services.ledger_service import LedgerService
from finance_app.views import error_response, resolve_user_id

transactions_bp = Blueprint('transactions', __name__)


@transactions_bp.route('', methods=['GET'])
def lista():
    """Transazioni ordinate per data decrescente"""
    try:
        transactions = LedgerService().get_transactions()
        return jsonify([t.to_dict() for t in transactions])
    except Exception as e:
        current_app.logger.exception('Errore nel caricamento delle transazioni')
        return error_response(str(e))


@transactions_bp.route('', methods=['POST'])
def registra():
    data = request.get_json(silent=True) or {}
    success, message, tx = LedgerService().record_transaction(
        user_id=resolve_user_id(data),
        account_id=data.get('account_id'),
        category_id=data.get('category_id'),
        type=data.get('type'),
        description=data.get('description'),
        amount=data.get('amount'),
        date=data.get('date'),
        payment_method=data.get('payment_method'),
    )
    if not success:
        return error_response(message)
    return jsonify(tx.to_dict())
