"""Blueprint per i conti"""
from flask import Blueprint, request, jsonify, current_app
from finance_app.services.account_service import AccountService
from finance_app.views import error_response, resolve_user_id

accounts_bp = Blueprint('accounts', __name__)


@accounts_bp.route('', methods=['GET'])
def lista():
    try:
        accounts = AccountService().get_all()
        return jsonify([a.to_dict() for a in accounts])
    except Exception as e:
        current_app.logger.exception('Errore nel caricamento dei conti')
        return error_response(str(e))


@accounts_bp.route('', methods=['POST'])
def crea():
    data = request.get_json(silent=True) or {}
    success, message, account = AccountService().create_account(
        user_id=resolve_user_id(data),
        name=data.get('name'),
        type=data.get('type'),
        balance=data.get('balance'),
        color=data.get('color'),
        icon=data.get('icon'),
    )
    if not success:
        return error_response(message)
    return jsonify(account.to_dict())
