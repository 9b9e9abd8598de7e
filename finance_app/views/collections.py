"""Blueprint CRUD per le collezioni senza logica propria.

Un'unica factory sostituisce le route quasi identiche di categorie,
transazioni ricorrenti, obiettivi e budget.
"""
from flask import Blueprint, request, jsonify, current_app
from finance_app.models import Budget, Category, Goal, RecurringTransaction
from finance_app.services.collection_service import CollectionService
from finance_app.views import error_response, resolve_user_id

# (nome blueprint, prefisso url, modello, default dei campi)
COLLECTIONS = [
    ('categories', '/categories', Category, {'is_default': False}),
    ('recurring_transactions', '/recurring_transactions', RecurringTransaction, {}),
    ('goals', '/goals', Goal, {'current_amount': 0, 'status': 'active'}),
    ('budgets', '/budgets', Budget, {}),
]


def make_collection_blueprint(name, model, defaults=None):
    bp = Blueprint(name, __name__)

    @bp.route('', methods=['GET'])
    def lista():
        try:
            rows = CollectionService(model, defaults).get_all()
            return jsonify([r.to_dict() for r in rows])
        except Exception as e:
            current_app.logger.exception('Errore nel caricamento di %s', name)
            return error_response(str(e))

    @bp.route('', methods=['POST'])
    def crea():
        data = dict(request.get_json(silent=True) or {})
        data['user_id'] = resolve_user_id(data)
        success, message, row = CollectionService(model, defaults).create(data)
        if not success:
            return error_response(message)
        return jsonify(row.to_dict())

    return bp


def collection_blueprints():
    """Ritorna le coppie ``(blueprint, url_prefix)`` da registrare"""
    return [
        (make_collection_blueprint(name, model, defaults), prefix)
        for name, prefix, model, defaults in COLLECTIONS
    ]
