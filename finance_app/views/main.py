"""Blueprint principale per le route di base"""
from flask import Blueprint, jsonify

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Health check"""
    return 'API is running ok'


@main_bp.route('/subscriptions/me')
def my_subscription():
    # nessun abbonamento gestito: placeholder
    return jsonify(None)
