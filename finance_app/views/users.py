"""Blueprint per la sincronizzazione degli utenti dal provider di autenticazione"""
from flask import Blueprint, request, jsonify, g
from finance_app.services.user_service import UserService

users_bp = Blueprint('users', __name__)


@users_bp.route('/sync', methods=['POST'])
def sync():
    data = request.get_json(silent=True) or {}
    user_id = data.get('id') or g.get('user_id')
    email = data.get('email') or g.get('user_email')
    UserService().ensure_user(user_id, email)
    return jsonify({'success': True, 'message': 'User synced'})
