"""Blueprint HTTP dell'API"""
from flask import g, jsonify


def error_response(message, status=500):
    """Envelope di errore comune a tutte le route"""
    return jsonify({'error': message}), status


def resolve_user_id(data, key='user_id'):
    """user_id dal body; in mancanza, l'identità dichiarata nel token"""
    return data.get(key) or g.get('user_id')
