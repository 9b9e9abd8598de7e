"""Impostazioni utente (numero WhatsApp): stub senza persistenza"""
from flask import Blueprint, request, jsonify, current_app

settings_bp = Blueprint('settings', __name__)


@settings_bp.route('/settings', methods=['GET'])
def leggi():
    return jsonify({'whatsapp_number': None})


@settings_bp.route('/settings', methods=['POST'])
def salva():
    data = request.get_json(silent=True) or {}
    whatsapp_number = data.get('whatsapp_number')
    current_app.logger.info('Received WhatsApp Number: %s', whatsapp_number)
    return jsonify({'success': True, 'whatsapp_number': whatsapp_number})
