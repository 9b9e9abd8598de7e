"""Lettura dell'identità dichiarata nel token bearer.

Il token NON viene verificato: è emesso e validato dal provider di
autenticazione a monte. ``sub`` ed ``email`` servono solo come
identificatore opaco da inoltrare, mai per decisioni di autorizzazione.
"""
import logging

import jwt

logger = logging.getLogger(__name__)

BEARER_PREFIX = 'Bearer '


def extract_identity(authorization_header):
    """Ritorna ``(user_id, email)`` dal token, o ``(None, None)``"""
    if not authorization_header or not authorization_header.startswith(BEARER_PREFIX):
        return None, None

    token = authorization_header[len(BEARER_PREFIX):].strip()
    try:
        claims = jwt.decode(token, options={'verify_signature': False})
    except jwt.PyJWTError as e:
        logger.warning('JWT decode error: %s', e)
        return None, None

    return claims.get('sub') or None, claims.get('email') or None
