"""
Servizio base per la gestione della business logic
"""
import logging
from finance_app import db

__all__ = ['BaseService']

logger = logging.getLogger(__name__)


class BaseService:
    """Classe base per i servizi con metodi comuni"""

    def __init__(self):
        self.db = db

    def save(self, obj):
        """Salva un oggetto nel database.

        Ritorna ``(success, message)``; in caso di errore la sessione viene
        riportata allo stato precedente e il messaggio è quello del database.
        """
        try:
            self.db.session.add(obj)
            self.db.session.commit()
            return True, "Operazione completata con successo"
        except Exception as e:
            self.db.session.rollback()
            logger.exception('Salvataggio di %r fallito', obj)
            return False, str(e)
