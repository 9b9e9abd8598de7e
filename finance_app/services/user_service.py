"""Service per il provisioning degli utenti"""
import logging

from sqlalchemy import insert
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from finance_app import db
from finance_app.models.user import User
from finance_app.services import BaseService
from finance_app.utils.parsing import blank_to_none

logger = logging.getLogger(__name__)


class UserService(BaseService):
    """Garantisce che la riga dell'utente esista prima delle scritture che la referenziano"""

    def ensure_user(self, user_id, email=None):
        """Crea l'utente se manca (insert-or-ignore), senza errore se esiste già.

        Best-effort: un errore del database viene registrato nel log e non
        propagato, così la scrittura del chiamante può proseguire.
        """
        user_id = blank_to_none(user_id)
        if not user_id:
            return

        values = {'id': user_id, 'email': blank_to_none(email)}
        try:
            created = self._insert_or_ignore(values)
            db.session.commit()
            if created:
                logger.info('Utente %s creato nel database', user_id)
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception('Errore nella verifica esistenza utente: %s', e)

    def _insert_or_ignore(self, values):
        """Ritorna True se la riga è stata effettivamente inserita"""
        dialect = db.session.get_bind().dialect.name

        if dialect in ('postgresql', 'sqlite'):
            module = postgresql if dialect == 'postgresql' else sqlite
            stmt = module.insert(User.__table__).values(**values).on_conflict_do_nothing(index_elements=['id'])
            return db.session.execute(stmt).rowcount == 1

        # altri dialetti: insert in un savepoint, il conflitto vale come "già presente"
        try:
            with db.session.begin_nested():
                db.session.execute(insert(User.__table__).values(**values))
            return True
        except IntegrityError:
            return False
