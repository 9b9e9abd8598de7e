"""Servizio per la registrazione delle transazioni e l'aggiornamento dei saldi.

È l'unico punto dell'applicazione che modifica ``accounts.balance`` dopo la
creazione del conto. Inserimento della transazione e rettifica del saldo
avvengono nella stessa transazione del database: o entrambe visibili, o
nessuna delle due.
"""
import datetime
import logging
from decimal import Decimal, InvalidOperation

from flask import current_app
from sqlalchemy import update

from finance_app import db
from finance_app.models.account import Account
from finance_app.models.transaction import Transaction
from finance_app.services import BaseService
from finance_app.services.user_service import UserService
from finance_app.utils.parsing import blank_to_none, parse_date, parse_decimal

logger = logging.getLogger(__name__)

INCOME = 'income'
# precisione delle colonne Numeric(14, 2)
CENT = Decimal('0.01')


class AccountNotFoundError(LookupError):
    """La rettifica del saldo non ha trovato il conto indicato"""


class LedgerService(BaseService):
    """Servizio per il ledger delle transazioni"""

    def __init__(self, user_service=None):
        super().__init__()
        self.user_service = user_service or UserService()

    def get_transactions(self):
        """Tutte le transazioni, dalla più recente per data"""
        return Transaction.query.order_by(
            Transaction.date.desc(), Transaction.created_at.desc()
        ).all()

    def record_transaction(self, user_id, type, amount, date=None, account_id=None,
                           category_id=None, description=None, payment_method=None):
        """Registra una transazione e applica l'effetto sul saldo del conto.

        Ritorna ``(success, message, transaction)``. In caso di errore nessuna
        modifica è visibile: né la transazione né la rettifica del saldo.
        """
        user_id = blank_to_none(user_id)
        account_id = blank_to_none(account_id)
        category_id = blank_to_none(category_id)

        try:
            amount = parse_decimal(amount)
            if amount < 0:
                raise ValueError("L'importo non può essere negativo (il segno dipende dal tipo)")
            if not self._is_whole_cents(amount):
                raise ValueError(f"Importo non valido o con più di due decimali: {amount}")
            self._validate_type(type)
            tx_date = parse_date(date) if blank_to_none(date) is not None else datetime.date.today()
        except ValueError as e:
            return False, str(e), None

        # best-effort: un errore di provisioning non blocca la scrittura
        self.user_service.ensure_user(user_id)

        try:
            tx = Transaction(
                user_id=user_id,
                account_id=account_id,
                category_id=category_id,
                type=type,
                description=description,
                amount=amount,
                date=tx_date,
                payment_method=payment_method,
            )
            db.session.add(tx)
            db.session.flush()

            if account_id:
                self._apply_balance_adjustment(account_id, type, amount)

            # rilegge la riga persistita (id e default del server) dentro la stessa
            # transazione e la stacca dalla sessione: il commit non la fa scadere
            db.session.refresh(tx)
            db.session.expunge(tx)

            db.session.commit()
        except Exception as e:
            db.session.rollback()
            logger.exception('Registrazione transazione fallita, rollback eseguito: %s', e)
            return False, str(e), None

        logger.info('Transazione %s registrata (%s %s, conto=%s)', tx.id, type, amount, account_id)
        return True, "Transazione registrata con successo", tx

    def _is_whole_cents(self, amount):
        """L'importo deve essere memorizzabile senza arrotondamenti"""
        try:
            return amount == amount.quantize(CENT)
        except InvalidOperation:
            # oltre la precisione del contesto decimale
            return False

    def _validate_type(self, tx_type):
        allowed = current_app.config.get('TRANSACTION_TYPES', (INCOME, 'expense'))
        if tx_type not in allowed:
            raise ValueError(f"Tipo transazione non riconosciuto: {tx_type!r} (ammessi: {', '.join(allowed)})")

    def _apply_balance_adjustment(self, account_id, tx_type, amount):
        """Rettifica il saldo dentro l'UPDATE: il lock di riga serializza le scritture concorrenti"""
        delta = amount if tx_type == INCOME else -amount
        result = db.session.execute(
            update(Account)
            .where(Account.id == account_id)
            .values(balance=Account.balance + delta)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            raise AccountNotFoundError(f"Conto {account_id} non trovato")
