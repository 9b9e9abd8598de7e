"""Modello per le transazioni"""
from datetime import date
from finance_app import db
from finance_app.models.base import SerializerMixin, new_uuid


class Transaction(SerializerMixin, db.Model):
    """Movimento monetario, immutabile dopo la creazione.

    ``amount`` è sempre non negativo: il segno dell'effetto sul conto
    deriva da ``type`` ('income' somma, gli altri tipi sottraggono).
    ``account_id`` NULL = voce di sola pianificazione, nessun effetto sui saldi.
    """
    __tablename__ = 'transactions'

    id = db.Column(db.String(36), primary_key=True, default=new_uuid)
    user_id = db.Column(db.String(128), db.ForeignKey('users.id'), nullable=True, index=True)
    account_id = db.Column(db.String(36), db.ForeignKey('accounts.id'), nullable=True, index=True)
    category_id = db.Column(db.String(36), db.ForeignKey('categories.id'), nullable=True)
    type = db.Column(db.String(20), nullable=False)
    description = db.Column(db.String(255), nullable=True)
    amount = db.Column(db.Numeric(14, 2), nullable=False)
    date = db.Column(db.Date, nullable=False, default=date.today, index=True)
    payment_method = db.Column(db.String(50), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=db.func.now())

    def __repr__(self):
        return f'<Transaction {self.description}: {self.amount} ({self.type})>'
