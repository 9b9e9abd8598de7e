"""Modello per i conti"""
from decimal import Decimal
from finance_app import db
from finance_app.models.base import SerializerMixin, new_uuid


class Account(SerializerMixin, db.Model):
    """Conto di un utente.

    Il ``balance`` viene impostato alla creazione e poi modificato solo dal
    LedgerService, una volta per ogni transazione registrata sul conto.
    """
    __tablename__ = 'accounts'

    id = db.Column(db.String(36), primary_key=True, default=new_uuid)
    user_id = db.Column(db.String(128), db.ForeignKey('users.id'), nullable=False, index=True)
    name = db.Column(db.String(120), nullable=False)
    type = db.Column(db.String(50), nullable=True)  # es. 'checking', 'cash', 'credit_card'
    balance = db.Column(db.Numeric(14, 2), nullable=False, default=Decimal('0'))
    color = db.Column(db.String(20), nullable=True)
    icon = db.Column(db.String(50), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=db.func.now())
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=db.func.now(), onupdate=db.func.now())

    def __repr__(self):
        return f'<Account {self.name}: {self.balance}>'
