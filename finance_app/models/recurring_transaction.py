"""
Modello per le transazioni ricorrenti

Contiene le informazioni per pianificare addebiti / accrediti ricorrenti:
- tipo, importo, descrizione e metodo di pagamento come una transazione
- frequency: cadenza della ricorrenza (es. 'monthly', 'yearly')
- start_date / end_date: finestra di validità
- next_date: data della prossima occorrenza

Le righe sono solo memorizzate: la creazione non modifica alcun saldo.
"""
from finance_app import db
from finance_app.models.base import SerializerMixin, new_uuid


class RecurringTransaction(SerializerMixin, db.Model):
    __tablename__ = 'recurring_transactions'

    id = db.Column(db.String(36), primary_key=True, default=new_uuid)
    user_id = db.Column(db.String(128), db.ForeignKey('users.id'), nullable=True, index=True)
    account_id = db.Column(db.String(36), db.ForeignKey('accounts.id'), nullable=True)
    category_id = db.Column(db.String(36), db.ForeignKey('categories.id'), nullable=True)
    type = db.Column(db.String(20), nullable=False)
    description = db.Column(db.String(255), nullable=True)
    amount = db.Column(db.Numeric(14, 2), nullable=False)
    payment_method = db.Column(db.String(50), nullable=True)
    frequency = db.Column(db.String(20), nullable=False, default='monthly')
    start_date = db.Column(db.Date, nullable=True)
    end_date = db.Column(db.Date, nullable=True)
    next_date = db.Column(db.Date, nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=db.func.now())

    def __repr__(self):
        return f"<RecurringTransaction {self.description} ({self.type}) {self.amount}>"
