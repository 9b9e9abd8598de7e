"""Modello per i budget mensili per categoria"""
from finance_app import db
from finance_app.models.base import SerializerMixin, new_uuid


class Budget(SerializerMixin, db.Model):
    __tablename__ = 'budgets'

    id = db.Column(db.String(36), primary_key=True, default=new_uuid)
    user_id = db.Column(db.String(128), db.ForeignKey('users.id'), nullable=True, index=True)
    category_id = db.Column(db.String(36), db.ForeignKey('categories.id'), nullable=True)
    amount = db.Column(db.Numeric(14, 2), nullable=False)
    month = db.Column(db.Integer, nullable=False)  # 1-12
    year = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=db.func.now())

    def __repr__(self):
        return f'<Budget {self.year}-{self.month:02d}: {self.amount}>'
