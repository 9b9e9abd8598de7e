"""Modello per gli obiettivi di risparmio"""
from finance_app import db
from finance_app.models.base import SerializerMixin, new_uuid


class Goal(SerializerMixin, db.Model):
    __tablename__ = 'goals'

    id = db.Column(db.String(36), primary_key=True, default=new_uuid)
    user_id = db.Column(db.String(128), db.ForeignKey('users.id'), nullable=True, index=True)
    name = db.Column(db.String(120), nullable=False)
    target_amount = db.Column(db.Numeric(14, 2), nullable=False)
    current_amount = db.Column(db.Numeric(14, 2), nullable=False, default=0)
    start_date = db.Column(db.Date, nullable=True)
    deadline = db.Column(db.Date, nullable=True)
    status = db.Column(db.String(20), nullable=False, default='active')
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=db.func.now())

    def __repr__(self):
        return f'<Goal {self.name}: {self.current_amount}/{self.target_amount}>'
