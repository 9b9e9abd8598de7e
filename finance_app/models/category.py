"""Modello per le categorie"""
from finance_app import db
from finance_app.models.base import SerializerMixin, new_uuid


class Category(SerializerMixin, db.Model):
    __tablename__ = 'categories'

    id = db.Column(db.String(36), primary_key=True, default=new_uuid)
    user_id = db.Column(db.String(128), db.ForeignKey('users.id'), nullable=True, index=True)
    name = db.Column(db.String(100), nullable=False)
    icon = db.Column(db.String(50), nullable=True)
    type = db.Column(db.String(20), nullable=True)  # 'income' o 'expense'
    color = db.Column(db.String(20), nullable=True)
    is_default = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=db.func.now())

    def __repr__(self):
        return f'<Category {self.name} ({self.type})>'
