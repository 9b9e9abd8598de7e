"""Modello per gli utenti (identità emessa dal provider esterno)"""
from finance_app import db


class User(db.Model):
    """Utente: l'id è opaco e viene creato al primo utilizzo"""
    __tablename__ = 'users'

    id = db.Column(db.String(128), primary_key=True)
    email = db.Column(db.String(255), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=db.func.now())
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=db.func.now(), onupdate=db.func.now())

    def __repr__(self):
        return f'<User {self.id}>'
