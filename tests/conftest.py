"""
Fixture comuni: app su un database SQLite temporaneo (foreign key attive),
client HTTP e un utente con un conto già presente.
"""
from decimal import Decimal

import pytest

from finance_app import create_app, db
from finance_app.models import Account, User


@pytest.fixture
def app(tmp_path):
    app = create_app('testing', overrides={
        'SQLALCHEMY_DATABASE_URI': f"sqlite:///{tmp_path / 'ledger.db'}",
        # i test di concorrenza usano più thread sullo stesso file
        'SQLALCHEMY_ENGINE_OPTIONS': {'connect_args': {'check_same_thread': False, 'timeout': 30}},
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def user(app):
    u = User(id='user-1', email='user1@example.com')
    db.session.add(u)
    db.session.commit()
    return u


@pytest.fixture
def account(user):
    acc = Account(user_id=user.id, name='Checking', type='checking', balance=Decimal('100.00'))
    db.session.add(acc)
    db.session.commit()
    return acc


def balance_of(account_id):
    """Saldo letto dal database, ignorando la identity map della sessione"""
    db.session.expire_all()
    return db.session.get(Account, account_id).balance
