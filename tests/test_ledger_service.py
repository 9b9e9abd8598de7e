"""Test del LedgerService: atomicità, conservazione del saldo, concorrenza"""
import threading
from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from finance_app import db
from finance_app.models import Transaction
from finance_app.services.ledger_service import LedgerService
from finance_app.services.user_service import UserService
from tests.conftest import balance_of


def count_transactions(account_id=None):
    db.session.expire_all()
    query = Transaction.query
    if account_id is not None:
        query = query.filter_by(account_id=account_id)
    return query.count()


class TestRecordTransaction:

    def test_income_then_expense_conserves_balance(self, account):
        service = LedgerService()

        ok1, _, _ = service.record_transaction(user_id='user-1', account_id=account.id,
                                               type='income', amount='10', date='2025-01-10')
        ok2, _, _ = service.record_transaction(user_id='user-1', account_id=account.id,
                                               type='expense', amount=Decimal('4'), date='2025-01-11')

        assert ok1 and ok2
        assert balance_of(account.id) == Decimal('106')
        assert count_transactions(account.id) == 2

    def test_returns_persisted_row(self, account):
        success, message, tx = LedgerService().record_transaction(
            user_id='user-1', account_id=account.id, category_id=None,
            type='expense', description='Groceries', amount='12.50',
            date='2025-02-01', payment_method='card',
        )

        assert success, message
        assert tx.id
        assert tx.created_at is not None
        assert tx.amount == Decimal('12.50')
        assert tx.date == date(2025, 2, 1)
        assert tx.to_dict()['description'] == 'Groceries'

    def test_null_account_changes_no_balance(self, account):
        success, _, tx = LedgerService().record_transaction(
            user_id='user-1', account_id=None, type='income', amount='50')

        assert success
        assert tx.account_id is None
        assert balance_of(account.id) == Decimal('100')
        assert count_transactions() == 1

    def test_empty_strings_are_no_reference(self, account):
        success, _, tx = LedgerService().record_transaction(
            user_id='user-1', account_id='', category_id='', type='income', amount='5')

        assert success
        assert tx.account_id is None
        assert tx.category_id is None
        assert balance_of(account.id) == Decimal('100')

    def test_missing_date_defaults_to_today(self, user):
        success, _, tx = LedgerService().record_transaction(user_id='user-1', type='expense', amount='1')
        assert success
        assert tx.date == date.today()

    def test_transfer_subtracts(self, account):
        LedgerService().record_transaction(user_id='user-1', account_id=account.id,
                                           type='transfer', amount='30')
        assert balance_of(account.id) == Decimal('70')

    def test_provisions_unknown_user(self, app):
        success, _, tx = LedgerService().record_transaction(user_id='fresh-user', type='income', amount='1')
        assert success
        assert tx.user_id == 'fresh-user'


class TestValidation:

    def test_rejects_negative_amount(self, account):
        success, message, tx = LedgerService().record_transaction(
            user_id='user-1', account_id=account.id, type='expense', amount='-3')

        assert not success
        assert tx is None
        assert 'negativo' in message
        assert count_transactions() == 0

    def test_rejects_unknown_type(self, account):
        success, message, _ = LedgerService().record_transaction(
            user_id='user-1', account_id=account.id, type='refund', amount='3')

        assert not success
        assert 'refund' in message
        assert balance_of(account.id) == Decimal('100')

    def test_rejects_bad_amount_and_date(self, account):
        service = LedgerService()
        assert not service.record_transaction(user_id='user-1', type='income', amount='abc')[0]
        assert not service.record_transaction(user_id='user-1', type='income', amount='1', date='31/12/2025')[0]
        assert count_transactions() == 0

    def test_sub_cent_amount_rejected_and_balance_untouched(self, account):
        service = LedgerService()
        for _ in range(3):
            success, message, tx = service.record_transaction(
                user_id='user-1', account_id=account.id, type='income', amount='0.004')
            assert not success
            assert tx is None
            assert 'decimali' in message

        assert balance_of(account.id) == Decimal('100')
        assert count_transactions() == 0

    def test_cent_amounts_keep_balance_equal_to_sum(self, account):
        service = LedgerService()
        amounts = ['0.01', '0.10', '19.99']
        for a in amounts:
            assert service.record_transaction(user_id='user-1', account_id=account.id,
                                              type='income', amount=a)[0]

        db.session.expire_all()
        stored = sum(t.amount for t in Transaction.query.filter_by(account_id=account.id))
        assert stored == Decimal('20.10')
        assert balance_of(account.id) == Decimal('100') + stored

    @pytest.mark.parametrize('amount', ['NaN', 'Infinity', '-Infinity', Decimal('NaN'), float('inf'), '1e40'])
    def test_non_finite_or_huge_amount_rejected(self, account, amount):
        success, message, tx = LedgerService().record_transaction(
            user_id='user-1', account_id=account.id, type='income', amount=amount)

        assert not success
        assert tx is None
        assert message
        assert count_transactions() == 0
        assert balance_of(account.id) == Decimal('100')


class TestAtomicity:

    def test_balance_failure_rolls_back_insert(self, account, monkeypatch):
        def boom(self, account_id, tx_type, amount):
            raise OperationalError('UPDATE accounts', {}, Exception('connection lost'))

        monkeypatch.setattr(LedgerService, '_apply_balance_adjustment', boom)

        success, message, tx = LedgerService().record_transaction(
            user_id='user-1', account_id=account.id, type='income', amount='10')

        assert not success
        assert tx is None
        assert 'connection lost' in message
        assert count_transactions() == 0
        assert balance_of(account.id) == Decimal('100')

    def test_unknown_account_rolls_back(self, user):
        success, message, _ = LedgerService().record_transaction(
            user_id='user-1', account_id='does-not-exist', type='income', amount='10')

        assert not success
        assert message
        assert count_transactions() == 0

    def test_provisioning_failure_does_not_block_write(self, account, monkeypatch):
        def boom(self, values):
            raise OperationalError('INSERT INTO users', {}, Exception('pool exhausted'))

        monkeypatch.setattr(UserService, '_insert_or_ignore', boom)

        success, _, _ = LedgerService().record_transaction(
            user_id='user-1', account_id=account.id, type='expense', amount='20')

        assert success
        assert balance_of(account.id) == Decimal('80')

    def test_reload_failure_rolls_back(self, account, monkeypatch):
        account_id = account.id

        def boom(self, instance, *args, **kwargs):
            raise OperationalError('SELECT transactions', {}, Exception('connection dropped'))

        monkeypatch.setattr(Session, 'refresh', boom)

        success, message, tx = LedgerService().record_transaction(
            user_id='user-1', account_id=account_id, type='income', amount='10')
        monkeypatch.undo()

        assert not success
        assert 'connection dropped' in message
        assert count_transactions() == 0
        assert balance_of(account_id) == Decimal('100')

    def test_returned_row_is_loaded_and_detached(self, account):
        success, _, tx = LedgerService().record_transaction(
            user_id='user-1', account_id=account.id, type='expense', amount='2.50')
        db.session.close()

        assert success
        assert inspect(tx).detached
        body = tx.to_dict()
        assert body['id'] and body['created_at']
        assert body['amount'] == '2.50'


class TestConcurrency:

    def test_concurrent_updates_sum_exactly(self, app, account):
        # letto qui: l'istanza appartiene alla sessione del thread principale
        account_id = account.id
        requests = [('income', Decimal('7.25')) if i % 2 else ('expense', Decimal('3.10')) for i in range(12)]
        errors = []

        def worker(tx_type, amount):
            with app.app_context():
                success, message, _ = LedgerService().record_transaction(
                    user_id='user-1', account_id=account_id, type=tx_type, amount=amount)
                if not success:
                    errors.append(message)

        threads = [threading.Thread(target=worker, args=r) for r in requests]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        expected = Decimal('100') + sum(a if t == 'income' else -a for t, a in requests)
        assert errors == []
        assert balance_of(account_id) == expected
        assert count_transactions(account_id) == len(requests)


class TestGetTransactions:

    def test_newest_date_first(self, user):
        service = LedgerService()
        for d in ('2025-03-01', '2025-05-01', '2025-04-01'):
            service.record_transaction(user_id='user-1', type='expense', amount='1', date=d)

        dates = [t.date.isoformat() for t in service.get_transactions()]
        assert dates == ['2025-05-01', '2025-04-01', '2025-03-01']
