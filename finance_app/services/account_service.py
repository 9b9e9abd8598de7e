"""Service per la gestione dei conti"""
from decimal import Decimal

from finance_app.models.account import Account
from finance_app.services import BaseService
from finance_app.services.user_service import UserService
from finance_app.utils.parsing import blank_to_none, parse_decimal


class AccountService(BaseService):
    """Creazione e lettura dei conti. Il saldo successivo è gestito dal LedgerService."""

    def __init__(self, user_service=None):
        super().__init__()
        self.user_service = user_service or UserService()

    def get_all(self):
        return Account.query.all()

    def create_account(self, user_id, name, type=None, balance=None, color=None, icon=None):
        """Crea un conto con il saldo di apertura indicato (default 0)"""
        try:
            opening = parse_decimal(balance, 'balance') if blank_to_none(balance) is not None else Decimal('0')
        except ValueError as e:
            return False, str(e), None

        self.user_service.ensure_user(user_id)

        account = Account(
            user_id=blank_to_none(user_id),
            name=name,
            type=type,
            balance=opening,
            color=color,
            icon=icon,
        )
        success, message = self.save(account)
        if not success:
            return False, message, None
        return True, "Conto creato con successo", account
