"""Modelli del database: l'import registra le tabelle nei metadata"""
from finance_app.models.user import User
from finance_app.models.account import Account
from finance_app.models.category import Category
from finance_app.models.transaction import Transaction
from finance_app.models.recurring_transaction import RecurringTransaction
from finance_app.models.goal import Goal
from finance_app.models.budget import Budget

__all__ = ['User', 'Account', 'Category', 'Transaction', 'RecurringTransaction', 'Goal', 'Budget']
