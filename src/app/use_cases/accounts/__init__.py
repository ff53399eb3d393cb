"""
Chart of Accounts Use Cases
"""

from .account_use_cases import DeleteAccountUseCase, GetAccountUseCase, ListAccountsUseCase
from .create_account_use_case import CreateAccountUseCase
from .dtos import (
    AccountBalanceResponse,
    AccountListResponse,
    AccountResponse,
    CreateAccountCommand,
    ListAccountsQuery,
    UpdateAccountCommand,
)
from .get_account_balance_use_case import GetAccountBalanceUseCase
from .update_account_use_case import UpdateAccountUseCase

__all__ = [
    "CreateAccountUseCase",
    "ListAccountsUseCase",
    "GetAccountUseCase",
    "UpdateAccountUseCase",
    "DeleteAccountUseCase",
    "GetAccountBalanceUseCase",
    "CreateAccountCommand",
    "UpdateAccountCommand",
    "ListAccountsQuery",
    "AccountResponse",
    "AccountListResponse",
    "AccountBalanceResponse",
]
