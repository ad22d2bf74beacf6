"""
Account Administration Use Cases

Admin-only management of user and admin accounts.
"""

from .add_account_use_case import AddAccountUseCase
from .update_account_use_case import UpdateAccountUseCase
from .delete_account_use_case import DeleteAccountUseCase
from .list_accounts_use_case import ListAccountsUseCase
from .dtos import (
    AccountListResponse,
    AddAccountCommand,
    DeleteAccountResponse,
    UpdateAccountCommand,
)

__all__ = [
    "AddAccountUseCase",
    "UpdateAccountUseCase",
    "DeleteAccountUseCase",
    "ListAccountsUseCase",
    "AccountListResponse",
    "AddAccountCommand",
    "DeleteAccountResponse",
    "UpdateAccountCommand",
]
