"""
Use Cases

Organized into domain folders:
- admin/: Platform tenant administration
- context/: Per-request tenant resolution
- organizations/: Organization management
- accounts/: Chart of accounts and balances
- journal_entries/: Journal entries and posting
- audit/: Audit logs

Import from subdirectories for better organization.
"""

from .accounts import GetAccountBalanceUseCase
from .audit import GetAuditEventsUseCase
from .context import ResolveTenantUseCase
from .journal_entries import (
    CancelJournalEntryUseCase,
    CheckJournalEntryBalanceUseCase,
    PostJournalEntryUseCase,
)

__all__ = [
    "ResolveTenantUseCase",
    "PostJournalEntryUseCase",
    "CancelJournalEntryUseCase",
    "CheckJournalEntryBalanceUseCase",
    "GetAccountBalanceUseCase",
    "GetAuditEventsUseCase",
]
