"""
Journal Entry Use Cases

Draft editing plus the posting / cancellation state machine.
"""

from .cancel_journal_entry_use_case import CancelJournalEntryUseCase
from .create_journal_entry_use_case import CreateJournalEntryUseCase
from .dtos import (
    CreateJournalEntryCommand,
    JournalEntryBalanceResponse,
    JournalEntryListResponse,
    JournalEntryResponse,
    JournalLineCommand,
    JournalLineResponse,
    ListJournalEntriesQuery,
    UpdateJournalEntryCommand,
)
from .journal_entry_queries import (
    CheckJournalEntryBalanceUseCase,
    GetJournalEntryUseCase,
    ListJournalEntriesUseCase,
)
from .post_journal_entry_use_case import PostJournalEntryUseCase
from .update_journal_entry_use_case import DeleteJournalEntryUseCase, UpdateJournalEntryUseCase

__all__ = [
    "CreateJournalEntryUseCase",
    "ListJournalEntriesUseCase",
    "GetJournalEntryUseCase",
    "CheckJournalEntryBalanceUseCase",
    "UpdateJournalEntryUseCase",
    "DeleteJournalEntryUseCase",
    "PostJournalEntryUseCase",
    "CancelJournalEntryUseCase",
    "CreateJournalEntryCommand",
    "UpdateJournalEntryCommand",
    "ListJournalEntriesQuery",
    "JournalLineCommand",
    "JournalEntryResponse",
    "JournalLineResponse",
    "JournalEntryListResponse",
    "JournalEntryBalanceResponse",
]
