"""Pydantic models for ledger snapshots, prompt records and run results.

Ledger records mirror the subset of Actual Budget fields the categorizer reads. The categorizer
itself only ever writes ``notes`` and ``category`` back to the ledger.
"""

from pydantic import BaseModel, Field


class Transaction(BaseModel):
    """A ledger transaction. ``amount`` is signed and expressed in minor units (cents)."""

    id: str
    amount: int
    date: str
    account: str
    payee: str | None = None
    imported_payee: str | None = None
    category: str | None = None
    notes: str | None = None
    transfer_id: str | None = None
    starting_balance_flag: bool = False
    is_parent: bool = False
    cleared: bool | None = None
    reconciled: bool | None = None


class Category(BaseModel):
    """A budget category."""

    id: str
    name: str
    group_id: str | None = None


class CategoryGroup(BaseModel):
    """A named group of categories, in display order."""

    id: str
    name: str
    categories: list[Category] = Field(default_factory=list)


class Payee(BaseModel):
    """A payee known to the ledger."""

    id: str
    name: str


class Account(BaseModel):
    """A ledger account. Off-budget accounts are never categorized."""

    id: str
    name: str = ""
    offbudget: bool = False


class PromptTransaction(BaseModel):
    """Template-ready view of a transaction, with ids resolved to names and tags removed."""

    amount: int
    type: str
    description: str
    payee: str | None = None
    date: str
    cleared: bool | None = None
    reconciled: bool | None = None
    category: str | None = None
    category_id: str | None = None


class WorkingSets(BaseModel):
    """Disjoint partitions of one transaction snapshot."""

    to_process: list[Transaction] = Field(default_factory=list)
    missed_manual: list[Transaction] = Field(default_factory=list)
    override: list[Transaction] = Field(default_factory=list)


class ClassificationSummary(BaseModel):
    """Outcome counters for one classification run."""

    candidates: int = 0
    guessed: int = 0
    not_guessed: int = 0
    stopped_early: bool = False
