"""Shared fixtures and fakes for the Ledger AI tests."""

import logging
from collections.abc import Callable, Iterator

import pytest

from ledger_ai.core.models import Account, Category, CategoryGroup, Payee, Transaction
from ledger_ai.core.settings import Settings
from ledger_ai.core.tags import TagCodec, TagSet
from ledger_ai.core.utils import LOGGER_NAME
from ledger_ai.oracles.base import Oracle
from ledger_ai.services.ledger_service import LedgerService

GUESSED = "#actual-ai"
NOT_GUESSED = "#actual-ai-miss"
OVERRIDE = "#actual-ai-override"


class FakeLedger(LedgerService):
    """In-memory ledger that records every write."""

    def __init__(
        self,
        transactions: list[Transaction] | None = None,
        category_groups: list[CategoryGroup] | None = None,
        payees: list[Payee] | None = None,
        accounts: list[Account] | None = None,
    ) -> None:
        self.transactions = transactions or []
        self.category_groups = category_groups or []
        self.payees = payees or []
        self.accounts = accounts or []
        self.writes: list[tuple] = []
        self.calls: list[str] = []

    def initialize(self) -> None:
        self.calls.append("initialize")

    def shutdown(self) -> None:
        self.calls.append("shutdown")

    def get_category_groups(self) -> list[CategoryGroup]:
        return self.category_groups

    def get_categories(self) -> list[Category]:
        return [category for group in self.category_groups for category in group.categories]

    def get_payees(self) -> list[Payee]:
        return self.payees

    def get_accounts(self) -> list[Account]:
        return self.accounts

    def get_transactions(self) -> list[Transaction]:
        return self.transactions

    def update_transaction_notes(self, transaction_id: str, notes: str) -> None:
        self.writes.append(("notes", transaction_id, notes))

    def update_transaction_notes_and_category(self, transaction_id: str, notes: str, category_id: str) -> None:
        self.writes.append(("notes_and_category", transaction_id, notes, category_id))

    def run_bank_sync(self) -> None:
        self.calls.append("run_bank_sync")


class ScriptedOracle(Oracle):
    """Oracle whose answer is computed from the prompt by a callable."""

    def __init__(self, answer: Callable[[str], str] | str) -> None:
        self.answer = answer if callable(answer) else (lambda _prompt: answer)
        self.prompts: list[str] = []
        self.candidates: list[list[str]] = []

    @classmethod
    def from_settings(cls, settings: Settings) -> "ScriptedOracle":
        _ = settings
        return cls("uncategorized")

    def ask(self, prompt: str, candidate_ids: list[str]) -> str:
        self.prompts.append(prompt)
        self.candidates.append(candidate_ids)
        return self.answer(prompt)


def make_transaction(txn_id: str, **overrides: object) -> Transaction:
    """Build an eligible, uncategorized transaction on the budget account."""
    fields = {
        "id": txn_id,
        "amount": -1000,
        "date": "2025-01-15",
        "account": "acc-budget",
        "imported_payee": f"Payee {txn_id}",
    }
    fields.update(overrides)
    return Transaction(**fields)


@pytest.fixture
def tags() -> TagSet:
    return TagSet(guessed=GUESSED, not_guessed=NOT_GUESSED, override=OVERRIDE)


@pytest.fixture
def codec(tags: TagSet) -> TagCodec:
    return TagCodec(tags)


@pytest.fixture
def category_groups() -> list[CategoryGroup]:
    return [
        CategoryGroup(
            id="grp-food",
            name="Food",
            categories=[
                Category(id="Dining", name="Restaurants", group_id="grp-food"),
                Category(id="cat-groceries", name="Groceries", group_id="grp-food"),
            ],
        ),
        CategoryGroup(
            id="grp-bills",
            name="Bills",
            categories=[Category(id="cat-rent", name="Rent", group_id="grp-bills")],
        ),
    ]


@pytest.fixture
def accounts() -> list[Account]:
    return [
        Account(id="acc-budget", name="Checking"),
        Account(id="acc-offbudget", name="Mortgage", offbudget=True),
    ]


@pytest.fixture
def log_records(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Capture records from the project loggers, which do not propagate to the root logger."""
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    loggers = [
        logging.getLogger(name) for name in list(logging.Logger.manager.loggerDict) if name.startswith(LOGGER_NAME)
    ]
    for logger in loggers:
        logger.addHandler(caplog.handler)
    yield caplog
    for logger in loggers:
        logger.removeHandler(caplog.handler)
