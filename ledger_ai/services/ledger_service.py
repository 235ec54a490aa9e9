"""Ledger access for Actual Budget.

``LedgerService`` is the interface the categorizer depends on. ``ActualLedgerService`` implements
it on top of ``actualpy``: it downloads the budget once, converts ORM rows into plain models and
commits each note/category update straight away. In dry-run mode every write is replaced by a
log line.
"""

from abc import ABC, abstractmethod
from contextlib import ExitStack
from pathlib import Path

from actual import Actual
from actual.database import Categories, Transactions
from actual.queries import get_accounts, get_categories, get_category_groups, get_payees, get_transactions

from ledger_ai.core.exceptions import BudgetDownloadError, LedgerNotInitializedError, TransactionNotFoundError
from ledger_ai.core.models import Account, Category, CategoryGroup, Payee, Transaction
from ledger_ai.core.settings import Settings
from ledger_ai.core.utils import get_logger, suppress_logs

logger = get_logger("ledger-ai.ledger")


class LedgerService(ABC):
    """Snapshot reads and partial writes against the ledger."""

    def initialize(self) -> None:
        """Open the ledger. No-op by default."""

    def shutdown(self) -> None:
        """Close the ledger. No-op by default."""

    @abstractmethod
    def get_category_groups(self) -> list[CategoryGroup]: ...

    @abstractmethod
    def get_categories(self) -> list[Category]: ...

    @abstractmethod
    def get_payees(self) -> list[Payee]: ...

    @abstractmethod
    def get_accounts(self) -> list[Account]: ...

    @abstractmethod
    def get_transactions(self) -> list[Transaction]: ...

    @abstractmethod
    def update_transaction_notes(self, transaction_id: str, notes: str) -> None: ...

    @abstractmethod
    def update_transaction_notes_and_category(self, transaction_id: str, notes: str, category_id: str) -> None: ...

    @abstractmethod
    def run_bank_sync(self) -> None: ...


def _download_error_message(exc: Exception) -> str:
    """Describe a failed budget download, including the HTTP status when there is one."""
    msg = f"Failed to download budget: {exc}"
    status = getattr(exc, "status", None)
    response = getattr(exc, "response", None)
    if status is None and response is not None:
        status = getattr(response, "status_code", None)
    if isinstance(status, int):
        msg += f" (HTTP {status})"
    return msg


class ActualLedgerService(LedgerService):
    """LedgerService backed by an Actual Budget server through ``actualpy``."""

    def __init__(self, settings: Settings, client_factory: type = Actual) -> None:
        """Initialize the service. Nothing is downloaded until ``initialize()``."""
        self.server_url = settings.actual_server_url
        self.password = settings.actual_password
        self.budget_id = settings.actual_budget_id
        self.e2e_password = settings.actual_e2e_password
        self.data_dir = settings.actual_data_dir
        self.dry_run = settings.dry_run
        self.client_factory = client_factory
        self.actual: Actual | None = None
        self._stack = ExitStack()

    def initialize(self) -> None:
        """Log in and download the budget into the local data directory."""
        if self.dry_run:
            logger.info("ActualLedgerService is initialized in dry run mode. No write operations will be performed.")
        Path(self.data_dir).mkdir(parents=True, exist_ok=True)
        try:
            with suppress_logs():
                self.actual = self._stack.enter_context(
                    self.client_factory(
                        base_url=self.server_url,
                        password=self.password,
                        file=self.budget_id,
                        encryption_password=self.e2e_password or None,
                        data_dir=self.data_dir,
                    )
                )
        except Exception as exc:
            detail = _download_error_message(exc)
            logger.exception(detail)
            msg = (
                f"{detail}\n"
                "Verify that:\n"
                f'1. Budget ID "{self.budget_id}" is correct\n'
                f'2. Server URL "{self.server_url}" is reachable\n'
                "3. Password is correct\n"
                "4. E2E password (if used) is valid"
            )
            raise BudgetDownloadError(msg) from exc
        logger.info("Budget downloaded")

    def shutdown(self) -> None:
        """Release the session opened by ``initialize()``."""
        self._stack.close()
        self.actual = None

    def _client(self) -> Actual:
        if self.actual is None:
            msg = "ActualLedgerService.initialize() must be called first"
            raise LedgerNotInitializedError(msg)
        return self.actual

    def get_category_groups(self) -> list[CategoryGroup]:
        """Return category groups with their categories."""
        return [
            CategoryGroup(
                id=group.id,
                name=group.name,
                categories=[_to_category(category) for category in group.categories if not category.tombstone],
            )
            for group in get_category_groups(self._client().session)
        ]

    def get_categories(self) -> list[Category]:
        """Return every category."""
        return [_to_category(category) for category in get_categories(self._client().session)]

    def get_payees(self) -> list[Payee]:
        """Return every payee."""
        return [Payee(id=payee.id, name=payee.name or "") for payee in get_payees(self._client().session)]

    def get_accounts(self) -> list[Account]:
        """Return every account with its off-budget flag."""
        return [
            Account(id=account.id, name=account.name or "", offbudget=bool(account.offbudget))
            for account in get_accounts(self._client().session)
        ]

    def get_transactions(self) -> list[Transaction]:
        """Return every transaction in the budget."""
        return [_to_transaction(row) for row in get_transactions(self._client().session)]

    def update_transaction_notes(self, transaction_id: str, notes: str) -> None:
        """Overwrite the notes of one transaction."""
        if self.dry_run:
            logger.info(f"Dry run: update_transaction_notes(id: {transaction_id}, notes: {notes})")
            return
        self._update(transaction_id, notes=notes)

    def update_transaction_notes_and_category(self, transaction_id: str, notes: str, category_id: str) -> None:
        """Overwrite the notes and category of one transaction in a single commit."""
        if self.dry_run:
            logger.info(
                f"Dry run: update_transaction_notes_and_category(id: {transaction_id}, notes: {notes}, "
                f"category_id: {category_id})"
            )
            return
        self._update(transaction_id, notes=notes, category_id=category_id)

    def run_bank_sync(self) -> None:
        """Import new transactions from the linked bank accounts."""
        if self.dry_run:
            logger.info("Dry run: run_bank_sync")
            return
        actual = self._client()
        actual.run_bank_sync()
        actual.commit()

    def _update(self, transaction_id: str, **fields: str) -> None:
        actual = self._client()
        row = actual.session.get(Transactions, transaction_id)
        if row is None:
            msg = f"Transaction {transaction_id} not found"
            raise TransactionNotFoundError(msg)
        for name, value in fields.items():
            setattr(row, name, value)
        actual.commit()


def _to_category(row: Categories) -> Category:
    return Category(id=row.id, name=row.name or "", group_id=row.cat_group)


def _to_transaction(row: Transactions) -> Transaction:
    """Convert an ``actual.database.Transactions`` row into a Transaction."""
    return Transaction(
        id=row.id,
        amount=row.amount or 0,
        date=row.get_date().isoformat(),
        account=row.acct,
        payee=row.payee_id,
        imported_payee=row.imported_description,
        category=row.category_id,
        notes=row.notes,
        transfer_id=row.transferred_id,
        starting_balance_flag=bool(row.starting_balance_flag),
        is_parent=bool(row.is_parent),
        cleared=None if row.cleared is None else bool(row.cleared),
        reconciled=None if row.reconciled is None else bool(row.reconciled),
    )
