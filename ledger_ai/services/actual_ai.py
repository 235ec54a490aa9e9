"""ActualAiService: one complete categorization run against the Actual server."""

from ledger_ai.core.models import ClassificationSummary
from ledger_ai.core.utils import get_logger
from ledger_ai.services.ledger_service import LedgerService
from ledger_ai.services.transaction_service import TransactionService

logger = get_logger("ledger-ai.service")


class ActualAiService:
    """Open the ledger, migrate legacy notes, optionally bank-sync, classify, close."""

    def __init__(
        self,
        transaction_service: TransactionService,
        ledger: LedgerService,
        sync_accounts_before_classify: bool = False,
    ) -> None:
        """Initialize the service with the transaction service and the ledger it writes to."""
        self.transaction_service = transaction_service
        self.ledger = ledger
        self.sync_accounts_before_classify = sync_accounts_before_classify

    def classify(self) -> ClassificationSummary:
        """Run a full classification pass."""
        logger.info("Starting classification process")
        self.ledger.initialize()
        try:
            self.transaction_service.migrate_to_tags()
            if self.sync_accounts_before_classify:
                self.sync_accounts()
            summary = self.transaction_service.process_transactions()
        finally:
            self.ledger.shutdown()
        logger.info(f"Classification process completed: {summary.model_dump()}")
        return summary

    def migrate(self) -> int:
        """Only convert legacy notes to tags."""
        self.ledger.initialize()
        try:
            migrated = self.transaction_service.migrate_to_tags()
        finally:
            self.ledger.shutdown()
        logger.info(f"Migrated {migrated} transactions to tags")
        return migrated

    def sync_accounts(self) -> None:
        """Trigger a bank sync. A failed sync is logged and classification goes on."""
        logger.info("Syncing bank accounts")
        try:
            self.ledger.run_bank_sync()
        except Exception:
            logger.exception("Error syncing bank accounts")
            return
        logger.info("Bank accounts synced")
