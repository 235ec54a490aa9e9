"""Services package: ledger access, transaction selection and the categorization loop."""

from .actual_ai import ActualAiService  # noqa: F401
from .ledger_service import ActualLedgerService, LedgerService  # noqa: F401
from .selector import TransactionSelector  # noqa: F401
from .transaction_service import TransactionService, build_transaction_service, resolve_category  # noqa: F401
