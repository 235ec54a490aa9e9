"""Exception hierarchy for Ledger AI."""


class LedgerAiError(Exception):
    """Base class for all Ledger AI errors."""


class PromptTemplateError(LedgerAiError):
    """A prompt template could not be compiled or rendered."""


class BudgetDownloadError(LedgerAiError):
    """The budget snapshot could not be downloaded from the Actual server."""


class LedgerNotInitializedError(LedgerAiError):
    """A ledger operation was attempted before ``initialize()``."""


class OracleError(LedgerAiError):
    """The LLM provider could not be reached or returned an unusable response."""


class TransactionNotFoundError(LedgerAiError):
    """A write targeted a transaction id the ledger does not know."""
