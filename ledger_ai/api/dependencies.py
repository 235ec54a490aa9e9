"""FastAPI dependencies for DI (settings, ledger, oracle, service).

This module builds the categorization service from settings, so endpoints stay thin and tests can
swap the whole service through ``app.dependency_overrides``.
"""

from fastapi import Depends

from ledger_ai.core.settings import Settings, get_settings
from ledger_ai.oracles import Oracle, OracleRegistry
from ledger_ai.services.actual_ai import ActualAiService
from ledger_ai.services.ledger_service import ActualLedgerService
from ledger_ai.services.transaction_service import build_transaction_service


def get_oracle(settings: Settings = Depends(get_settings)) -> Oracle:
    """Provide the oracle selected by ``llm_provider``."""
    return OracleRegistry.get(settings.llm_provider).from_settings(settings)


def get_actual_ai(settings: Settings = Depends(get_settings), oracle: Oracle = Depends(get_oracle)) -> ActualAiService:
    """Provide an ActualAiService instance for dependency injection."""
    return build_actual_ai(settings, oracle)


def build_actual_ai(settings: Settings, oracle: Oracle | None = None) -> ActualAiService:
    """Wire the ledger, oracle and transaction service together."""
    if oracle is None:
        oracle = OracleRegistry.get(settings.llm_provider).from_settings(settings)
    ledger = ActualLedgerService(settings)
    transaction_service = build_transaction_service(ledger, oracle, settings)
    return ActualAiService(transaction_service, ledger, settings.sync_accounts_before_classify)
