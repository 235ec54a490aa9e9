"""Transaction selection: splits one ledger snapshot into the working sets of a run."""

from ledger_ai.core.models import Account, Transaction, WorkingSets
from ledger_ai.core.tags import TagCodec


class TransactionSelector:
    """Partition transactions into to-process, missed-manual and override sets.

    All three sets share the same eligibility rules: no transfers, no starting balances, no split
    parents, nothing on an off-budget account and nothing without an imported payee. They differ in
    category and tag state:

    - to process: uncategorized and not already given up on (no not-guessed tag)
    - missed manual: categorized by a human after the oracle gave up (not-guessed tag)
    - override: categorized by a human who corrected an oracle guess (override tag)

    A categorized transaction carrying both tags counts as an override only.
    """

    def __init__(self, codec: TagCodec) -> None:
        self.codec = codec
        self.tags = codec.tags

    def select(self, transactions: list[Transaction], accounts: list[Account]) -> WorkingSets:
        """Compute the working sets, keeping the snapshot order."""
        accounts_to_skip = {account.id for account in accounts if account.offbudget}
        sets = WorkingSets()
        for transaction in transactions:
            if not self._is_eligible(transaction, accounts_to_skip):
                continue
            not_guessed = self.codec.has_tag(transaction.notes, self.tags.not_guessed)
            if not transaction.category:
                if not not_guessed:
                    sets.to_process.append(transaction)
            elif self.codec.has_tag(transaction.notes, self.tags.override):
                sets.override.append(transaction)
            elif not_guessed:
                sets.missed_manual.append(transaction)
        return sets

    @staticmethod
    def _is_eligible(transaction: Transaction, accounts_to_skip: set[str]) -> bool:
        return (
            transaction.transfer_id is None
            and not transaction.starting_balance_flag
            and bool(transaction.imported_payee)
            and not transaction.is_parent
            and transaction.account not in accounts_to_skip
        )
