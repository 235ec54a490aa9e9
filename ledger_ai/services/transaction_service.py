"""TransactionService: the categorization loop and the legacy notes migration.

For every uncategorized transaction the service renders a prompt, asks the oracle for a category
id and records the outcome in the transaction notes with a tag. A transaction the oracle cannot
place is tagged as not guessed and skipped by later runs until a human touches it. Only
``max_classifications_per_run`` successful guesses are committed per call; schedulers are expected
to call again to work through the backlog.
"""

from ledger_ai.core.models import Category, ClassificationSummary
from ledger_ai.core.settings import Settings
from ledger_ai.core.tags import TagCodec
from ledger_ai.core.utils import get_logger
from ledger_ai.oracles.base import Oracle
from ledger_ai.prompting.prompt_generator import PromptGenerator
from ledger_ai.services.ledger_service import LedgerService
from ledger_ai.services.selector import TransactionSelector

UNCATEGORIZED = "uncategorized"

logger = get_logger("ledger-ai.transactions")


def resolve_category(answer: str, categories: list[Category], debug_prefix: str = "") -> Category | None:
    """Match an oracle answer to a category.

    Tried in order, first hit wins: exact id, exact name, then any category id contained in the
    answer. The last two are accepted with a warning. ``"uncategorized"`` never resolves.
    """
    guess = answer.strip()
    if guess == UNCATEGORIZED:
        logger.info(f"{debug_prefix} LLM answered {UNCATEGORIZED!r}")
        return None
    category = next((c for c in categories if c.id == guess), None)
    if category is None:
        category = next((c for c in categories if c.name == guess), None)
        if category is not None:
            logger.warning(f"{debug_prefix} LLM guessed category name instead of ID. LLM guess: {guess}")
    if category is None:
        category = next((c for c in categories if c.id and c.id in guess), None)
        if category is not None:
            logger.warning(f"{debug_prefix} Found category ID in LLM guess, but it wasn't 1:1. LLM guess: {guess}")
    if category is None:
        logger.warning(f"{debug_prefix} LLM could not classify the transaction. LLM guess: {guess}")
    return category


class TransactionService:
    """Classify uncategorized transactions and migrate legacy notes."""

    def __init__(
        self,
        ledger: LedgerService,
        oracle: Oracle,
        prompt_generator: PromptGenerator,
        manual_prompt_generator: PromptGenerator,
        codec: TagCodec,
        max_classifications_per_run: int = 1,
    ) -> None:
        """Initialize the service with its collaborators."""
        self.ledger = ledger
        self.oracle = oracle
        self.prompt_generator = prompt_generator
        self.manual_prompt_generator = manual_prompt_generator
        self.codec = codec
        self.tags = codec.tags
        self.selector = TransactionSelector(codec)
        self.max_classifications_per_run = max_classifications_per_run

    def migrate_to_tags(self) -> int:
        """Rewrite notes that still carry a legacy marker phrase. Returns the number rewritten."""
        transactions = self.ledger.get_transactions()
        to_migrate = [t for t in transactions if self.codec.legacy_tag_for(t.notes)]
        for i, transaction in enumerate(to_migrate):
            logger.info(
                f"{i + 1}/{len(to_migrate)} Migrating transaction "
                f"{transaction.imported_payee} / {transaction.notes} / {transaction.amount}"
            )
            tag = self.codec.legacy_tag_for(transaction.notes)
            self.ledger.update_transaction_notes(transaction.id, self.codec.append(transaction.notes, tag))
        return len(to_migrate)

    def process_transactions(self) -> ClassificationSummary:
        """Run one classification pass over the current ledger snapshot."""
        category_groups = self.ledger.get_category_groups()
        categories = self.ledger.get_categories()
        payees = self.ledger.get_payees()
        transactions = self.ledger.get_transactions()
        accounts = self.ledger.get_accounts()

        sets = self.selector.select(transactions, accounts)
        summary = ClassificationSummary(candidates=len(sets.to_process))
        logger.info(
            f"Found {len(sets.to_process)} transactions to classify "
            f"({len(sets.missed_manual)} manual and {len(sets.override)} override examples)"
        )

        for i, transaction in enumerate(sets.to_process):
            debug_prefix = f"{i + 1}/{len(sets.to_process)}"
            logger.info(
                f"{debug_prefix} Processing transaction "
                f"{transaction.imported_payee} / {transaction.notes} / {transaction.amount}"
            )
            args = (category_groups, transaction, payees, sets.missed_manual, sets.override)
            guess = self._classify(self.prompt_generator.generate(*args), categories, debug_prefix)
            if guess is None:
                logger.info(f"{debug_prefix} Trying again with the manual prompt")
                guess = self._classify(self.manual_prompt_generator.generate(*args), categories, debug_prefix)
            if guess is None:
                self.ledger.update_transaction_notes(
                    transaction.id, self.codec.append(transaction.notes, self.tags.not_guessed)
                )
                summary.not_guessed += 1
                continue

            logger.info(f"{debug_prefix} Guess: {guess.name}")
            self.ledger.update_transaction_notes_and_category(
                transaction.id, self.codec.append(transaction.notes, self.tags.guessed), guess.id
            )
            summary.guessed += 1
            if summary.guessed >= self.max_classifications_per_run:
                summary.stopped_early = i + 1 < len(sets.to_process)
                break
        return summary

    def _classify(self, prompt: str, categories: list[Category], debug_prefix: str) -> Category | None:
        candidate_ids = [category.id for category in categories]
        candidate_ids.append(UNCATEGORIZED)
        answer = self.oracle.ask(prompt, candidate_ids)
        return resolve_category(answer, categories, debug_prefix)


def build_transaction_service(ledger: LedgerService, oracle: Oracle, settings: Settings) -> TransactionService:
    """Wire a TransactionService from settings: one codec, two prompt generators."""
    codec = TagCodec(settings.tags)
    return TransactionService(
        ledger,
        oracle,
        PromptGenerator(settings.prompt_template, codec),
        PromptGenerator(settings.manual_prompt_template, codec),
        codec,
        max_classifications_per_run=settings.max_classifications_per_run,
    )
