"""PromptGenerator: turns a transaction and its context examples into prompt text.

Each generator owns one template. The service runs two side by side: the primary prompt and a
"manual" fallback prompt that leans on transactions the user categorized by hand.
"""

from ledger_ai.core.exceptions import PromptTemplateError
from ledger_ai.core.models import CategoryGroup, Payee, PromptTransaction, Transaction
from ledger_ai.core.tags import TagCodec
from ledger_ai.core.utils import get_logger
from ledger_ai.prompting.engine import Jinja2TemplateEngine, Renderer, TemplateEngine

logger = get_logger("ledger-ai.prompt")

TEMPLATE_ERROR_MSG = "Error generating prompt. Check syntax of your template."


class PromptGenerator:
    """Build template-ready transaction records and render them into a prompt."""

    def __init__(self, prompt_template: str, codec: TagCodec, engine: TemplateEngine | None = None) -> None:
        """Initialize the generator with a template source, a tag codec and a template engine."""
        self.prompt_template = prompt_template
        self.codec = codec
        self.engine = engine or Jinja2TemplateEngine()
        self._renderer: Renderer | None = None

    def build_context(
        self,
        transaction: Transaction,
        payees: list[Payee],
        category_id_to_name: dict[str, str],
    ) -> PromptTransaction:
        """Resolve payee and category names and strip classification tags from the notes."""
        payee_name = next((payee.name for payee in payees if payee.id == transaction.payee), None)
        category_name = category_id_to_name.get(transaction.category) if transaction.category is not None else None
        return PromptTransaction(
            amount=abs(transaction.amount),
            type="Deposit" if transaction.amount > 0 else "Withdrawal",
            description=self.codec.strip(transaction.notes),
            payee=payee_name or transaction.imported_payee,
            date=transaction.date,
            cleared=transaction.cleared,
            reconciled=transaction.reconciled,
            category=category_name,
            category_id=transaction.category,
        )

    def generate(
        self,
        category_groups: list[CategoryGroup],
        transaction: Transaction,
        payees: list[Payee],
        manual_transactions: list[Transaction],
        override_transactions: list[Transaction],
    ) -> str:
        """Render the prompt for ``transaction`` with the two example lists as context."""
        renderer = self._compile()
        category_id_to_name = {
            category.id: category.name for group in category_groups for category in group.categories
        }
        context = {
            "category_groups": [group.model_dump() for group in category_groups],
            "transaction": self.build_context(transaction, payees, category_id_to_name).model_dump(),
            "manual_transactions": [
                self.build_context(txn, payees, category_id_to_name).model_dump() for txn in manual_transactions
            ],
            "override_transactions": [
                self.build_context(txn, payees, category_id_to_name).model_dump() for txn in override_transactions
            ],
        }
        try:
            return renderer(context)
        except Exception as exc:
            logger.exception(TEMPLATE_ERROR_MSG)
            raise PromptTemplateError(TEMPLATE_ERROR_MSG) from exc

    def _compile(self) -> Renderer:
        """Compile the template once and reuse the renderer."""
        if self._renderer is None:
            try:
                self._renderer = self.engine.compile(self.prompt_template)
            except Exception as exc:
                logger.exception(TEMPLATE_ERROR_MSG)
                raise PromptTemplateError(TEMPLATE_ERROR_MSG) from exc
        return self._renderer
