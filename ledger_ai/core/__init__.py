"""Core package: provides models, tag codec, exceptions, settings and shared utilities."""

from .exceptions import BudgetDownloadError, LedgerAiError, OracleError, PromptTemplateError  # noqa: F401
from .models import Account, Category, CategoryGroup, Payee, Transaction  # noqa: F401
from .tags import TagCodec, TagSet  # noqa: F401
from .utils import get_logger  # noqa: F401
