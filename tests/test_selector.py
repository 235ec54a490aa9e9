"""Tests for the working-set selection."""

from ledger_ai.core.models import Account, Transaction
from ledger_ai.core.tags import TagCodec
from ledger_ai.services.selector import TransactionSelector

from .conftest import GUESSED, NOT_GUESSED, OVERRIDE, make_transaction


def _snapshot() -> list[Transaction]:
    return [
        make_transaction("todo-1"),
        make_transaction("todo-2", notes="weekly shop"),
        make_transaction("given-up", notes=f"hmm {NOT_GUESSED}"),
        make_transaction("manual", category="cat-rent", notes=NOT_GUESSED),
        make_transaction("override", category="Dining", notes=f"{GUESSED} {OVERRIDE}"),
        make_transaction("both", category="Dining", notes=f"{NOT_GUESSED} {OVERRIDE}"),
        make_transaction("guessed", category="Dining", notes=GUESSED),
        make_transaction("transfer", transfer_id="t-1"),
        make_transaction("opening", starting_balance_flag=True),
        make_transaction("no-payee", imported_payee=None),
        make_transaction("blank-payee", imported_payee=""),
        make_transaction("split", is_parent=True),
        make_transaction("offbudget", account="acc-offbudget"),
        make_transaction("offbudget-manual", account="acc-offbudget", category="cat-rent", notes=NOT_GUESSED),
        make_transaction("offbudget-override", account="acc-offbudget", category="Dining", notes=OVERRIDE),
    ]


def _ids(transactions: list[Transaction]) -> list[str]:
    return [t.id for t in transactions]


def test_select_working_sets(codec: TagCodec, accounts: list[Account]) -> None:
    """Each transaction lands in the set its category and tags call for."""
    sets = TransactionSelector(codec).select(_snapshot(), accounts)
    expected = {
        "to_process": ["todo-1", "todo-2"],
        "missed_manual": ["manual"],
        "override": ["override", "both"],
    }
    actual = {
        "to_process": _ids(sets.to_process),
        "missed_manual": _ids(sets.missed_manual),
        "override": _ids(sets.override),
    }
    if actual != expected:
        msg = f"Expected {expected}, got {actual}"
        raise AssertionError(msg)


def test_working_sets_are_disjoint(codec: TagCodec, accounts: list[Account]) -> None:
    """No transaction appears in two working sets."""
    sets = TransactionSelector(codec).select(_snapshot(), accounts)
    groups = [set(_ids(sets.to_process)), set(_ids(sets.missed_manual)), set(_ids(sets.override))]
    for i, first in enumerate(groups):
        for second in groups[i + 1 :]:
            if first & second:
                msg = f"Working sets overlap: {first & second}"
                raise AssertionError(msg)


def test_offbudget_accounts_are_excluded(codec: TagCodec, accounts: list[Account]) -> None:
    """Transactions on an off-budget account are in none of the sets."""
    sets = TransactionSelector(codec).select(_snapshot(), accounts)
    selected = _ids(sets.to_process) + _ids(sets.missed_manual) + _ids(sets.override)
    leaked = [txn_id for txn_id in selected if txn_id.startswith("offbudget")]
    if leaked:
        msg = f"Off-budget transactions were selected: {leaked}"
        raise AssertionError(msg)


def test_guessed_tag_does_not_count_as_not_guessed(codec: TagCodec, accounts: list[Account]) -> None:
    """An uncategorized transaction whose notes only carry the guessed tag is processed again."""
    sets = TransactionSelector(codec).select([make_transaction("recat", notes=GUESSED)], accounts)
    if _ids(sets.to_process) != ["recat"]:
        msg = f"Expected ['recat'] to be processed, got {_ids(sets.to_process)}"
        raise AssertionError(msg)
