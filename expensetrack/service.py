"""Operations on the expense list."""

from __future__ import annotations

from .models import Expense
from .persistence import ExpenseStore
from .util import get_today


def add_expense(store: ExpenseStore, description: str, amount: float) -> int:
    """Record a new expense dated today and return its id."""
    expense = Expense(
        id=store.next_id(),
        date=get_today(),
        description=description,
        amount=amount,
    )
    store.append(expense)
    return expense.id


def list_expenses(store: ExpenseStore) -> list[Expense]:
    """Return every stored expense."""
    return store.load()


def update_expense(
    store: ExpenseStore, expense_id: int, description: str, amount: float
) -> bool:
    """Change an expense; empty description or non-positive amount are kept.

    Return False if no expense has the given id.
    """
    expenses = store.load()
    for expense in expenses:
        if expense.id == expense_id:
            if description:
                expense.description = description
            if amount > 0:
                expense.amount = amount
            store.save(expenses)
            return True
    return False