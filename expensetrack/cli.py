"""Command-line interface for the expense tracker."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from .models import Expense
from .persistence import ExpenseStore
from .service import add_expense, list_expenses, update_expense
from .util import format_currency

PROG = "expensetrack"
DATE_WIDTH = 10

_USAGE = (
    f"Usage: {PROG} <command> [options]\n"
    "\n"
    "Commands:\n"
    "  add --description <description> --amount <amount>\n"
    "  list\n"
    "  update --id <id> [--description <description>] [--amount <amount>]\n"
    "  delete --id <id>\n"
    "  summary\n"
    "  help"
)


class _CommandError(Exception):
    """A command failed; the message is reported to the user."""


def display_width(text: str) -> int:
    """Return the number of characters in the text."""
    return len(text)


def align_text(text: str, width: int, align: str = "c") -> str:
    """Pad text to width: 'l' left, 'r' right, 'c' centred."""
    padding = width - display_width(text)
    if padding <= 0:
        return text
    if align == "l":
        left = 0
    elif align == "r":
        left = padding
    elif align == "c":
        left = padding // 2
    else:
        left, padding = 0, 0
    return " " * left + text + " " * (padding - left)


def format_expenses(expenses: Sequence[Expense]) -> str:
    """Render expenses as an aligned table."""
    id_width = max([2, *(display_width(str(e.id)) for e in expenses)])
    description_width = max([11, *(display_width(e.description) for e in expenses)])
    amount_width = max(
        [6, *(display_width(format_currency(e.amount)) + 1 for e in expenses)]
    )
    lines = [
        " ".join(
            (
                align_text("ID", id_width, "c"),
                align_text("Date", DATE_WIDTH, "c"),
                align_text("Description", description_width, "c"),
                align_text("Amount", amount_width, "c"),
            )
        )
    ]
    if not expenses:
        total = DATE_WIDTH + id_width + description_width + amount_width
        lines.append(align_text("No expenses found", total))
        return "\n".join(lines)
    for expense in expenses:
        lines.append(
            " ".join(
                (
                    align_text(str(expense.id), id_width, "r"),
                    align_text(expense.date, DATE_WIDTH, "c"),
                    align_text(expense.description, description_width, "l"),
                    align_text("$" + format_currency(expense.amount), amount_width, "r"),
                )
            )
        )
    return "\n".join(lines)


def _options(args: Sequence[str]) -> list[tuple[str, str]]:
    pairs = list(zip(args[::2], args[1::2]))
    for option, value in pairs:
        if value.startswith("--"):
            raise _CommandError(f"Missing value for option: {option}")
    return pairs


def _parse_amount(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise _CommandError(f"Invalid amount value: {value}") from None


def _parse_id(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise _CommandError(f"Invalid ID value: {value}") from None


def _add(args: Sequence[str], store: ExpenseStore) -> int:
    if len(args) != 4:
        raise _CommandError(
            "Invalid number of arguments for add command.\n"
            f"Usage: {PROG} add --description <description> --amount <amount>"
        )
    description = ""
    amount = 0.0
    for option, value in _options(args):
        if option == "--description":
            description = value
        elif option == "--amount":
            amount = _parse_amount(value)
    if not description or amount <= 0:
        raise _CommandError("Invalid arguments for add command")
    try:
        expense_id = add_expense(store, description, amount)
    except (OSError, ValueError) as exc:
        raise _CommandError(f"Error adding expense: {exc}") from exc
    print(f"Expense added successfully (ID: {expense_id})")
    return 0


def _list(args: Sequence[str], store: ExpenseStore) -> int:
    if args:
        raise _CommandError(
            f"Invalid number of arguments for list command\nUsage: {PROG} list"
        )
    expenses = list_expenses(store)
    if not expenses:
        print("No expenses found")
    else:
        print(format_expenses(expenses))
    return 0


def _update(args: Sequence[str], store: ExpenseStore) -> int:
    if len(args) not in (4, 6):
        raise _CommandError(
            "Invalid number of arguments for update command\n"
            f"Usage: {PROG} update --id <id> [--description <description>] "
            "[--amount <amount>]"
        )
    expense_id = 0
    description = ""
    amount = 0.0
    for option, value in _options(args):
        if option == "--id":
            expense_id = _parse_id(value)
        elif option == "--description":
            description = value
        elif option == "--amount":
            amount = _parse_amount(value)
        else:
            raise _CommandError(f"Invalid option: {option}")
    if expense_id <= 0:
        raise _CommandError(f"Invalid ID value: {expense_id}")
    if not description and amount <= 0:
        raise _CommandError("Invalid Description and Amount value")
    try:
        updated = update_expense(store, expense_id, description, amount)
    except (OSError, ValueError) as exc:
        raise _CommandError(f"Error updating expense: {exc}") from exc
    if not updated:
        raise _CommandError("Expense ID not found for updating")
    print("Expense updated successfully")
    return 0


def _delete(args: Sequence[str], store: ExpenseStore) -> int:
    if len(args) != 2:
        raise _CommandError(
            "Invalid number of arguments for delete command\n"
            f"Usage: {PROG} delete --id <id>"
        )
    (option, value), = _options(args)
    if option != "--id":
        raise _CommandError(f"Invalid option: {option}")
    expense_id = _parse_id(value)
    if expense_id <= 0:
        raise _CommandError(f"Invalid ID value: {expense_id}")
    try:
        expenses = store.load()
        remaining = [e for e in expenses if e.id != expense_id]
        if len(remaining) == len(expenses):
            raise _CommandError("Expense ID not found for deleting")
        store.save(remaining)
    except (OSError, ValueError) as exc:
        raise _CommandError(f"Error deleting expense: {exc}") from exc
    print("Expense deleted successfully")
    return 0


def _summary(args: Sequence[str], store: ExpenseStore) -> int:
    if args:
        raise _CommandError(
            f"Invalid number of arguments for summary command\nUsage: {PROG} summary"
        )
    total = sum(expense.amount for expense in list_expenses(store))
    print(f"Total expenses: ${format_currency(total)}")
    return 0


def _help(args: Sequence[str], store: ExpenseStore) -> int:
    print(_USAGE)
    return 0


_COMMANDS: dict[str, Callable[[Sequence[str], ExpenseStore], int]] = {
    "add": _add,
    "list": _list,
    "update": _update,
    "delete": _delete,
    "summary": _summary,
    "help": _help,
}


def handle_command(argv: Sequence[str], store: ExpenseStore) -> int:
    """Run the command named by argv[0]; return the exit status."""
    if not argv:
        print("No command provided. Use 'help' for usage information", file=sys.stderr)
        return 1
    command, *args = argv
    handler = _COMMANDS.get(command)
    if handler is None:
        print(
            f"Unknown command: {command}. Use 'help' for usage information",
            file=sys.stderr,
        )
        return 1
    try:
        return handler(args, store)
    except _CommandError as exc:
        print(exc, file=sys.stderr)
        return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: operate on the data files in the current directory."""
    if argv is None:
        argv = sys.argv[1:]
    return handle_command(list(argv), ExpenseStore("."))


if __name__ == "__main__":
    sys.exit(main())