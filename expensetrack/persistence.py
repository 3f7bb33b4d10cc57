"""File storage for expenses and the id counter."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .models import Expense

NEXT_ID_FILE = "next_id"
EXPENSE_DATA_FILE = "expense_data.csv"
EXPENSE_DATA_HEADER = "ID,Date,Description,Amount\n"


class ExpenseStore:
    """Expenses kept as a CSV file plus an id counter file in one directory."""

    def __init__(self, directory: str | Path = ".") -> None:
        self.directory = Path(directory)

    @property
    def data_path(self) -> Path:
        return self.directory / EXPENSE_DATA_FILE

    @property
    def id_path(self) -> Path:
        return self.directory / NEXT_ID_FILE

    def next_id(self) -> int:
        """Return the next free id and advance the stored counter."""
        expense_id = 1
        try:
            text = self.id_path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            pass
        else:
            if text:
                expense_id = int(text.split()[0])
        self.id_path.write_text(str(expense_id + 1), encoding="utf-8")
        return expense_id

    def append(self, expense: Expense) -> None:
        """Append one expense, writing the header if the file is new."""
        is_new = not self.data_path.exists()
        with self.data_path.open("a", encoding="utf-8", newline="") as handle:
            if is_new:
                handle.write(EXPENSE_DATA_HEADER)
            handle.write(expense.to_csv_line())

    def load(self) -> list[Expense]:
        """Read all stored expenses; an absent file yields an empty list."""
        try:
            with self.data_path.open(encoding="utf-8", newline="") as handle:
                next(handle, None)
                return [Expense.from_csv_line(line) for line in handle]
        except FileNotFoundError:
            return []

    def save(self, expenses: Iterable[Expense]) -> None:
        """Replace the stored expenses with the given ones."""
        with self.data_path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(EXPENSE_DATA_HEADER)
            handle.writelines(expense.to_csv_line() for expense in expenses)