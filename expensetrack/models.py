"""The expense record and its CSV line form."""

from __future__ import annotations

from dataclasses import dataclass

from .util import format_currency


@dataclass
class Expense:
    """A single recorded expense."""

    id: int = 0
    date: str = ""
    description: str = ""
    amount: float = 0.0

    def to_csv_line(self) -> str:
        """Render the expense as one CSV line, newline included."""
        return (
            f'{self.id},{self.date},"{self.description}",'
            f"{format_currency(self.amount)}\n"
        )

    @classmethod
    def from_csv_line(cls, line: str) -> "Expense":
        """Parse one CSV line; raise ValueError if it is malformed."""
        fields = iter(line.rstrip("\r\n").split(","))
        try:
            expense_id = int(next(fields))
            date = next(fields)
            description = next(fields)
        except StopIteration:
            raise ValueError(f"incomplete expense line: {line!r}") from None

        if description.startswith('"'):
            description = description[1:]
            while not description.endswith('"'):
                try:
                    description += "," + next(fields)
                except StopIteration:
                    raise ValueError(
                        f"unterminated quoted description: {line!r}"
                    ) from None
        if description.endswith('"'):
            description = description[:-1]

        amount_text = next(fields, "")
        if amount_text.startswith("$"):
            amount_text = amount_text[1:]
        return cls(
            id=expense_id,
            date=date,
            description=description,
            amount=float(amount_text),
        )