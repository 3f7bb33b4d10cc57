# expensetrack

A small command-line expense tracker. Each expense has an ID, the date it was
recorded, a description and an amount. Records are stored in
`expense_data.csv`, which has the header line `ID,Date,Description,Amount`.
The next free ID is kept in a file named `next_id`. The command line uses
both files in the current directory.

## Installation

```
pip install .
```

## Usage

Add an expense. It is dated today. The description must not be empty, and the
amount must be greater than zero.

```
expensetrack add --description "Lunch" --amount 12.50
```

List all expenses as an aligned table. If there are none, it prints
`No expenses found`.

```
expensetrack list
```

Update an expense by its ID. Give a new description, a new amount, or both:

```
expensetrack update --id 1 --description "Team lunch"
expensetrack update --id 1 --amount 20
```

Delete an expense by its ID:

```
expensetrack delete --id 1
```

Print the total of all stored amounts, for example `Total expenses: $32.50`:

```
expensetrack summary
```

Print a summary of the commands and their options:

```
expensetrack help
```

The command exits with status 0 on success. It exits with status 1 and prints
a message to standard error in these cases: no command or an unknown command
is given, the arguments are wrong, or the expense ID cannot be found.

## Library use

`ExpenseStore` takes the directory that holds the data files. By default this
is the current directory.

```python
from expensetrack.persistence import ExpenseStore
from expensetrack.service import add_expense, list_expenses, update_expense
from expensetrack.cli import format_expenses, handle_command

store = ExpenseStore(".")
new_id = add_expense(store, "Coffee", 3.2)
update_expense(store, new_id, "", 3.5)   # empty description keeps the old one
print(format_expenses(list_expenses(store)))

handle_command(["summary"], store)       # same as the command line, returns the exit status
```

`expensetrack.models.Expense` is a dataclass with the fields `id`, `date`,
`description` and `amount`. It has `to_csv_line()` and
`Expense.from_csv_line(line)` to convert one record to and from its CSV line.

## Limitations

Descriptions are written between double quotes, and nothing in them is
escaped. A description that itself holds a double quote may not read back
unchanged. There are no categories, budgets or filtering by date.

## Running the tests

```
pip install ".[test]"
pytest
```