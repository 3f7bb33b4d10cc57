import pytest

from expensetrack.models import Expense


def test_to_csv_line_format():
    expense = Expense(id=1, date="2024-01-02", description="Lunch", amount=12.5)
    assert expense.to_csv_line() == '1,2024-01-02,"Lunch",12.50\n'


def test_round_trip():
    expense = Expense(id=7, date="2024-03-04", description="Groceries", amount=42.25)
    assert Expense.from_csv_line(expense.to_csv_line()) == expense


def test_round_trip_description_with_commas():
    expense = Expense(id=2, date="2024-05-06", description="Bread, milk, eggs", amount=9.75)
    parsed = Expense.from_csv_line(expense.to_csv_line())
    assert parsed.description == "Bread, milk, eggs"
    assert parsed == expense


def test_dollar_prefix_is_accepted():
    parsed = Expense.from_csv_line('3,2024-01-01,"Tea",$4.00')
    assert parsed.amount == 4.0
    assert parsed.description == "Tea"


def test_unquoted_description():
    parsed = Expense.from_csv_line("2,2024-01-01,Coffee,3.50")
    assert parsed.id == 2
    assert parsed.date == "2024-01-01"
    assert parsed.description == "Coffee"
    assert parsed.amount == 3.5


def test_bad_id_raises():
    with pytest.raises(ValueError):
        Expense.from_csv_line('x,2024-01-01,"Tea",4.00')


def test_unterminated_quote_raises():
    with pytest.raises(ValueError):
        Expense.from_csv_line('1,2024-01-01,"Tea,4.00')


def test_missing_amount_raises():
    with pytest.raises(ValueError):
        Expense.from_csv_line('1,2024-01-01,"Tea"')