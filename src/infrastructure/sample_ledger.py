"""Demo ledger used when no ledger file is configured."""

from decimal import Decimal

from src.domain.models.ledger import (
    Asset,
    AssetCategory,
    Debt,
    Expense,
    Frequency,
    IncomeSource,
    LedgerSnapshot,
)


def build_sample_ledger() -> LedgerSnapshot:
    """Return a small household ledger covering every record type."""
    income = (
        IncomeSource("1", "Salary", Decimal("5000"), Frequency.MONTHLY),
        IncomeSource("2", "Side Gig", Decimal("1000"), Frequency.MONTHLY),
        IncomeSource("3", "Dividends", Decimal("500"), Frequency.QUARTERLY),
    )
    assets = (
        Asset("1", "Checking Account", Decimal("10000"), AssetCategory.LIQUID, Decimal("0.01")),
        Asset("2", "Savings Account", Decimal("25000"), AssetCategory.LIQUID, Decimal("0.03")),
        Asset("3", "401(k)", Decimal("120000"), AssetCategory.RETIREMENT, Decimal("0.07")),
        Asset("4", "Roth IRA", Decimal("45000"), AssetCategory.RETIREMENT, Decimal("0.07")),
        Asset("5", "Brokerage Account", Decimal("30000"), AssetCategory.INVESTMENT, Decimal("0.08")),
        Asset("6", "Home", Decimal("350000"), AssetCategory.PROPERTY, Decimal("0.03")),
    )
    debts = (
        Debt("1", "Mortgage", Decimal("280000"), Decimal("0.0375"), Decimal("1500"), term_years=30),
        Debt("2", "Car Loan", Decimal("15000"), Decimal("0.045"), Decimal("350"), term_years=5),
        Debt("3", "Student Loan", Decimal("25000"), Decimal("0.05"), Decimal("300"), term_years=10),
        Debt("4", "Credit Card", Decimal("2000"), Decimal("0.185"), Decimal("100"), revolving=True),
    )
    expenses = (
        Expense("1", "Housing", "Mortgage", Decimal("1500"), Frequency.MONTHLY, True),
        Expense("2", "Housing", "Utilities", Decimal("300"), Frequency.MONTHLY, True),
        Expense("3", "Transportation", "Car Payment", Decimal("350"), Frequency.MONTHLY, True),
        Expense("4", "Transportation", "Gas", Decimal("200"), Frequency.MONTHLY, True),
        Expense("5", "Food", "Groceries", Decimal("600"), Frequency.MONTHLY, True),
        Expense("6", "Food", "Dining Out", Decimal("400"), Frequency.MONTHLY, False),
        Expense("7", "Entertainment", "Streaming Services", Decimal("50"), Frequency.MONTHLY, False),
        Expense("8", "Shopping", "Clothing", Decimal("200"), Frequency.MONTHLY, False),
        Expense("9", "Healthcare", "Insurance", Decimal("300"), Frequency.MONTHLY, True),
        Expense("10", "Personal", "Gym", Decimal("50"), Frequency.MONTHLY, False),
    )
    return LedgerSnapshot(
        income=income,
        assets=assets,
        debts=debts,
        expenses=expenses,
    )


__all__ = ["build_sample_ledger"]
