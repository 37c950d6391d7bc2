"""Streamlit dashboard entry point."""

from collections.abc import Callable, Sequence
from decimal import Decimal
from typing import TypeVar

import altair as alt
import streamlit as st

from src.application.use_cases.get_breakdowns import (
    GetBreakdownsUseCase,
    LedgerBreakdowns,
)
from src.application.use_cases.get_emergency_fund_plan import (
    EmergencyFundPlan,
    GetEmergencyFundPlanUseCase,
)
from src.application.use_cases.get_financial_summary import (
    FinancialSummary,
    GetFinancialSummaryUseCase,
)
from src.application.use_cases.get_net_worth_projection import (
    GetNetWorthProjectionUseCase,
)
from src.domain.errors import FinanceDashboardError
from src.domain.models.finance import CategoryAmount, ProjectionPoint
from src.domain.models.ledger import (
    Asset,
    AssetCategory,
    Debt,
    Expense,
    Frequency,
    IncomeSource,
)
from src.domain.policies.allocation import RECOMMENDED_ALLOCATION
from src.domain.services.finance import (
    actual_allocation,
    allocation_amounts,
    rebalance_allocation,
)
from src.domain.services.normalization import (
    monthly_equivalent,
    normalize_category,
)
from src.infrastructure.container import build_ledger_store, build_settings
from src.infrastructure.ledger_json import dumps_ledger, loads_ledger
from src.infrastructure.ledger_store import InMemoryLedgerStore
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger

PAGES = [
    "Dashboard",
    "Income",
    "Assets",
    "Net Worth",
    "Burn Rate",
    "3X Account",
    "Allocation",
    "Debts",
    "Data",
]
PALETTE = [
    "#1b9aaa",
    "#2e7d32",
    "#f4a261",
    "#e76f51",
    "#457b9d",
    "#f6c453",
    "#6c8ead",
    "#a0c4ff",
]
STORE_KEY = "ledger_store"
NEW_RECORD = "new"
DEBT_KINDS = ["Term loan", "Revolving", "Other"]

R = TypeVar("R", IncomeSource, Asset, Debt, Expense)


def _get_store() -> InMemoryLedgerStore:
    """Return the session's ledger store, building it on first access."""
    if STORE_KEY not in st.session_state:
        st.session_state[STORE_KEY] = build_ledger_store(build_settings())
    return st.session_state[STORE_KEY]


def _format_currency(value: Decimal) -> str:
    """Format currency values for display."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def _format_percent(value: Decimal | None) -> str:
    """Format percentages, showing a dash for undefined values."""
    if value is None:
        return "—"
    return f"{value:.1f}%"


def _prepare_donut_chart_data(
    items: Sequence[CategoryAmount],
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        items: Aggregated amounts by category.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    sorted_items = sorted(items, key=lambda item: item.amount, reverse=True)
    top_items = list(sorted_items[:max_categories])
    other_amount = sum(
        (item.amount for item in sorted_items[max_categories:]),
        start=Decimal("0"),
    )
    if other_amount != 0:
        top_items.append(CategoryAmount(category="Other", amount=other_amount))
    total_amount = sum(
        (item.amount for item in sorted_items),
        start=Decimal("0"),
    )
    data: list[dict[str, str | float]] = []
    for item in top_items:
        share = (
            (item.amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": item.category,
                "amount": float(item.amount),
                "amount_label": _format_currency(item.amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def _projection_chart_data(
    points: Sequence[ProjectionPoint],
    target: Decimal | None = None,
) -> list[dict[str, float | int]]:
    """Convert projection points to Altair-ready rows."""
    rows: list[dict[str, float | int]] = []
    for point in points:
        row: dict[str, float | int] = {
            "month": point.month,
            "value": float(point.value),
        }
        if target is not None:
            row["target"] = float(target)
        rows.append(row)
    return rows


def _render_donut_chart(
    items: Sequence[CategoryAmount],
    title: str,
    max_categories: int = 6,
    chart_size: int = 320,
) -> None:
    """Render a donut chart of amounts by category."""
    st.subheader(title)
    if not items:
        st.info("No amounts available for the chart.")
        return
    data, _ = _prepare_donut_chart_data(items, max_categories=max_categories)
    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=PALETTE),
            legend=alt.Legend(orient="bottom", title=None, columns=3),
        ),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(width=chart_size, height=chart_size)
    st.altair_chart(chart, width="stretch")


def _render_projection_chart(
    points: Sequence[ProjectionPoint],
    title: str,
    x_title: str = "Month",
    target: Decimal | None = None,
) -> None:
    """Render a line chart of projected balances."""
    st.subheader(title)
    data = _projection_chart_data(points, target)
    base = alt.Chart(alt.Data(values=data))
    line = base.mark_line(point=True, color=PALETTE[0]).encode(
        x=alt.X("month:Q", title=x_title),
        y=alt.Y("value:Q", title="Balance"),
        tooltip=[alt.Tooltip("month:Q"), alt.Tooltip("value:Q", format=",.0f")],
    )
    layers = [line]
    if target is not None:
        layers.append(
            base.mark_rule(strokeDash=[6, 4], color=PALETTE[3]).encode(
                y="target:Q"
            )
        )
    st.altair_chart(alt.layer(*layers), width="stretch")


def _to_decimal(value: float) -> Decimal:
    return Decimal(str(value))


def _select_record(
    ledger: str,
    records: Sequence[R],
    label_of: Callable[[R], str],
) -> R | None:
    """Pick an existing record to edit, or None to add a new one."""
    labels = {record.id: label_of(record) for record in records}
    choice = st.selectbox(
        f"Edit {ledger}",
        [NEW_RECORD, *labels],
        format_func=lambda option: labels.get(option, f"Add new {ledger}"),
        key=f"{ledger}_selected",
    )
    return next((record for record in records if record.id == choice), None)


def _apply_command(command: Callable, argument, action: str) -> bool:
    """Run a store command, reporting domain errors in the page.

    Returns:
        bool: True when the command succeeded.
    """
    try:
        command(argument)
    except FinanceDashboardError as exc:
        get_app_logger().error(f"{action} failed: {exc}")
        st.error(f"{action} failed: {exc}")
        return False
    get_usage_logger().info(f"ledger_edit action={action}")
    return True


def _render_ledger_editor(
    ledger: str,
    records: Sequence[R],
    label_of: Callable[[R], str],
    form: Callable[[R | None], R | None],
    add: Callable[[R], R],
    update: Callable[[R], R],
    delete: Callable[[str], None],
) -> None:
    """Render the add/edit form and delete button for one ledger.

    Args:
        ledger: Singular ledger name used in labels and widget keys.
        records: Current records of the ledger.
        label_of: Builds the selector label of a record.
        form: Renders the form for an existing record (or None for a new
            one) and returns the submitted record, or None if not submitted.
        add: Store command adding a record.
        update: Store command replacing a record by id.
        delete: Store command removing a record by id.
    """
    st.subheader(f"Manage {ledger} records")
    existing = _select_record(ledger, records, label_of)
    submitted = form(existing)
    if submitted is not None:
        command = add if existing is None else update
        if _apply_command(command, submitted, f"Save {ledger}"):
            st.rerun()
    if existing is not None and st.button(
        f"Delete {existing.name}",
        key=f"{ledger}_delete",
    ):
        if _apply_command(delete, existing.id, f"Delete {ledger}"):
            st.rerun()


def _income_form(existing: IncomeSource | None) -> IncomeSource | None:
    frequencies = list(Frequency)
    with st.form("income_form", clear_on_submit=existing is None):
        name = st.text_input("Source", value=existing.name if existing else "")
        amount = st.number_input(
            "Amount",
            min_value=0.0,
            value=float(existing.amount) if existing else 0.0,
            step=100.0,
        )
        frequency = st.selectbox(
            "Frequency",
            frequencies,
            index=frequencies.index(existing.frequency) if existing else 0,
            format_func=lambda item: item.value,
        )
        saved = st.form_submit_button("Save")
    if not saved:
        return None
    return IncomeSource(
        id=existing.id if existing else "",
        name=name,
        amount=_to_decimal(amount),
        frequency=frequency,
    )


def _asset_form(existing: Asset | None) -> Asset | None:
    categories = list(AssetCategory)
    with st.form("asset_form", clear_on_submit=existing is None):
        name = st.text_input("Name", value=existing.name if existing else "")
        value = st.number_input(
            "Value",
            min_value=0.0,
            value=float(existing.value) if existing else 0.0,
            step=1000.0,
        )
        category = st.selectbox(
            "Category",
            categories,
            index=categories.index(existing.category) if existing else 0,
            format_func=lambda item: item.value.title(),
        )
        growth = st.number_input(
            "Annual interest or appreciation (%)",
            value=(
                float(existing.growth_rate * 100)
                if existing and existing.growth_rate is not None
                else 0.0
            ),
            step=0.5,
        )
        saved = st.form_submit_button("Save")
    if not saved:
        return None
    return Asset(
        id=existing.id if existing else "",
        name=name,
        value=_to_decimal(value),
        category=category,
        growth_rate=_to_decimal(growth) / 100 if growth else None,
    )


def _debt_kind(debt: Debt | None) -> str:
    if debt is None or debt.term_years is not None:
        return DEBT_KINDS[0]
    return DEBT_KINDS[1] if debt.revolving else DEBT_KINDS[2]


def _debt_form(existing: Debt | None) -> Debt | None:
    with st.form("debt_form", clear_on_submit=existing is None):
        name = st.text_input("Name", value=existing.name if existing else "")
        balance = st.number_input(
            "Balance",
            min_value=0.0,
            value=float(existing.balance) if existing else 0.0,
            step=100.0,
        )
        rate = st.number_input(
            "Interest rate (%)",
            min_value=0.0,
            value=float(existing.interest_rate * 100) if existing else 0.0,
            step=0.25,
        )
        minimum = st.number_input(
            "Minimum payment",
            min_value=0.0,
            value=float(existing.minimum_payment) if existing else 0.0,
            step=10.0,
        )
        kind = st.radio(
            "Type",
            DEBT_KINDS,
            index=DEBT_KINDS.index(_debt_kind(existing)),
            horizontal=True,
        )
        term = st.number_input(
            "Term (years)",
            min_value=1,
            value=(existing.term_years if existing and existing.term_years else 5),
            step=1,
        )
        saved = st.form_submit_button("Save")
    if not saved:
        return None
    return Debt(
        id=existing.id if existing else "",
        name=name,
        balance=_to_decimal(balance),
        interest_rate=_to_decimal(rate) / 100,
        minimum_payment=_to_decimal(minimum),
        term_years=int(term) if kind == DEBT_KINDS[0] else None,
        revolving=kind == DEBT_KINDS[1],
    )


def _expense_form(existing: Expense | None) -> Expense | None:
    frequencies = list(Frequency)
    with st.form("expense_form", clear_on_submit=existing is None):
        category = st.text_input(
            "Category",
            value=existing.category if existing else "",
        )
        name = st.text_input("Name", value=existing.name if existing else "")
        amount = st.number_input(
            "Amount",
            min_value=0.0,
            value=float(existing.amount) if existing else 0.0,
            step=10.0,
        )
        frequency = st.selectbox(
            "Frequency",
            frequencies,
            index=frequencies.index(existing.frequency) if existing else 0,
            format_func=lambda item: item.value,
        )
        essential = st.checkbox(
            "Essential",
            value=existing.essential if existing else False,
        )
        saved = st.form_submit_button("Save")
    if not saved:
        return None
    return Expense(
        id=existing.id if existing else "",
        category=normalize_category(category),
        name=name,
        amount=_to_decimal(amount),
        frequency=frequency,
        essential=essential,
    )


def _render_income(summary: FinancialSummary, store: InMemoryLedgerStore) -> None:
    st.metric("Monthly Income", _format_currency(summary.monthly_income))
    income = store.load_snapshot().income
    st.dataframe(
        [
            {
                "Source": item.name,
                "Amount": _format_currency(item.amount),
                "Frequency": item.frequency.value,
                "Monthly": _format_currency(
                    monthly_equivalent(item.amount, item.frequency)
                ),
            }
            for item in income
        ],
        width="stretch",
        hide_index=True,
    )
    _render_ledger_editor(
        "income",
        income,
        lambda item: f"{item.name} ({_format_currency(item.amount)} {item.frequency.value})",
        _income_form,
        store.add_income,
        store.update_income,
        store.delete_income,
    )


def _render_assets(
    summary: FinancialSummary,
    breakdowns: LedgerBreakdowns,
    store: InMemoryLedgerStore,
) -> None:
    total_col, liquid_col = st.columns(2)
    total_col.metric("Total Assets", _format_currency(summary.total_assets))
    liquid_col.metric("Liquid Assets", _format_currency(summary.liquid_assets))
    _render_donut_chart(breakdowns.assets_by_category, "Assets by Category")
    _render_ledger_editor(
        "asset",
        store.load_snapshot().assets,
        lambda item: f"{item.name} ({_format_currency(item.value)})",
        _asset_form,
        store.add_asset,
        store.update_asset,
        store.delete_asset,
    )


def _render_dashboard(
    summary: FinancialSummary,
    breakdowns: LedgerBreakdowns,
) -> None:
    income_col, burn_col, worth_col, fund_col = st.columns(4)
    income_col.metric("Monthly Income", _format_currency(summary.monthly_income))
    burn_col.metric("Monthly Burn Rate", _format_currency(summary.monthly_burn_rate))
    worth_col.metric("Net Worth", _format_currency(summary.net_worth))
    fund_col.metric(
        "3X Account",
        _format_percent(summary.emergency_fund.percent_complete),
    )
    left, right = st.columns(2)
    with left:
        _render_donut_chart(breakdowns.assets_by_category, "Assets by Category")
    with right:
        _render_donut_chart(
            breakdowns.expenses_by_category,
            "Expenses by Category",
        )


def _render_net_worth(
    summary: FinancialSummary,
    breakdowns: LedgerBreakdowns,
    store: InMemoryLedgerStore,
    default_return: Decimal,
) -> None:
    assets_col, debt_col, worth_col = st.columns(3)
    assets_col.metric("Assets", _format_currency(summary.total_assets))
    debt_col.metric("Debts", _format_currency(summary.total_debt))
    worth_col.metric("Net Worth", _format_currency(summary.net_worth))
    _render_donut_chart(breakdowns.assets_by_category, "Asset Composition")

    years = st.slider("Projection years", 1, 40, 10)
    annual_return = st.number_input(
        "Annual growth rate (%)",
        value=float(default_return),
        step=0.5,
    )
    contribution = st.number_input(
        "Monthly contribution",
        value=float(max(summary.monthly_savings, Decimal("0"))),
        step=100.0,
    )
    compounding = st.radio("Compounding", ["Yearly", "Monthly"], horizontal=True)
    use_case = GetNetWorthProjectionUseCase(ledger_source=store)
    if compounding == "Yearly":
        points = use_case.execute_annual(
            annual_contribution=_to_decimal(contribution) * 12,
            annual_return_percent=_to_decimal(annual_return),
            years=years,
        )
        _render_projection_chart(points, "Net Worth Projection", x_title="Year")
        return
    points = use_case.execute(
        monthly_contribution=_to_decimal(contribution),
        annual_return_percent=_to_decimal(annual_return),
        horizon_months=years * 12,
    )
    _render_projection_chart(points, "Net Worth Projection")


def _render_burn_rate(
    summary: FinancialSummary,
    breakdowns: LedgerBreakdowns,
    store: InMemoryLedgerStore,
) -> None:
    burn_col, savings_col, rate_col = st.columns(3)
    burn_col.metric("Monthly Burn Rate", _format_currency(summary.monthly_burn_rate))
    savings_col.metric("Monthly Savings", _format_currency(summary.monthly_savings))
    rate_col.metric("Savings Rate", _format_percent(summary.savings_rate))
    split = breakdowns.expense_split
    _render_donut_chart(
        [
            CategoryAmount(category="Essential", amount=split.essential),
            CategoryAmount(category="Discretionary", amount=split.discretionary),
        ],
        "Essential vs Discretionary",
    )
    _render_donut_chart(breakdowns.expenses_by_category, "Expenses by Category")
    _render_ledger_editor(
        "expense",
        store.load_snapshot().expenses,
        lambda item: f"{item.category}: {item.name} ({_format_currency(item.amount)})",
        _expense_form,
        store.add_expense,
        store.update_expense,
        store.delete_expense,
    )


def _render_emergency_fund(plan: EmergencyFundPlan) -> None:
    progress = plan.progress
    st.caption(
        f"Current: {_format_currency(progress.current)} / "
        f"{_format_currency(progress.target)} "
        f"({_format_percent(progress.percent_complete)})"
    )
    st.progress(min(float(progress.percent_complete), 100.0) / 100)
    if progress.is_funded:
        st.success("Your 3X account is fully funded.")
    elif plan.estimate.reachable:
        st.info(
            f"Funded in {plan.estimate.years} years and "
            f"{plan.estimate.remaining_months} months."
        )
    else:
        st.warning("The target is not reachable at the current savings pace.")
    _render_projection_chart(
        plan.projection,
        "3X Account Projection",
        target=progress.target,
    )


def _render_allocation(summary: FinancialSummary, store: InMemoryLedgerStore) -> None:
    income = st.number_input(
        "Monthly income",
        value=float(summary.monthly_income),
        step=100.0,
    )
    bucket = st.selectbox("Adjust bucket", ["needs", "wants", "savings"])
    split = rebalance_allocation(
        RECOMMENDED_ALLOCATION,
        bucket,
        st.slider(
            f"{bucket.title()} (%)",
            0,
            100,
            getattr(RECOMMENDED_ALLOCATION, bucket),
        ),
    )
    amounts = allocation_amounts(Decimal(str(income)), split)
    needs_col, wants_col, savings_col = st.columns(3)
    needs_col.metric(f"Needs ({split.needs}%)", _format_currency(amounts.needs))
    wants_col.metric(f"Wants ({split.wants}%)", _format_currency(amounts.wants))
    savings_col.metric(
        f"Savings ({split.savings}%)",
        _format_currency(amounts.savings),
    )
    snapshot = store.load_snapshot()
    actual = actual_allocation(snapshot.income, snapshot.expenses)
    st.caption(
        f"Actual: needs {_format_currency(actual.needs)}, "
        f"wants {_format_currency(actual.wants)}, "
        f"savings {_format_currency(actual.savings)}. "
        f"Current savings rate: {_format_percent(summary.savings_rate)}"
    )


def _render_debts(
    summary: FinancialSummary,
    breakdowns: LedgerBreakdowns,
    store: InMemoryLedgerStore,
) -> None:
    total_col, payments_col, dti_col = st.columns(3)
    total_col.metric("Total Debt", _format_currency(summary.total_debt))
    payments_col.metric(
        "Minimum Payments",
        _format_currency(summary.total_minimum_payments),
    )
    dti_col.metric(
        "Debt to Income",
        _format_percent(summary.debt_to_income_ratio * 100),
    )
    st.subheader("Payoff order (highest rate first)")
    st.dataframe(
        [
            {
                "Name": debt.name,
                "Balance": _format_currency(debt.balance),
                "Rate": f"{debt.interest_rate * 100:.2f}%",
                "Minimum": _format_currency(debt.minimum_payment),
                "Type": "Revolving" if debt.revolving else f"{debt.term_years or '—'} yr",
            }
            for debt in breakdowns.debts_by_interest_rate
        ],
        width="stretch",
        hide_index=True,
    )
    _render_ledger_editor(
        "debt",
        store.load_snapshot().debts,
        lambda item: f"{item.name} ({_format_currency(item.balance)})",
        _debt_form,
        store.add_debt,
        store.update_debt,
        store.delete_debt,
    )


def _render_data(store: InMemoryLedgerStore) -> None:
    logger = get_app_logger()
    st.download_button(
        "Export ledger (JSON)",
        data=dumps_ledger(store.load_snapshot()),
        file_name="ledger.json",
        mime="application/json",
    )
    if st.button("Clear all ledgers"):
        store.clear()
        st.success("Ledgers cleared.")
    uploaded = st.file_uploader("Import ledger (JSON)", type=["json"])
    if uploaded is None:
        return
    try:
        store.replace(loads_ledger(uploaded.getvalue()))
    except FinanceDashboardError as exc:
        logger.error(f"Ledger import failed: {exc}")
        st.error(f"Import failed: {exc}")
        return
    st.success("Ledger imported.")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Dashboard", layout="wide")
    st.title("Personal Finance Dashboard")

    page = st.sidebar.selectbox("Page", PAGES)
    get_usage_logger().info(f"page_view page={page}")

    settings = build_settings()
    try:
        store = _get_store()
    except (FinanceDashboardError, OSError) as exc:
        get_app_logger().error(f"Could not load ledger: {exc}")
        st.error(f"Could not load ledger: {exc}")
        return

    if page == "Data":
        _render_data(store)
        return

    summary = GetFinancialSummaryUseCase(
        ledger_source=store,
        emergency_fund_multiplier=settings.emergency_fund_multiplier,
    ).execute()
    breakdowns = GetBreakdownsUseCase(ledger_source=store).execute()

    if store.load_snapshot().is_empty:
        st.info(
            "No records yet. Add them on the Income, Assets, Burn Rate and "
            "Debts pages, or import a ledger on the Data page."
        )

    if page == "Dashboard":
        _render_dashboard(summary, breakdowns)
    elif page == "Income":
        _render_income(summary, store)
    elif page == "Assets":
        _render_assets(summary, breakdowns, store)
    elif page == "Net Worth":
        _render_net_worth(
            summary,
            breakdowns,
            store,
            settings.expected_annual_return,
        )
    elif page == "Burn Rate":
        _render_burn_rate(summary, breakdowns, store)
    elif page == "3X Account":
        monthly_savings = st.number_input("Monthly savings", value=1000.0, step=100.0)
        annual_return = st.number_input(
            "Annual return (%)",
            value=float(settings.expected_annual_return),
            step=0.5,
        )
        plan = GetEmergencyFundPlanUseCase(
            ledger_source=store,
            emergency_fund_multiplier=settings.emergency_fund_multiplier,
            max_months=settings.max_projection_months,
        ).execute(
            monthly_savings=Decimal(str(monthly_savings)),
            annual_return_percent=Decimal(str(annual_return)),
        )
        _render_emergency_fund(plan)
    elif page == "Allocation":
        _render_allocation(summary, store)
    else:
        _render_debts(summary, breakdowns, store)


if __name__ == "__main__":  # pragma: no cover
    main()
