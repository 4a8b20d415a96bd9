"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal

import streamlit as st
import altair as alt

from freelance_books.application.use_cases.get_goal_status import (
    GoalStatusReport,
)
from freelance_books.domain.constants import GOAL_PERIODS
from freelance_books.domain.models import GoalStatus, RevenueDashboard
from freelance_books.infrastructure.container import (
    build_goal_status_use_case,
    build_revenue_dashboard_use_case,
)

_BILLING_COLORS = ["#1b9aaa", "#2e7d32", "#f4a261"]


def _fetch_dashboard() -> RevenueDashboard:
    """Compute the revenue dashboard from the bookkeeping database."""
    use_case = build_revenue_dashboard_use_case()
    return use_case.execute()


@st.cache_data(show_spinner=False, ttl=300)
def _load_dashboard() -> RevenueDashboard:
    """Cached wrapper around _fetch_dashboard for Streamlit sessions."""
    return _fetch_dashboard()


def _fetch_goal_report(period: str | None) -> GoalStatusReport:
    """Compute income goal progress, optionally for one period kind."""
    use_case = build_goal_status_use_case()
    return use_case.execute(period=period)


@st.cache_data(show_spinner=False, ttl=300)
def _load_goal_report(period: str | None) -> GoalStatusReport:
    """Cached wrapper around _fetch_goal_report."""
    return _fetch_goal_report(period)


def _format_currency(value: Decimal) -> str:
    """Format currency values for display."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def _prepare_billing_chart_data(
    dashboard: RevenueDashboard,
) -> list[dict[str, str | float]]:
    """Return Altair-ready revenue totals per billing type.

    Billing types without revenue are left out.
    """
    totals = [
        ("Hourly", dashboard.hourly_total),
        ("Retainer", dashboard.retainer_total),
        ("Fixed/Project", dashboard.fixed_total),
    ]
    data: list[dict[str, str | float]] = []
    for label, amount in totals:
        if amount <= 0:
            continue
        share = (
            (amount / dashboard.total) * Decimal("100")
            if dashboard.total
            else Decimal("0")
        )
        data.append(
            {
                "billing_type": label,
                "amount": float(amount),
                "amount_label": _format_currency(amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def _render_billing_chart(
    dashboard: RevenueDashboard,
    chart_size: int = 320,
) -> None:
    """Render a donut chart of monthly revenue by billing type."""
    data = _prepare_billing_chart_data(dashboard)
    if not data:
        st.info("No revenue to chart yet.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "billing_type:N",
            scale=alt.Scale(range=_BILLING_COLORS),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("billing_type:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(
        width=chart_size,
        height=chart_size,
    )
    st.subheader("Revenue by Billing Type")
    st.altair_chart(chart, width="stretch")


def _render_contracts(dashboard: RevenueDashboard) -> None:
    """Render the per-contract revenue table."""
    st.subheader("Contracts")
    data = [
        {
            "Contract": line.contract_name,
            "Client": line.client_name,
            "Type": line.contract_type,
            "Monthly Revenue": _format_currency(line.monthly_amount),
            "Details": line.detail,
        }
        for line in dashboard.lines
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _render_dashboard(dashboard: RevenueDashboard) -> None:
    total_col, hourly_col, retainer_col, fixed_col = st.columns(4)
    total_col.metric("Monthly Revenue", _format_currency(dashboard.total))
    hourly_col.metric("Hourly", _format_currency(dashboard.hourly_total))
    retainer_col.metric(
        "Retainer",
        _format_currency(dashboard.retainer_total),
    )
    fixed_col.metric("Fixed/Project", _format_currency(dashboard.fixed_total))

    clients_col, pending_col, unpaid_col, rate_col = st.columns(4)
    clients_col.metric("Clients", dashboard.client_count)
    pending_col.metric("Pending Invoices", dashboard.pending_invoice_count)
    unpaid_col.metric("Unpaid", _format_currency(dashboard.unpaid_amount))
    rate_col.metric(
        "Average Rate",
        f"${dashboard.average_hourly_rate:,.0f}/hr"
        if dashboard.average_hourly_rate is not None
        else "n/a",
    )

    if not dashboard.lines:
        st.warning("No active contracts found.")
        return
    _render_billing_chart(dashboard)
    _render_contracts(dashboard)


def _render_goal(status: GoalStatus) -> None:
    """Render one goal with its progress bar."""
    goal = status.goal
    st.markdown(f"**{goal.period.title()} - {status.label}**")
    if goal.description:
        st.caption(goal.description)
    fraction = float(min(max(status.progress_percent, Decimal("0")), 100)) / 100
    st.progress(
        fraction,
        text=(
            f"{_format_currency(status.actual)} / "
            f"{_format_currency(goal.amount)} "
            f"({status.progress_percent:.1f}%)"
        ),
    )
    if status.achieved:
        st.success(
            f"Goal achieved! +{_format_currency(-status.remaining)} "
            "over target"
        )
    elif status.daily_needed is not None:
        st.caption(
            f"{_format_currency(status.remaining)} remaining "
            f"({status.days_remaining} days left, "
            f"~{_format_currency(status.daily_needed)}/day needed)"
        )
    else:
        st.caption(f"{_format_currency(status.remaining)} remaining (period ended)")


def _render_goals(statuses: Sequence[GoalStatus]) -> None:
    st.subheader("Income Goals")
    for status in statuses:
        _render_goal(status)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Freelance Books", layout="wide")
    st.title("Freelance Books")

    page = st.sidebar.selectbox("Page", ["Dashboard", "Goals"])

    if page == "Dashboard":
        dashboard = _load_dashboard()
        st.caption(
            f"{dashboard.contract_count} active contracts as of "
            f"{dashboard.generated_at:%Y-%m-%d %H:%M}"
        )
        _render_dashboard(dashboard)
    else:
        choice = st.sidebar.selectbox("Period", ["All", *GOAL_PERIODS])
        period = None if choice == "All" else choice
        report = _load_goal_report(period)
        if report.skipped:
            st.warning(
                f"{len(report.skipped)} goals skipped because of an "
                "invalid period."
            )
        if not report.statuses:
            st.warning("No income goals set.")
            return
        _render_goals(report.statuses)


if __name__ == "__main__":  # pragma: no cover
    main()
