"""CLI adapter printing the monthly revenue dashboard."""

from collections.abc import Sequence
from decimal import Decimal

from freelance_books.domain.models import RevenueDashboard
from freelance_books.infrastructure.container import (
    build_revenue_dashboard_use_case,
)
from freelance_books.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


def _format_money(value: Decimal) -> str:
    return f"${value:,.2f}"


def _format_table(rows: Sequence[Sequence[str]]) -> list[str]:
    """Align rows into columns separated by two spaces."""
    widths = [
        max(len(row[index]) for row in rows)
        for index in range(len(rows[0]))
    ]
    return [
        "  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip()
        for row in rows
    ]


def render_dashboard(dashboard: RevenueDashboard) -> list[str]:
    """Render the dashboard as printable lines.

    Args:
        dashboard: Computed revenue dashboard.

    Returns:
        list[str]: Contract table, revenue breakdown and quick stats.
    """
    rows = [
        ("CONTRACT", "CLIENT", "TYPE", "MONTHLY REVENUE", "DETAILS"),
        ("--------", "------", "----", "---------------", "-------"),
    ]
    for line in dashboard.lines:
        rows.append(
            (
                line.contract_name,
                line.client_name,
                line.contract_type,
                _format_money(line.monthly_amount),
                line.detail,
            )
        )
    rows.append(("--------", "------", "----", "---------------", "-------"))
    rows.append(
        (
            "TOTAL",
            "",
            "",
            _format_money(dashboard.total),
            f"{dashboard.contract_count} contracts",
        )
    )

    lines = ["Revenue Dashboard", "=" * 72, ""]
    lines.extend(_format_table(rows))
    lines.extend(
        [
            "",
            "Revenue Breakdown:",
            f"  Hourly Contracts:   {_format_money(dashboard.hourly_total)}",
            f"  Retainer Contracts: {_format_money(dashboard.retainer_total)}",
            f"  Fixed/Project:      {_format_money(dashboard.fixed_total)}",
            f"  Projected Hours:    {dashboard.billable_hours:.1f} hours",
        ]
    )
    if dashboard.average_hourly_rate is not None:
        lines.append(
            f"  Average Rate:       ${dashboard.average_hourly_rate:.0f}/hr"
        )
    lines.extend(
        [
            "",
            "Quick Stats:",
            f"  Total Clients:      {dashboard.client_count}",
            f"  Pending Invoices:   {dashboard.pending_invoice_count}",
            f"  Unpaid Amount:      {_format_money(dashboard.unpaid_amount)}",
        ]
    )
    return lines


def main() -> None:
    """Compute and print the revenue dashboard."""
    logger = get_app_logger()
    use_case = build_revenue_dashboard_use_case()
    try:
        dashboard = use_case.execute()
    except RuntimeError as exc:
        logger.error(str(exc))
        return
    get_usage_logger().info("dashboard report generated")
    for line in render_dashboard(dashboard):
        print(line)


if __name__ == "__main__":  # pragma: no cover
    main()
