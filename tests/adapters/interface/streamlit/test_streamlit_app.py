"""Tests for the Streamlit app module."""

from datetime import datetime
from decimal import Decimal

from freelance_books.adapters.interface.streamlit import app
from freelance_books.application.use_cases.get_goal_status import (
    GoalStatusReport,
)
from freelance_books.domain.models import (
    DateRange,
    GoalStatus,
    IncomeGoal,
    RevenueDashboard,
    RevenueLine,
)


def _dashboard(lines=None) -> RevenueDashboard:
    if lines is None:
        lines = [
            RevenueLine(
                contract_id=1,
                contract_name="Support",
                client_name="Acme",
                contract_type="hourly",
                monthly_amount=Decimal("1000"),
                detail="10.0h @ $100/hr",
            )
        ]
    return RevenueDashboard(
        lines=lines,
        hourly_total=Decimal("1000"),
        retainer_total=Decimal("3000"),
        fixed_total=Decimal("0"),
        total=Decimal("4000"),
        billable_hours=Decimal("10"),
        average_hourly_rate=Decimal("100"),
        contract_count=len(lines),
        client_count=2,
        pending_invoice_count=0,
        unpaid_amount=Decimal("0"),
        generated_at=datetime(2024, 6, 15, 9, 0),
    )


class _FakeColumn:
    def __init__(self, owner):
        self._owner = owner

    def metric(self, label, value, *args, **kwargs):
        self._owner.metrics[label] = value


class _FakeSidebar:
    def __init__(self, choices):
        self._choices = choices

    def selectbox(self, label, options, **kwargs):
        return self._choices.get(label, options[0])


class _FakeStreamlit:
    def __init__(self, choices=None) -> None:
        self.sidebar = _FakeSidebar(choices or {})
        self.metrics: dict[str, object] = {}
        self.captions: list[str] = []
        self.warnings: list[str] = []
        self.successes: list[str] = []
        self.subheaders: list[str] = []
        self.progress_calls: list[tuple[float, str]] = []
        self.dataframe_payload = None
        self.chart = None

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def caption(self, text: str):
        self.captions.append(text)

    def warning(self, text: str):
        self.warnings.append(text)

    def info(self, text: str):
        self.warnings.append(text)

    def success(self, text: str):
        self.successes.append(text)

    def subheader(self, text: str):
        self.subheaders.append(text)

    def markdown(self, text: str):
        self.captions.append(text)

    def columns(self, count: int):
        return [_FakeColumn(self) for _ in range(count)]

    def progress(self, value, text=""):
        self.progress_calls.append((value, text))

    def altair_chart(self, chart, **kwargs):
        self.chart = chart

    def dataframe(self, data, **kwargs):
        self.dataframe_payload = (data, kwargs)


def test_fetch_dashboard_invokes_use_case(monkeypatch):
    """_fetch_dashboard should build and execute the dashboard use case."""
    expected = _dashboard()

    class _FakeUseCase:
        def execute(self):
            return expected

    monkeypatch.setattr(
        app,
        "build_revenue_dashboard_use_case",
        lambda: _FakeUseCase(),
    )

    assert app._fetch_dashboard() is expected


def test_fetch_goal_report_forwards_period(monkeypatch):
    """_fetch_goal_report should pass the period filter through."""
    calls = []

    class _FakeUseCase:
        def execute(self, period=None):
            calls.append(period)
            return GoalStatusReport(statuses=[])

    monkeypatch.setattr(
        app,
        "build_goal_status_use_case",
        lambda: _FakeUseCase(),
    )

    app._fetch_goal_report("yearly")

    assert calls == ["yearly"]


def test_format_currency():
    """Currency values should use dollars with thousands separators."""
    assert app._format_currency(Decimal("1234.5")) == "$1,234.50"
    assert app._format_currency(Decimal("-20")) == "-$20.00"


def test_prepare_billing_chart_data_skips_empty_types():
    """Billing types without revenue should not appear in the chart."""
    data = app._prepare_billing_chart_data(_dashboard())

    assert [item["billing_type"] for item in data] == ["Hourly", "Retainer"]
    assert data[0]["share_label"] == "25.0%"
    assert data[1]["amount"] == 3000.0


def test_main_renders_dashboard(monkeypatch):
    """The dashboard page should render metrics, chart and table."""
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_dashboard", _dashboard)

    app.main()

    assert fake_st.title_text == "Freelance Books"
    assert fake_st.metrics["Monthly Revenue"] == "$4,000.00"
    assert fake_st.metrics["Average Rate"] == "$100/hr"
    assert fake_st.chart is not None
    rows, _ = fake_st.dataframe_payload
    assert rows[0]["Contract"] == "Support"
    assert rows[0]["Details"] == "10.0h @ $100/hr"


def test_main_warns_without_contracts(monkeypatch):
    """An empty book should show a warning instead of the table."""
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_dashboard", lambda: _dashboard(lines=[]))

    app.main()

    assert "No active contracts found." in fake_st.warnings
    assert fake_st.dataframe_payload is None


def test_main_renders_goals_page(monkeypatch):
    """The goals page should render one progress bar per goal."""
    goal = IncomeGoal(amount=Decimal("1000"), period="yearly", year=2024)
    status = GoalStatus(
        goal=goal,
        label="2024",
        period=DateRange(datetime(2024, 1, 1), datetime(2025, 1, 1)),
        days_remaining=0,
        actual=Decimal("1500"),
        progress_percent=Decimal("150"),
        remaining=Decimal("-500"),
        daily_needed=None,
    )
    fake_st = _FakeStreamlit(choices={"Page": "Goals", "Period": "yearly"})
    requested = []

    def _fake_load(period):
        requested.append(period)
        return GoalStatusReport(statuses=[status])

    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_goal_report", _fake_load)

    app.main()

    assert requested == ["yearly"]
    assert fake_st.progress_calls[0][0] == 1.0
    assert fake_st.successes == ["Goal achieved! +$500.00 over target"]
