"""Tests for the Streamlit app module."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.adapters.interface.streamlit import app
from src.domain.models import TransactionType, TrendPoint


def test_fetch_context_builds_app_context(monkeypatch):
    """_fetch_context should delegate to the composition root."""
    monkeypatch.setattr(app, "build_app_context", lambda: "context")

    assert app._fetch_context() == "context"


def test_parse_amount_accepts_local_formats():
    """Both Brazilian and plain decimal notation are accepted."""
    assert app._parse_amount("1.234,56") == Decimal("1234.56")
    assert app._parse_amount("R$ 10,5") == Decimal("10.5")
    assert app._parse_amount("99.90") == Decimal("99.90")
    assert app._parse_amount("") is None
    assert app._parse_amount("abc") is None


def test_prepare_trend_chart_data_flattens_points():
    """Each month yields an income row and an expense row."""
    trend = [TrendPoint("Jan", 1, 2024, Decimal("10"), Decimal("4"))]

    data = app._prepare_trend_chart_data(trend)

    assert data == [
        {"label": "Jan", "kind": "Entradas", "value": 10.0},
        {"label": "Jan", "kind": "Saídas", "value": 4.0},
    ]


def test_transaction_rows_newest_first(make_tx, make_account):
    """Rows are sorted by date descending and show transfer legs."""
    accounts = [make_account("a", name="Caixa"), make_account("b", name="Banco")]
    txs = [
        make_tx(day=date(2024, 1, 5), account_id="a", tx_id="old"),
        make_tx(
            TransactionType.TRANSFER,
            day=date(2024, 2, 1),
            account_id="a",
            to_account_id="b",
            tx_id="new",
        ),
    ]

    rows = app._transaction_rows(txs, accounts)

    assert rows[0]["Data"] == "01/02/2024"
    assert rows[0]["Conta"] == "Caixa → Banco"
    assert rows[0]["Tipo"] == "Transferência"
    assert rows[1]["Valor"] == "R$ 100,00"


class _FakeStreamlit:
    def __init__(self) -> None:
        self.config_called = False
        self.title_called = False
        self.subheaders: list[str] = []
        self.sidebar = MagicMock()

    def set_page_config(self, **kwargs):
        self.config_called = True
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_called = True
        self.title_text = text

    def subheader(self, text: str):
        self.subheaders.append(text)


def test_main_shows_login_without_session(monkeypatch):
    """main should render the login form when nobody is logged in."""
    fake_st = _FakeStreamlit()
    auth_storage = MagicMock()
    auth_storage.load_user.return_value = None
    context = SimpleNamespace(auth_storage=auth_storage)
    rendered = []

    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_context", lambda: context)
    monkeypatch.setattr(app, "_render_login", lambda ctx: rendered.append(ctx))

    app.main()

    assert fake_st.config_called
    assert fake_st.title_called
    assert rendered == [context]


def test_main_routes_to_selected_page(monkeypatch, make_user):
    """main should render the page chosen in the sidebar."""
    fake_st = _FakeStreamlit()
    fake_st.sidebar.button.return_value = False
    fake_st.sidebar.selectbox.return_value = "Relatórios"
    user = make_user()
    auth_storage = MagicMock()
    auth_storage.load_user.return_value = user
    context = SimpleNamespace(auth_storage=auth_storage)
    rendered = []

    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_context", lambda: context)
    monkeypatch.setattr(app, "get_usage_logger", MagicMock)
    monkeypatch.setattr(
        app,
        "_render_reports",
        lambda ctx, current: rendered.append((ctx, current)),
    )

    app.main()

    assert rendered == [(context, user)]
