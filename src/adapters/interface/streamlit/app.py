"""Streamlit treasury dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal, InvalidOperation
import importlib
from pathlib import Path
import sys
import tempfile

import altair as alt
import streamlit as st

from src.adapters.formatting import format_brl, month_name
from src.adapters.interface.streamlit.mission_chart import (
    build_plotly_figure,
    progress_bar_width,
)
from src.adapters.report_export import (
    CSV_MIME,
    HTML_MIME,
    JSON_MIME,
    backup_filename,
    csv_filename,
    html_filename,
    render_backup_json,
    render_statement_csv,
    render_statement_html,
)
from src.application.use_cases import (
    AdjustConsolidatedBalanceUseCase,
    CompleteCampaignUseCase,
    CreateAccountUseCase,
    CreateBillUseCase,
    CreateCampaignUseCase,
    CreateMissionIncomeUseCase,
    CreateTransactionUseCase,
    CreateUserUseCase,
    DeleteAccountUseCase,
    DeleteBillUseCase,
    DeleteMissionIncomeUseCase,
    DeleteTransactionUseCase,
    DeleteUserUseCase,
    GetAccountBalancesUseCase,
    GetBillsOverviewUseCase,
    GetCampaignOverviewUseCase,
    GetDashboardSummaryUseCase,
    GetMonthlyReportUseCase,
    LoginUseCase,
    LogoutUseCase,
    PayBillUseCase,
    SyncAppDataUseCase,
)
from src.domain.constants import (
    ACCOUNT_TYPES,
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    MISSION_SOURCES,
    MONTH_NAMES,
)
from src.domain.errors import TreasuryError
from src.domain.models import (
    BankAccount,
    Bill,
    BillStatus,
    TrendPoint,
    Transaction,
    TransactionType,
    User,
    UserRole,
)
from src.domain.services.reports import available_years
from src.infrastructure.container import AppContext, build_app_context
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger

PAGES = [
    "Dashboard",
    "Lançamentos",
    "Contas",
    "Contas a Pagar",
    "Missões",
    "Relatórios",
    "Usuários",
    "Configurações",
]
ALL_STATUSES = "Todas"
TYPE_LABELS = {
    TransactionType.INCOME: "Entrada",
    TransactionType.EXPENSE: "Saída",
    TransactionType.TRANSFER: "Transferência",
}


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that numpy and pandas are importable for Altair charts.

    Returns:
        Tuple with a success flag and an error message when unavailable.
    """
    checks = (("numpy", "ndarray"), ("pandas", "Timestamp"))
    for module_name, attribute in checks:
        module = sys.modules.get(module_name)
        if module is None:
            try:
                module = importlib.import_module(module_name)
            except ImportError as exc:
                return False, f"{module_name} is not available: {exc}"
        if not hasattr(module, attribute):
            return (
                False,
                f"{module_name} is incomplete: missing {attribute}. "
                "Reinstall it to enable charts.",
            )
    return True, None


def _fetch_context() -> AppContext:
    """Wire the adapters from the environment."""
    return build_app_context()


@st.cache_resource(show_spinner=False)
def _load_context() -> AppContext:
    """Cached wrapper around _fetch_context shared by Streamlit sessions."""
    return _fetch_context()


def _parse_amount(raw: str) -> Decimal | None:
    """Parse a user-typed amount; accepts ``1.234,56`` and ``1234.56``."""
    cleaned = raw.strip().replace("R$", "").replace(" ", "")
    if not cleaned:
        return None
    if "," in cleaned:
        cleaned = cleaned.replace(".", "").replace(",", ".")
    try:
        return Decimal(cleaned)
    except InvalidOperation:
        return None


def _prepare_trend_chart_data(
    trend: Sequence[TrendPoint],
) -> list[dict[str, str | float]]:
    """Flatten the trailing series into one row per month and kind."""
    data: list[dict[str, str | float]] = []
    for point in trend:
        data.append(
            {"label": point.label, "kind": "Entradas", "value": float(point.income)}
        )
        data.append(
            {"label": point.label, "kind": "Saídas", "value": float(point.expense)}
        )
    return data


def _transaction_rows(
    transactions: Sequence[Transaction],
    accounts: Sequence[BankAccount],
) -> list[dict[str, str]]:
    """Return table rows, newest first."""
    names = {account.id: account.name for account in accounts}
    ordered = sorted(transactions, key=lambda t: t.date, reverse=True)
    rows = []
    for tx in ordered:
        account = names.get(tx.account_id, tx.account_id)
        if tx.to_account_id:
            account = f"{account} → {names.get(tx.to_account_id, tx.to_account_id)}"
        rows.append(
            {
                "Data": tx.date.strftime("%d/%m/%Y"),
                "Tipo": TYPE_LABELS[tx.type],
                "Descrição": tx.description,
                "Categoria": tx.category,
                "Conta": account,
                "Valor": format_brl(tx.value),
            }
        )
    return rows


def _bill_rows(bills: Sequence[Bill]) -> list[dict[str, str]]:
    """Return bill table rows ordered by due day."""
    return [
        {
            "Descrição": bill.description,
            "Categoria": bill.category,
            "Vencimento": f"Dia {bill.due_date}",
            "Valor": format_brl(bill.value),
            "Status": bill.status.value,
        }
        for bill in sorted(bills, key=lambda b: b.due_date)
    ]


def _current_user(context: AppContext) -> User | None:
    return context.auth_storage.load_user()


def _run_action(action, success_message: str) -> bool:
    """Run a mutation and report the outcome in the page."""
    try:
        action()
    except TreasuryError as exc:
        get_app_logger().warning(f"Action failed: {exc}")
        st.error(str(exc))
        return False
    st.success(success_message)
    return True


def _render_login(context: AppContext) -> None:
    st.subheader("Entrar")
    with st.form("login"):
        username = st.text_input("Usuário")
        password = st.text_input("Senha", type="password")
        submitted = st.form_submit_button("Entrar")
    if not submitted:
        return
    use_case = LoginUseCase(
        api=context.api,
        auth_storage=context.auth_storage,
        store=context.store,
    )
    if _run_action(lambda: use_case.execute(username, password), "Bem-vindo!"):
        get_usage_logger().info(f"login user={username.strip()}")
        st.rerun()


def _render_trend_chart(trend: Sequence[TrendPoint]) -> None:
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return
    data = _prepare_trend_chart_data(trend)
    order = [point.label for point in trend]
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X("label:N", sort=order, title=None),
        xOffset=alt.XOffset("kind:N"),
        y=alt.Y("value:Q", title="R$"),
        color=alt.Color(
            "kind:N",
            scale=alt.Scale(
                domain=["Entradas", "Saídas"],
                range=["#10b981", "#ef4444"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("label:N"),
            alt.Tooltip("kind:N"),
            alt.Tooltip("value:Q", format=",.2f"),
        ],
    ).properties(height=320)
    st.altair_chart(chart, width="stretch")


def _render_dashboard(context: AppContext) -> None:
    summary = GetDashboardSummaryUseCase(store=context.store).execute()
    stats = summary.month_stats
    balance_col, income_col, expense_col = st.columns(3)
    balance_col.metric("Saldo Consolidado", format_brl(summary.consolidated_balance))
    income_col.metric(
        "Entradas do Mês",
        format_brl(stats.total_income),
        f"{stats.count_income} lançamentos",
        delta_color="off",
    )
    expense_col.metric(
        "Saídas do Mês",
        format_brl(stats.total_expense),
        f"{stats.count_expense} lançamentos",
        delta_color="off",
    )

    if summary.alerts:
        st.subheader("Alertas de vencimento")
        for alert in summary.alerts:
            text = (
                f"{alert.bill.description} - {format_brl(alert.bill.value)} "
                f"({alert.label})"
            )
            if alert.level.value == "urgent":
                st.error(text)
            elif alert.level.value == "warning":
                st.warning(text)
            else:
                st.info(text)

    st.subheader("Entradas x Saídas (últimos meses)")
    _render_trend_chart(summary.trend)


def _render_transactions(context: AppContext, user: User) -> None:
    snapshot = context.store.snapshot
    accounts = snapshot.accounts
    st.subheader("Novo lançamento")
    if not accounts:
        st.info("Cadastre uma conta antes de lançar movimentações.")
    else:
        kind = st.radio(
            "Tipo",
            list(TYPE_LABELS),
            format_func=lambda t: TYPE_LABELS[t],
            horizontal=True,
        )
        account_labels = {account.id: account.name for account in accounts}
        with st.form("transaction", clear_on_submit=True):
            description = st.text_input("Descrição")
            amount = st.text_input("Valor (R$)")
            tx_date = st.date_input("Data", value=date.today(), format="DD/MM/YYYY")
            if kind == TransactionType.INCOME:
                category = st.selectbox("Categoria", INCOME_CATEGORIES)
            elif kind == TransactionType.EXPENSE:
                category = st.selectbox("Categoria", EXPENSE_CATEGORIES)
            else:
                category = "Transferência"
            account_id = st.selectbox(
                "Conta",
                list(account_labels),
                format_func=account_labels.get,
            )
            to_account_id = None
            if kind == TransactionType.TRANSFER:
                to_account_id = st.selectbox(
                    "Conta de destino",
                    list(account_labels),
                    format_func=account_labels.get,
                )
            is_recurring = st.checkbox("Recorrente")
            receipt = st.file_uploader("Comprovante", type=["pdf", "png", "jpg"])
            submitted = st.form_submit_button("Salvar")
        if submitted:
            value = _parse_amount(amount)
            if value is None:
                st.error("Informe um valor válido.")
            else:
                def _create() -> None:
                    attachment = None
                    if receipt is not None:
                        attachment = _upload_receipt(context, receipt)
                    CreateTransactionUseCase(
                        api=context.api,
                        store=context.store,
                    ).execute(
                        Transaction(
                            id="",
                            type=kind,
                            value=value,
                            date=tx_date,
                            description=description,
                            category=category,
                            account_id=account_id,
                            to_account_id=to_account_id,
                            is_recurring=is_recurring,
                            user_id=user.id or None,
                            attachment=attachment,
                        )
                    )

                if _run_action(_create, "Lançamento salvo."):
                    get_usage_logger().info(
                        f"create_transaction user={user.username} type={kind.value}"
                    )

    st.subheader("Lançamentos")
    snapshot = context.store.snapshot
    rows = _transaction_rows(snapshot.transactions, snapshot.accounts)
    st.caption(f"{len(rows)} lançamentos")
    st.dataframe(rows, width="stretch", hide_index=True, height=420)
    if snapshot.transactions:
        labels = {
            tx.id: f"{tx.date.strftime('%d/%m/%Y')} - {tx.description}"
            for tx in snapshot.transactions
        }
        selected = st.selectbox(
            "Excluir lançamento",
            list(labels),
            format_func=labels.get,
        )
        if st.button("Excluir lançamento"):
            use_case = DeleteTransactionUseCase(api=context.api, store=context.store)
            _run_action(lambda: use_case.execute(selected), "Lançamento excluído.")


def _upload_receipt(context: AppContext, receipt) -> str:
    """Persist the uploaded file to disk and send it to the API."""
    suffix = Path(receipt.name).suffix
    with tempfile.TemporaryDirectory() as tmp_dir:
        path = Path(tmp_dir) / f"comprovante{suffix}"
        path.write_bytes(receipt.getvalue())
        return context.api.upload_attachment(path)


def _render_accounts(context: AppContext) -> None:
    balances = GetAccountBalancesUseCase(store=context.store).execute()
    st.subheader("Contas")
    st.dataframe(
        [
            {
                "Conta": item.account.name,
                "Banco": item.account.bank_name or "—",
                "Tipo": item.account.type,
                "Saldo": format_brl(item.balance),
            }
            for item in balances
        ],
        width="stretch",
        hide_index=True,
    )

    with st.form("account", clear_on_submit=True):
        st.markdown("**Nova conta**")
        name = st.text_input("Nome")
        bank_name = st.text_input("Banco")
        account_type = st.selectbox("Tipo", ACCOUNT_TYPES)
        initial = st.text_input("Saldo inicial (R$)", value="0")
        submitted = st.form_submit_button("Criar conta")
    if submitted:
        value = _parse_amount(initial)
        if value is None:
            st.error("Informe um saldo válido.")
        else:
            use_case = CreateAccountUseCase(api=context.api, store=context.store)
            _run_action(
                lambda: use_case.execute(
                    BankAccount(
                        id="",
                        name=name,
                        type=account_type,
                        initial_balance=value,
                        bank_name=bank_name or None,
                    )
                ),
                "Conta criada.",
            )

    if balances:
        labels = {item.account.id: item.account.name for item in balances}
        selected = st.selectbox("Excluir conta", list(labels), format_func=labels.get)
        if st.button("Excluir conta"):
            use_case = DeleteAccountUseCase(api=context.api, store=context.store)
            _run_action(lambda: use_case.execute(selected), "Conta excluída.")

    with st.form("consolidated"):
        st.markdown("**Ajustar saldo consolidado**")
        total = st.text_input("Novo saldo consolidado (R$)")
        submitted = st.form_submit_button("Ajustar")
    if submitted:
        value = _parse_amount(total)
        if value is None:
            st.error("Informe um saldo válido.")
        else:
            use_case = AdjustConsolidatedBalanceUseCase(
                api=context.api,
                store=context.store,
            )
            _run_action(lambda: use_case.execute(value), "Saldo ajustado.")


def _render_bills(context: AppContext, user: User) -> None:
    status_options = [ALL_STATUSES] + [status.value for status in BillStatus]
    selected_status = st.selectbox("Status", status_options)
    status = None if selected_status == ALL_STATUSES else BillStatus(selected_status)
    overview = GetBillsOverviewUseCase(store=context.store).execute(status=status)

    pending_col, overdue_col, paid_col = st.columns(3)
    pending_col.metric("Pendentes", format_brl(overview.totals.pending))
    overdue_col.metric("Atrasadas", format_brl(overview.totals.overdue))
    paid_col.metric("Pagas", format_brl(overview.totals.paid))
    st.dataframe(_bill_rows(overview.bills), width="stretch", hide_index=True)

    unpaid = [bill for bill in overview.bills if bill.status != BillStatus.PAID]
    if unpaid:
        labels = {bill.id: bill.description for bill in unpaid}
        selected = st.selectbox("Pagar conta", list(labels), format_func=labels.get)
        if st.button("Pagar"):
            use_case = PayBillUseCase(api=context.api, store=context.store)
            if _run_action(
                lambda: use_case.execute(selected, user_id=user.id or None),
                "Conta paga.",
            ):
                get_usage_logger().info(f"pay_bill user={user.username}")

    with st.form("bill", clear_on_submit=True):
        st.markdown("**Nova conta a pagar**")
        description = st.text_input("Descrição")
        amount = st.text_input("Valor (R$)")
        due_day = st.number_input("Dia de vencimento", min_value=1, max_value=31)
        category = st.selectbox("Categoria", EXPENSE_CATEGORIES)
        is_recurring = st.checkbox("Recorrente", value=True)
        submitted = st.form_submit_button("Cadastrar")
    if submitted:
        value = _parse_amount(amount)
        if value is None:
            st.error("Informe um valor válido.")
        else:
            use_case = CreateBillUseCase(api=context.api, store=context.store)
            _run_action(
                lambda: use_case.execute(
                    Bill(
                        id="",
                        description=description,
                        value=value,
                        due_date=int(due_day),
                        category=category,
                        is_recurring=is_recurring,
                        status=BillStatus.PENDING,
                    )
                ),
                "Conta cadastrada.",
            )

    if overview.bills:
        labels = {bill.id: bill.description for bill in overview.bills}
        to_delete = st.selectbox(
            "Excluir conta a pagar",
            list(labels),
            format_func=labels.get,
        )
        if st.button("Excluir conta a pagar"):
            use_case = DeleteBillUseCase(api=context.api, store=context.store)
            _run_action(lambda: use_case.execute(to_delete), "Conta excluída.")


def _render_missions(context: AppContext) -> None:
    overview = GetCampaignOverviewUseCase(store=context.store).execute()
    campaign = overview.active
    if campaign is None:
        st.info("Nenhuma campanha ativa.")
        with st.form("campaign", clear_on_submit=True):
            name = st.text_input("Nome da campanha")
            target = st.text_input("Meta (R$)")
            submitted = st.form_submit_button("Iniciar campanha")
        if submitted:
            value = _parse_amount(target)
            if value is None:
                st.error("Informe uma meta válida.")
            else:
                use_case = CreateCampaignUseCase(api=context.api, store=context.store)
                _run_action(lambda: use_case.execute(name, value), "Campanha criada.")
    else:
        progress = overview.progress
        st.subheader(campaign.name)
        raised_col, target_col, remaining_col = st.columns(3)
        raised_col.metric("Arrecadado", format_brl(progress.raised))
        target_col.metric("Meta", format_brl(progress.target))
        remaining_col.metric("Falta", format_brl(progress.remaining))
        st.progress(
            progress_bar_width(progress.percentage) / 100,
            text=f"{progress.percentage}%",
        )
        st.plotly_chart(build_plotly_figure(overview.breakdown), width="stretch")

        with st.form("mission_income", clear_on_submit=True):
            source = st.selectbox("Origem", MISSION_SOURCES)
            amount = st.text_input("Valor (R$)")
            income_date = st.date_input(
                "Data",
                value=date.today(),
                format="DD/MM/YYYY",
            )
            description = st.text_input("Observação")
            submitted = st.form_submit_button("Registrar entrada")
        if submitted:
            value = _parse_amount(amount)
            if value is None:
                st.error("Informe um valor válido.")
            else:
                use_case = CreateMissionIncomeUseCase(
                    api=context.api,
                    store=context.store,
                )
                _run_action(
                    lambda: use_case.execute(
                        source,
                        value,
                        income_date,
                        description or None,
                    ),
                    "Entrada registrada.",
                )

        incomes = [
            income
            for income in context.store.snapshot.mission_incomes
            if income.campaign_id == campaign.id
        ]
        if incomes:
            labels = {
                income.id: f"{income.source} - {format_brl(income.value)}"
                for income in incomes
            }
            selected = st.selectbox(
                "Excluir entrada",
                list(labels),
                format_func=labels.get,
            )
            if st.button("Excluir entrada"):
                use_case = DeleteMissionIncomeUseCase(
                    api=context.api,
                    store=context.store,
                )
                _run_action(lambda: use_case.execute(selected), "Entrada excluída.")

        if st.button("Concluir campanha"):
            use_case = CompleteCampaignUseCase(api=context.api, store=context.store)
            _run_action(lambda: use_case.execute(campaign.id), "Campanha concluída.")

    if overview.completed:
        st.subheader("Campanhas concluídas")
        st.dataframe(
            [
                {
                    "Campanha": item.name,
                    "Meta": format_brl(item.target),
                    "Encerrada em": (
                        item.end_date.strftime("%d/%m/%Y") if item.end_date else "—"
                    ),
                }
                for item in overview.completed
            ],
            width="stretch",
            hide_index=True,
        )


def _render_reports(context: AppContext, user: User) -> None:
    today = date.today()
    years = available_years(context.store.snapshot.transactions, today)
    month_col, year_col = st.columns(2)
    month = month_col.selectbox(
        "Mês",
        list(range(1, 13)),
        index=today.month - 1,
        format_func=month_name,
    )
    year = year_col.selectbox(
        "Ano",
        years,
        index=years.index(today.year) if today.year in years else 0,
    )
    statement = GetMonthlyReportUseCase(store=context.store).execute(month, year)

    income_col, expense_col, net_col, closing_col = st.columns(4)
    income_col.metric("Entradas", format_brl(statement.total_income))
    expense_col.metric("Saídas", format_brl(statement.total_expense))
    net_col.metric("Saldo do Mês", format_brl(statement.period_net))
    closing_col.metric("Saldo Atual", format_brl(statement.closing_balance))
    st.caption(
        f"{statement.transaction_count} lançamentos em "
        f"{MONTH_NAMES[month - 1]} de {year}"
    )

    csv_col, html_col = st.columns(2)
    if csv_col.download_button(
        "Baixar CSV",
        data=render_statement_csv(statement),
        file_name=csv_filename(month, year),
        mime=CSV_MIME,
    ):
        get_usage_logger().info(f"export_csv user={user.username} {year}-{month:02d}")
    if html_col.download_button(
        "Baixar HTML",
        data=render_statement_html(statement),
        file_name=html_filename(month, year),
        mime=HTML_MIME,
    ):
        get_usage_logger().info(
            f"export_html user={user.username} {year}-{month:02d}"
        )


def _render_users(context: AppContext, user: User) -> None:
    if user.role != UserRole.ADMIN:
        st.warning("Apenas administradores podem gerenciar usuários.")
        return
    users = context.store.snapshot.users
    st.dataframe(
        [
            {"Nome": item.name, "Usuário": item.username, "Perfil": item.role.value}
            for item in users
        ],
        width="stretch",
        hide_index=True,
    )
    with st.form("user", clear_on_submit=True):
        name = st.text_input("Nome")
        username = st.text_input("Usuário")
        password = st.text_input("Senha", type="password")
        role = st.selectbox(
            "Perfil",
            list(UserRole),
            format_func=lambda r: r.value,
        )
        submitted = st.form_submit_button("Criar usuário")
    if submitted:
        use_case = CreateUserUseCase(api=context.api, store=context.store)
        _run_action(
            lambda: use_case.execute(
                User(
                    id="",
                    name=name,
                    username=username,
                    role=role,
                    password=password,
                ),
                user,
            ),
            "Usuário criado.",
        )
    others = [item for item in users if item.id != user.id]
    if others:
        labels = {item.id: item.username for item in others}
        selected = st.selectbox("Excluir usuário", list(labels), format_func=labels.get)
        if st.button("Excluir usuário"):
            use_case = DeleteUserUseCase(api=context.api, store=context.store)
            _run_action(lambda: use_case.execute(selected, user), "Usuário excluído.")


def _render_settings(context: AppContext, user: User) -> None:
    st.subheader("Backup")
    st.caption("Exporta todos os dados carregados em um arquivo JSON.")
    if st.download_button(
        "Baixar backup",
        data=render_backup_json(context.store.snapshot),
        file_name=backup_filename(date.today()),
        mime=JSON_MIME,
    ):
        get_usage_logger().info(f"export_backup user={user.username}")

    st.subheader("Sincronização")
    if st.button("Sincronizar agora"):
        result = SyncAppDataUseCase(api=context.api, store=context.store).run()
        if result.refreshed:
            st.success("Dados atualizados.")
        else:
            st.warning("API indisponível; exibindo dados em cache.")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Tesouraria", layout="wide")
    st.title("Tesouraria")

    context = _load_context()
    user = _current_user(context)
    if user is None:
        _render_login(context)
        return

    st.sidebar.caption(f"{user.name} ({user.role.value})")
    if st.sidebar.button("Sair"):
        LogoutUseCase(auth_storage=context.auth_storage, store=context.store).execute()
        get_usage_logger().info(f"logout user={user.username}")
        st.rerun()

    page = st.sidebar.selectbox("Página", PAGES)
    get_usage_logger().info(f"page_view user={user.username} page={page}")
    if page == "Dashboard":
        _render_dashboard(context)
    elif page == "Lançamentos":
        _render_transactions(context, user)
    elif page == "Contas":
        _render_accounts(context)
    elif page == "Contas a Pagar":
        _render_bills(context, user)
    elif page == "Missões":
        _render_missions(context)
    elif page == "Relatórios":
        _render_reports(context, user)
    elif page == "Usuários":
        _render_users(context, user)
    else:
        _render_settings(context, user)


if __name__ == "__main__":  # pragma: no cover
    main()
