"""Renderers for the monthly statement and the data backup.

The CSV layout is the one treasurers import into spreadsheets: every
cell quoted, a UTF-8 BOM so Excel detects the encoding, and one section
per income bucket followed by expenses and the balance lines.
"""

import csv
from datetime import date
import html
import io
import json

from src.adapters.formatting import format_amount, format_brl, month_name
from src.domain.models import AppData, MonthlyStatement, Transaction
from src.infrastructure.serialization import app_data_to_json

CSV_MIME = "text/csv"
HTML_MIME = "text/html"
JSON_MIME = "application/json"
UTF8_BOM = "\ufeff"


def csv_filename(month: int, year: int) -> str:
    return f"relatorio_{year}_{month:02d}.csv"


def html_filename(month: int, year: int) -> str:
    return f"relatorio_{year}_{month:02d}.html"


def backup_filename(today: date) -> str:
    return f"backup_tesouraria_{today.isoformat()}.json"


def _tagged(transaction: Transaction) -> str:
    return f"{transaction.description} ({transaction.category})"


def statement_csv_rows(statement: MonthlyStatement) -> list[list[str]]:
    """Return the statement as spreadsheet rows.

    Args:
        statement: Statement of one month.

    Returns:
        list[list[str]]: Rows in export order; blank separators are ``[""]``.
    """
    title = (
        f"RELATÓRIO FINANCEIRO - {month_name(statement.month)} {statement.year}"
    )
    rows = [
        [title],
        [""],
        ["ENTRADAS"],
        [""],
        ["DÍZIMOS"],
        ["Pessoa/Descrição", "Valor (R$)"],
    ]
    for t in statement.tithes:
        rows.append([t.description, format_amount(t.value)])
    rows.append(["TOTAL DE DÍZIMOS", format_amount(statement.total_tithes)])
    rows.append([""])

    rows.append(["OFERTAS"])
    for t in statement.offerings:
        rows.append([t.description, format_amount(t.value)])
    rows.append(["TOTAL DE OFERTAS", format_amount(statement.total_offerings)])
    rows.append([""])

    if statement.other_income:
        rows.append(["OUTRAS ENTRADAS"])
        for t in statement.other_income:
            rows.append([_tagged(t), format_amount(t.value)])
        rows.append(
            ["TOTAL OUTRAS ENTRADAS", format_amount(statement.total_other_income)]
        )
        rows.append([""])

    rows.append(["TOTAL DE ENTRADAS", format_amount(statement.total_income)])
    rows.append([""])
    rows.append([""])

    rows.append(["SAÍDAS"])
    rows.append(["Descrição", "Valor (R$)"])
    for t in statement.expenses:
        rows.append([_tagged(t), format_amount(t.value)])
    rows.append(["TOTAL DE SAÍDAS", format_amount(statement.total_expense)])
    rows.append([""])
    rows.append([""])

    opening = format_amount(statement.opening_balance)
    rows.append(["SALDO ANTERIOR (Saldo Consolidado)", opening])
    rows.append(["SALDO PARA PRÓXIMO MÊS", format_amount(statement.period_net)])
    rows.append(["SALDO CONSOLIDADO", opening])
    rows.append(["SALDO ATUAL", format_amount(statement.closing_balance)])
    return rows


def render_statement_csv(statement: MonthlyStatement) -> bytes:
    """Render the statement as BOM-prefixed, fully quoted CSV bytes."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows(statement_csv_rows(statement))
    return (UTF8_BOM + buffer.getvalue().rstrip("\n")).encode("utf-8")


_HTML_STYLE = """
* { margin: 0; padding: 0; }
body { font-family: Arial, sans-serif; padding: 30px; background: white; }
.header { text-align: center; margin-bottom: 30px; border-bottom: 3px solid #1e293b; padding-bottom: 15px; }
.header h1 { font-size: 24px; color: #1e293b; margin-bottom: 5px; }
.header p { font-size: 12px; color: #64748b; }
.section { margin-bottom: 25px; }
.section-title { background-color: #f1f5f9; padding: 10px 15px; border-left: 4px solid #0ea5e9; font-weight: bold; font-size: 13px; margin-bottom: 10px; }
.section.income .section-title { border-left-color: #10b981; }
.section.expense .section-title { border-left-color: #ef4444; }
.section.summary .section-title { border-left-color: #6366f1; }
table { width: 100%; border-collapse: collapse; font-size: 12px; margin-bottom: 15px; }
th { background-color: #e2e8f0; padding: 8px 10px; text-align: left; }
td { padding: 8px 10px; border-bottom: 1px solid #e2e8f0; }
.total-row { background-color: #f1f5f9; font-weight: bold; }
.value-column { text-align: right; }
.empty { text-align: center; color: #94a3b8; }
.summary-grid { display: grid; grid-template-columns: 1fr 1fr; gap: 15px; }
.summary-card { background-color: #f8fafc; border: 1px solid #cbd5e1; border-radius: 6px; padding: 12px; }
.summary-card .label { font-size: 11px; color: #64748b; text-transform: uppercase; font-weight: bold; }
.summary-card .value { font-size: 16px; font-weight: bold; }
.summary-card.positive .value { color: #10b981; }
.summary-card.negative .value { color: #ef4444; }
.summary-card.neutral .value { color: #0ea5e9; }
@media print { body { padding: 15px; } }
"""


def _html_table(
    title: str,
    header: str,
    entries: list[tuple[str, str]],
    total_label: str,
    total: str,
    empty_text: str,
    css_class: str,
) -> str:
    if entries:
        body = "".join(
            f"<tr><td>{html.escape(label)}</td>"
            f'<td class="value-column">{value}</td></tr>'
            for label, value in entries
        )
    else:
        body = (
            f'<tr><td colspan="2" class="empty">{html.escape(empty_text)}</td></tr>'
        )
    return (
        f'<div class="section {css_class}">'
        f'<div class="section-title">{html.escape(title)}</div>'
        "<table><thead><tr>"
        f'<th>{html.escape(header)}</th><th class="value-column">Valor (R$)</th>'
        f"</tr></thead><tbody>{body}"
        f'<tr class="total-row"><td>{html.escape(total_label)}</td>'
        f'<td class="value-column">{total}</td></tr>'
        "</tbody></table></div>"
    )


def _summary_card(label: str, value, tone: str | None = None) -> str:
    if tone is None:
        tone = "positive" if value >= 0 else "negative"
    return (
        f'<div class="summary-card {tone}">'
        f'<div class="label">{html.escape(label)}</div>'
        f'<div class="value">{format_brl(value)}</div></div>'
    )


def render_statement_html(statement: MonthlyStatement) -> str:
    """Render a printable HTML page of the statement.

    Args:
        statement: Statement of one month.

    Returns:
        str: Standalone HTML document with escaped descriptions.
    """
    period = f"{month_name(statement.month)} {statement.year}"
    sections = [
        _html_table(
            "ENTRADAS - DÍZIMOS",
            "Pessoa/Descrição",
            [(t.description, format_brl(t.value)) for t in statement.tithes],
            "TOTAL DE DÍZIMOS",
            format_brl(statement.total_tithes),
            "Sem dízimos neste período",
            "income",
        ),
        _html_table(
            "ENTRADAS - OFERTAS",
            "Descrição",
            [(t.description, format_brl(t.value)) for t in statement.offerings],
            "TOTAL DE OFERTAS",
            format_brl(statement.total_offerings),
            "Sem ofertas neste período",
            "income",
        ),
    ]
    if statement.other_income:
        sections.append(
            _html_table(
                "ENTRADAS - OUTRAS",
                "Descrição",
                [(_tagged(t), format_brl(t.value)) for t in statement.other_income],
                "TOTAL OUTRAS ENTRADAS",
                format_brl(statement.total_other_income),
                "",
                "income",
            )
        )
    sections.append(
        '<div class="section income">'
        '<div class="section-title">RESUMO - TOTAL DE ENTRADAS</div>'
        '<table><tbody><tr class="total-row"><td>TOTAL DE ENTRADAS</td>'
        f'<td class="value-column">{format_brl(statement.total_income)}</td>'
        "</tr></tbody></table></div>"
    )
    sections.append(
        _html_table(
            "SAÍDAS",
            "Descrição",
            [(_tagged(t), format_brl(t.value)) for t in statement.expenses],
            "TOTAL DE SAÍDAS",
            format_brl(statement.total_expense),
            "Sem saídas neste período",
            "expense",
        )
    )
    sections.append(
        '<div class="section summary">'
        '<div class="section-title">RESUMO FINANCEIRO</div>'
        '<div class="summary-grid">'
        + _summary_card(
            "Saldo Anterior (Consolidado)", statement.opening_balance, "neutral"
        )
        + _summary_card("Saldo Para Próximo Mês", statement.period_net)
        + _summary_card("Saldo Consolidado", statement.opening_balance, "neutral")
        + _summary_card("Saldo Atual", statement.closing_balance)
        + "</div></div>"
    )
    return (
        "<!DOCTYPE html><html><head>"
        f"<title>Relatório {html.escape(period)}</title>"
        '<meta charset="UTF-8">'
        f"<style>{_HTML_STYLE}</style></head><body>"
        '<div class="header"><h1>RELATÓRIO FINANCEIRO</h1>'
        f"<p>{month_name(statement.month)} de {statement.year}</p></div>"
        + "".join(sections)
        + "</body></html>"
    )


def render_backup_json(data: AppData) -> bytes:
    """Render the full snapshot as an indented JSON backup."""
    return json.dumps(
        app_data_to_json(data),
        ensure_ascii=False,
        indent=2,
    ).encode("utf-8")


__all__ = [
    "CSV_MIME",
    "HTML_MIME",
    "JSON_MIME",
    "csv_filename",
    "html_filename",
    "backup_filename",
    "statement_csv_rows",
    "render_statement_csv",
    "render_statement_html",
    "render_backup_json",
]
