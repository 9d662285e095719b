"""Domain constants for the church treasury."""

from decimal import Decimal

INCOME_CATEGORIES = (
    "Dízimos",
    "Ofertas",
    "Campanhas",
    "Doações",
    "Eventos",
    "Missões (Entrada)",
    "Outros",
)

EXPENSE_CATEGORIES = (
    "Água",
    "Luz",
    "Internet",
    "Aluguel",
    "Manutenção",
    "Materiais",
    "Ajuda Social",
    "Missões (Saída)",
    "Outros",
)

ACCOUNT_TYPES = (
    "Conta Corrente",
    "Conta Poupança",
    "Caixa Físico",
)

TITHES_CATEGORY = "Dízimos"
OFFERINGS_CATEGORY = "Ofertas"

MISSION_SOURCES = ("Ofertas", "Cantina", "Bazzar", "Outro")

BILL_PAYMENT_PREFIX = "Pagamento: "

DEFAULT_ACCOUNT_ID = "main"
DEFAULT_ACCOUNT_NAME = "Saldo Principal"
DEFAULT_ACCOUNT_TYPE = "Caixa"

DEFAULT_MISSION_TARGET = Decimal("2000")
DEFAULT_MISSION_PROJECTS = (
    ("EBF", Decimal("500")),
    ("Missões Mundiais", Decimal("800")),
    ("Ação Social Local", Decimal("600")),
)

APP_STORAGE_KEY = "tesouraria_pro_data_v3"
TOKEN_STORAGE_KEY = "tesouraria_token"
USER_STORAGE_KEY = "tesouraria_user"

MONTH_ABBREVIATIONS = (
    "Jan",
    "Fev",
    "Mar",
    "Abr",
    "Mai",
    "Jun",
    "Jul",
    "Ago",
    "Set",
    "Out",
    "Nov",
    "Dez",
)

MONTH_NAMES = (
    "Janeiro",
    "Fevereiro",
    "Março",
    "Abril",
    "Maio",
    "Junho",
    "Julho",
    "Agosto",
    "Setembro",
    "Outubro",
    "Novembro",
    "Dezembro",
)

TRAILING_MONTHS = 6
ALERT_HORIZON_DAYS = 10
WARNING_HORIZON_DAYS = 3


__all__ = [
    "INCOME_CATEGORIES",
    "EXPENSE_CATEGORIES",
    "ACCOUNT_TYPES",
    "TITHES_CATEGORY",
    "OFFERINGS_CATEGORY",
    "MISSION_SOURCES",
    "BILL_PAYMENT_PREFIX",
    "DEFAULT_ACCOUNT_ID",
    "DEFAULT_ACCOUNT_NAME",
    "DEFAULT_ACCOUNT_TYPE",
    "DEFAULT_MISSION_TARGET",
    "DEFAULT_MISSION_PROJECTS",
    "APP_STORAGE_KEY",
    "TOKEN_STORAGE_KEY",
    "USER_STORAGE_KEY",
    "MONTH_ABBREVIATIONS",
    "MONTH_NAMES",
    "TRAILING_MONTHS",
    "ALERT_HORIZON_DAYS",
    "WARNING_HORIZON_DAYS",
]
