"""REST client for the remote treasury API built on ``requests``."""

from pathlib import Path
from typing import Any

import requests

from src.application.ports.snapshot_cache import AuthStoragePort
from src.application.ports.treasury_api import TreasuryApiPort
from src.domain.errors import RemoteApiError
from src.domain.models import (
    AppData,
    BankAccount,
    Bill,
    MissionCampaign,
    MissionIncome,
    Transaction,
    User,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.serialization import (
    account_from_json,
    account_to_json,
    bill_from_json,
    bill_to_json,
    campaign_from_json,
    campaign_to_json,
    closing_from_json,
    income_from_json,
    income_to_json,
    mission_settings_from_json,
    transaction_from_json,
    transaction_to_json,
    user_from_json,
    user_to_json,
)
from src.infrastructure.settings import TreasurySettings


class RequestsTreasuryApi(TreasuryApiPort):
    """TreasuryApiPort implementation speaking JSON over HTTP.

    The bearer token is read from auth storage on every request, so a
    login or logout takes effect without rebuilding the client.
    """

    def __init__(
        self,
        settings: TreasurySettings,
        auth_storage: AuthStoragePort | None = None,
        session: requests.Session | None = None,
        logger=None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Base URL and timeout.
            auth_storage: Optional source of the bearer token.
            session: Optional preconfigured requests session.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._base_url = settings.api_url.rstrip("/")
        self._timeout = settings.api_timeout
        self._auth_storage = auth_storage
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/json"})
        self._logger = logger or get_app_logger()

    # Transport

    def _headers(self) -> dict[str, str]:
        token = self._auth_storage.get_token() if self._auth_storage else None
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    def _request(
        self,
        method: str,
        path: str,
        body: Any = None,
        error_label: str = "Erro HTTP",
        **kwargs,
    ) -> Any:
        """Send a request and decode the JSON response.

        Args:
            method: HTTP method.
            path: Path relative to the base URL.
            body: Optional JSON body.
            error_label: Prefix of the fallback error message.

        Returns:
            Any: Decoded JSON, or None for empty responses.

        Raises:
            RemoteApiError: On network failure or non-2xx status.
        """
        url = f"{self._base_url}{path}"
        if body is not None:
            kwargs["json"] = body
        try:
            response = self._session.request(
                method,
                url,
                headers=self._headers(),
                timeout=self._timeout,
                **kwargs,
            )
        except requests.RequestException as exc:
            self._logger.warning(f"{method} {path} failed: {exc}")
            raise RemoteApiError(f"Falha de conexão: {exc}") from exc
        if not response.ok:
            message = self._error_message(response, error_label)
            self._logger.warning(
                f"{method} {path} returned {response.status_code}: {message}"
            )
            raise RemoteApiError(message, status_code=response.status_code)
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise RemoteApiError(
                f"Resposta inválida de {path}",
                status_code=response.status_code,
            ) from exc

    @staticmethod
    def _error_message(response: requests.Response, error_label: str) -> str:
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict) and payload.get("message"):
            return str(payload["message"])
        return f"{error_label} {response.status_code}"

    def _send_object(self, method: str, path: str, body: Any) -> dict[str, Any]:
        payload = self._request(method, path, body)
        if not isinstance(payload, dict):
            raise RemoteApiError(f"Resposta inválida de {path}")
        return payload

    def _get_list(self, path: str) -> list[dict[str, Any]]:
        payload = self._request("GET", path)
        return payload if isinstance(payload, list) else []

    def _get_optional_list(self, path: str) -> list[dict[str, Any]]:
        try:
            return self._get_list(path)
        except RemoteApiError as exc:
            self._logger.warning(f"Using empty list for {path}: {exc}")
            return []

    # Session and snapshot

    def login(self, username: str, password: str) -> tuple[str, User]:
        payload = self._request(
            "POST",
            "/auth/login",
            {"username": username, "password": password},
        )
        if not isinstance(payload, dict) or not payload.get("token"):
            raise RemoteApiError("Resposta de login inválida")
        return str(payload["token"]), user_from_json(payload.get("user") or {})

    def fetch_app_data(self) -> AppData:
        """Fetch every collection.

        Accounts, transactions and bills must load; the other collections
        fall back to empty lists and settings to their defaults.

        Returns:
            AppData: Configured snapshot.

        Raises:
            RemoteApiError: If a required collection cannot be loaded.
        """
        accounts = self._get_list("/accounts")
        transactions = self._get_list("/transactions")
        bills = self._get_list("/bills")
        users = self._get_optional_list("/users")
        closings = self._get_optional_list("/closings")
        incomes = self._get_optional_list("/missoes")
        campaigns = self._get_optional_list("/missoes/campaigns")
        try:
            settings_payload = self._request("GET", "/settings")
        except RemoteApiError as exc:
            self._logger.warning(f"Using default mission settings: {exc}")
            settings_payload = None
        try:
            mission_target, mission_projects = mission_settings_from_json(
                settings_payload if isinstance(settings_payload, dict) else None
            )
            data = AppData(
                users=[user_from_json(item) for item in users],
                accounts=[account_from_json(item) for item in accounts],
                transactions=[transaction_from_json(item) for item in transactions],
                bills=[bill_from_json(item) for item in bills],
                closings=[closing_from_json(item) for item in closings],
                mission_target=mission_target,
                mission_projects=mission_projects,
                mission_campaigns=[campaign_from_json(item) for item in campaigns],
                mission_incomes=[income_from_json(item) for item in incomes],
                is_configured=True,
            )
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise RemoteApiError(f"Dados inválidos recebidos da API: {exc}") from exc
        self._logger.info(
            f"Fetched {len(data.accounts)} accounts, "
            f"{len(data.transactions)} transactions and {len(data.bills)} bills"
        )
        return data

    # Transactions

    def create_transaction(self, transaction: Transaction) -> Transaction:
        payload = self._send_object(
            "POST",
            "/transactions",
            transaction_to_json(transaction),
        )
        return transaction_from_json(payload)

    def delete_transaction(self, transaction_id: str) -> None:
        self._request("DELETE", f"/transactions/{transaction_id}")

    def upload_attachment(self, file_path: Path) -> str:
        """Upload a receipt and return its URL for ``Transaction.attachment``."""
        with open(file_path, "rb") as handle:
            payload = self._request(
                "POST",
                "/uploads",
                error_label="Erro upload",
                files={"file": (Path(file_path).name, handle)},
            )
        if not isinstance(payload, dict) or not payload.get("url"):
            raise RemoteApiError("Resposta de upload inválida")
        return str(payload["url"])

    # Accounts

    def create_account(self, account: BankAccount) -> BankAccount:
        payload = self._send_object("POST", "/accounts", account_to_json(account))
        return account_from_json(payload)

    def update_account(self, account: BankAccount) -> BankAccount:
        payload = self._request(
            "PUT",
            f"/accounts/{account.id}",
            account_to_json(account),
        )
        return account_from_json(payload) if payload else account

    def delete_account(self, account_id: str) -> None:
        self._request("DELETE", f"/accounts/{account_id}")

    # Bills

    def create_bill(self, bill: Bill) -> Bill:
        payload = self._send_object("POST", "/bills", bill_to_json(bill))
        return bill_from_json(payload)

    def update_bill(self, bill: Bill) -> Bill:
        payload = self._request("PUT", f"/bills/{bill.id}", bill_to_json(bill))
        return bill_from_json(payload) if payload else bill

    def delete_bill(self, bill_id: str) -> None:
        self._request("DELETE", f"/bills/{bill_id}")

    # Missions

    def create_campaign(self, campaign: MissionCampaign) -> MissionCampaign:
        payload = self._send_object(
            "POST",
            "/missoes/campaigns",
            campaign_to_json(campaign),
        )
        return campaign_from_json(payload)

    def complete_campaign(self, campaign: MissionCampaign) -> MissionCampaign:
        payload = self._request(
            "PATCH",
            f"/missoes/campaigns/{campaign.id}",
            {
                "status": campaign.status.value,
                "endDate": campaign.end_date.isoformat() if campaign.end_date else None,
            },
        )
        return campaign_from_json(payload) if payload else campaign

    def create_mission_income(self, income: MissionIncome) -> MissionIncome:
        payload = self._send_object("POST", "/missoes", income_to_json(income))
        return income_from_json(payload)

    def delete_mission_income(self, income_id: str) -> None:
        self._request("DELETE", f"/missoes/{income_id}")

    # Users

    def create_user(self, user: User) -> User:
        payload = self._send_object(
            "POST",
            "/users",
            user_to_json(user, include_password=True),
        )
        return user_from_json(payload)

    def delete_user(self, user_id: str) -> None:
        self._request("DELETE", f"/users/{user_id}")


__all__ = ["RequestsTreasuryApi"]
