"""
Client for a remote WACC backend (``POST {base_url}/api/wacc``).

Input problems reported by the backend come back as the engine's own
``InputError`` subclasses; anything on the transport side (timeout, refused
connection, non-JSON reply) is a ``WaccClientError``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from wacc_engine import ERROR_KINDS, InputError, WaccInputs, WaccResult
from wacc_service.config import get_client_config

logger = logging.getLogger(__name__)

WACC_PATH = "/api/wacc"


class WaccClientError(Exception):
    """The remote backend could not be reached or answered unexpectedly."""


def build_payload(inputs: WaccInputs) -> Dict[str, Any]:
    """
    Request body as the calculator UI sends it.

    The CAPM triple is only sent when Re is absent and all three are present.
    """
    payload: Dict[str, Any] = {
        "equityValue": inputs.equity_value,
        "debtValue": inputs.debt_value,
    }
    if inputs.cost_of_debt is not None:
        payload["rd"] = inputs.cost_of_debt
    if inputs.tax_rate is not None:
        payload["taxRate"] = inputs.tax_rate

    if inputs.cost_of_equity is not None:
        payload["re"] = inputs.cost_of_equity
    elif None not in (inputs.risk_free_rate, inputs.beta, inputs.market_risk_premium):
        payload["rf"] = inputs.risk_free_rate
        payload["beta"] = inputs.beta
        payload["marketRiskPremium"] = inputs.market_risk_premium
    return payload


def parse_result(data: Dict[str, Any]) -> WaccResult:
    try:
        equity_value = float(data.get("equityValue", 0.0))
        debt_value = float(data.get("debtValue", 0.0))
        rd = float(data["rd"])
        tax_rate = float(data["taxRate"])
        return WaccResult(
            wacc=float(data["wacc"]),
            re=float(data["re"]),
            rd=rd,
            tax_rate=tax_rate,
            weight_e=float(data["weightE"]),
            weight_d=float(data["weightD"]),
            equity_value=equity_value,
            debt_value=debt_value,
            total_capital=float(data.get("totalCapital", equity_value + debt_value)),
            after_tax_cost_of_debt=float(data.get("afterTaxCostOfDebt", rd * (1 - tax_rate))),
            cost_of_equity_source=data.get("costOfEquitySource", "direct"),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise WaccClientError(f"Malformed WACC response: {e}") from e


class WaccClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        config = get_client_config()
        self.base_url = (base_url or config.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.timeout
        self.session = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self.base_url}{WACC_PATH}"

    def compute(self, inputs: WaccInputs) -> WaccResult:
        payload = build_payload(inputs)
        logger.info(f"POST {self.url} (timeout {self.timeout}s)")
        try:
            response = self.session.post(self.url, json=payload, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise WaccClientError(f"WACC request timed out after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            raise WaccClientError(f"WACC request failed: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if 400 <= response.status_code < 500 and isinstance(data, dict) and data.get("error"):
            error_cls = ERROR_KINDS.get(data.get("kind"), InputError)
            raise error_cls(data["error"])

        if response.status_code != 200:
            raise WaccClientError(f"WACC request failed with status {response.status_code}")
        if not isinstance(data, dict):
            raise WaccClientError("WACC response was not a JSON object")
        return parse_result(data)
