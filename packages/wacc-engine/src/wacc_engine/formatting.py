"""Display helpers. Rounding happens here and nowhere in the computation."""

from __future__ import annotations

import math
from typing import Dict, Optional

from .engine import WaccResult

FORMULA = "WACC = (E/V × Re) + (D/V × Rd × (1 - Tc))"
MISSING = "-"


def _is_missing(value: Optional[float]) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def format_number(value: Optional[float], dp: int = 2) -> str:
    if _is_missing(value):
        return MISSING
    return f"{float(value):,.{dp}f}"


def format_percent(value: Optional[float], dp: int = 2) -> str:
    """0.1035 -> '10.35%'"""
    if _is_missing(value):
        return MISSING
    return f"{float(value) * 100:.{dp}f}%"


def format_currency(amount: Optional[float], dp: int = 0) -> str:
    return format_number(amount, dp)


def capital_split(result: WaccResult) -> Dict[str, str]:
    return {
        "equity": format_percent(result.weight_e),
        "debt": format_percent(result.weight_d),
    }


def format_result(result: WaccResult) -> Dict[str, str]:
    """Every field of the breakdown as display strings."""
    return {
        "wacc": format_percent(result.wacc),
        "re": format_percent(result.re),
        "rd": format_percent(result.rd),
        "taxRate": format_percent(result.tax_rate),
        "weightE": format_percent(result.weight_e),
        "weightD": format_percent(result.weight_d),
        "afterTaxCostOfDebt": format_percent(result.after_tax_cost_of_debt),
        "equityValue": format_currency(result.equity_value),
        "debtValue": format_currency(result.debt_value),
        "totalCapital": format_currency(result.total_capital),
    }


def render_formula(result: WaccResult, currency: str = "₹") -> str:
    """Formula explainer text, one value per line (also used for copy/export)."""
    lines = [
        FORMULA,
        "",
        f"E ({currency}) = {format_currency(result.equity_value)}",
        f"D ({currency}) = {format_currency(result.debt_value)}",
        f"V ({currency}) = {format_currency(result.total_capital)}",
        f"E/V = {format_percent(result.weight_e)}",
        f"D/V = {format_percent(result.weight_d)}",
        f"Re = {format_percent(result.re)}",
        f"Rd = {format_percent(result.rd)}",
        f"Tc = {format_percent(result.tax_rate)}",
        "",
        f"WACC = {format_percent(result.wacc)}",
    ]
    return "\n".join(lines)
