"""
Input Normalization
===================

Turns user-facing form values into a ``WaccInputs``:

- Percent fields ("12" meaning 12%) become decimal fractions (0.12)
- Equity/debt given in a large display unit (crore by default) become base units
- Empty fields are "not provided", except equity/debt which default to 0
- Anything non-numeric is rejected with ``InputError``; it never turns into NaN

Both ``wacc_service`` and the CLI use ``build_wacc_inputs()`` so form handling
is identical everywhere.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Mapping, Optional

from .engine import InputError, WaccInputs

CRORE = 10_000_000
DEFAULT_UNIT_SCALE = CRORE

# form field -> accepted aliases (camelCase as posted by the UI, snake_case for Python callers)
FORM_FIELDS: Dict[str, tuple] = {
    "equityValue": ("equityValue", "equity_value"),
    "debtValue": ("debtValue", "debt_value"),
    "re": ("re", "cost_of_equity"),
    "rf": ("rf", "risk_free_rate"),
    "beta": ("beta",),
    "marketRiskPremium": ("marketRiskPremium", "market_risk_premium"),
    "rd": ("rd", "cost_of_debt"),
    "taxRate": ("taxRate", "tax_rate"),
}


def parse_number(raw: Any, field: str = "value") -> Optional[float]:
    """
    Parse one form value.

    ``None`` / blank -> ``None``. Numbers pass through. Strings may carry
    thousands separators and a trailing ``%``.
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise InputError(f"{field} must be a number, got {raw!r}")
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        text = raw.strip().replace(",", "").replace("_", "")
        if text.endswith("%"):
            text = text[:-1].strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            raise InputError(f"{field} must be a number, got {raw!r}") from None
    else:
        raise InputError(f"{field} must be a number, got {raw!r}")

    if not math.isfinite(value):
        raise InputError(f"{field} must be a finite number, got {raw!r}")
    return value


def percent_to_decimal(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    return value / 100.0


def scale_currency(
    value: Optional[float],
    unit_scale: float = DEFAULT_UNIT_SCALE,
    field: str = "value",
) -> float:
    if value is None:
        return 0.0
    scaled = value * unit_scale
    if not math.isfinite(scaled):
        raise InputError(f"{field} is too large once scaled to base units (x{unit_scale:g})")
    return scaled


def _pick(form: Mapping[str, Any], field: str) -> Any:
    for key in FORM_FIELDS[field]:
        if key in form:
            return form[key]
    return None


def build_wacc_inputs(
    form: Mapping[str, Any],
    unit_scale: float = DEFAULT_UNIT_SCALE,
) -> WaccInputs:
    """
    Build ``WaccInputs`` from raw form values.

    Parameters
    ----------
    form : mapping
        Keys as posted by the calculator form (``equityValue``, ``debtValue``,
        ``re``, ``rf``, ``beta``, ``marketRiskPremium``, ``rd``, ``taxRate``)
        or their snake_case names. Rates are in percent, equity/debt in
        display units.
    unit_scale : float
        Base currency units per display unit (crore = 10,000,000).
    """
    if unit_scale is None or unit_scale <= 0:
        raise InputError("unit_scale must be > 0")

    values = {field: parse_number(_pick(form, field), field) for field in FORM_FIELDS}

    return WaccInputs(
        equity_value=scale_currency(values["equityValue"], unit_scale, "equityValue"),
        debt_value=scale_currency(values["debtValue"], unit_scale, "debtValue"),
        cost_of_equity=percent_to_decimal(values["re"]),
        risk_free_rate=percent_to_decimal(values["rf"]),
        beta=values["beta"],
        market_risk_premium=percent_to_decimal(values["marketRiskPremium"]),
        cost_of_debt=percent_to_decimal(values["rd"]),
        tax_rate=percent_to_decimal(values["taxRate"]),
    )
