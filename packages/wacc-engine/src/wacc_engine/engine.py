"""
WACC Engine
===========

This module contains the *pure* Weighted Average Cost of Capital computation:

- No HTTP
- No form parsing (see ``wacc_engine.normalization``)
- No display formatting (see ``wacc_engine.formatting``)

API surface area (stable):
- `WaccInputs` (capital structure and rates, decimals and base currency units)
- `WaccResult` (wacc plus every resolved intermediate value)
- `compute_wacc(inputs)`
- Helpers: `compute_weights`, `resolve_cost_of_equity`, `after_tax_cost_of_debt`

Formula:

    WACC = E/V * Re + D/V * Rd * (1 - Tc),   V = E + D
    Re   = Rf + beta * MRP                  (CAPM, only when Re is not given)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

COST_OF_EQUITY_DIRECT = "direct"
COST_OF_EQUITY_CAPM = "capm"


class InputError(ValueError):
    """Invalid numeric input (non-numeric, non-finite, out of range)."""

    kind = "validation"

    def to_dict(self) -> Dict[str, str]:
        return {"error": str(self), "kind": self.kind}


class MissingInputsError(InputError):
    """A required rate input was not provided."""

    kind = "missing_inputs"


class DegenerateCapitalStructureError(InputError):
    """E = D = 0: capital weights are undefined."""

    kind = "degenerate_capital_structure"


ERROR_KINDS = {
    cls.kind: cls for cls in (InputError, MissingInputsError, DegenerateCapitalStructureError)
}


@dataclass(frozen=True)
class WaccInputs:
    """
    Inputs for one WACC computation.

    Rates are decimal fractions (0.12 == 12%); values are in base currency units.
    ``None`` means "not provided", which is not the same thing as ``0.0``.
    """

    equity_value: float = 0.0
    debt_value: float = 0.0
    cost_of_equity: Optional[float] = None
    risk_free_rate: Optional[float] = None
    beta: Optional[float] = None
    market_risk_premium: Optional[float] = None
    cost_of_debt: Optional[float] = None
    tax_rate: Optional[float] = None


@dataclass(frozen=True)
class WaccResult:
    wacc: float
    re: float
    rd: float
    tax_rate: float
    weight_e: float
    weight_d: float
    # Breakdown
    equity_value: float
    debt_value: float
    total_capital: float
    after_tax_cost_of_debt: float
    cost_of_equity_source: str

    def to_dict(self) -> Dict[str, Any]:
        """Wire form, keyed the way the calculator UI reads it."""
        return {
            "wacc": self.wacc,
            "re": self.re,
            "rd": self.rd,
            "taxRate": self.tax_rate,
            "weightE": self.weight_e,
            "weightD": self.weight_d,
            "equityValue": self.equity_value,
            "debtValue": self.debt_value,
            "totalCapital": self.total_capital,
            "afterTaxCostOfDebt": self.after_tax_cost_of_debt,
            "costOfEquitySource": self.cost_of_equity_source,
        }


def _check_finite(name: str, value: Optional[float]) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InputError(f"{name} must be a number, got {value!r}")
    try:
        finite = math.isfinite(value)
    except OverflowError:
        raise InputError(f"{name} is too large") from None
    if not finite:
        raise InputError(f"{name} must be a finite number, got {value!r}")


def validate_inputs(inputs: WaccInputs) -> None:
    """Raise ``InputError`` for malformed values. Absent values are not an error here."""
    for name in (
        "equity_value",
        "debt_value",
        "cost_of_equity",
        "risk_free_rate",
        "beta",
        "market_risk_premium",
        "cost_of_debt",
        "tax_rate",
    ):
        _check_finite(name, getattr(inputs, name))

    if inputs.equity_value is None or inputs.debt_value is None:
        raise InputError("equity_value and debt_value must not be None (use 0.0)")
    if inputs.equity_value < 0:
        raise InputError("equity_value must be >= 0")
    if inputs.debt_value < 0:
        raise InputError("debt_value must be >= 0")
    if inputs.cost_of_debt is not None and inputs.cost_of_debt < 0:
        raise InputError("cost_of_debt must be >= 0")
    if inputs.cost_of_equity is not None and not 0.0 <= inputs.cost_of_equity <= 1.0:
        raise InputError("cost_of_equity must be between 0 and 1 (decimal fraction)")
    if inputs.tax_rate is not None and not 0.0 <= inputs.tax_rate <= 1.0:
        raise InputError("tax_rate must be between 0 and 1 (decimal fraction)")


def compute_weights(equity_value: float, debt_value: float) -> Tuple[float, float]:
    """
    Return (E/V, D/V).

    A zero total capital has no meaningful split, so it fails instead of
    reporting 0/0 weights.
    """
    total = equity_value + debt_value
    if not math.isfinite(total):
        raise InputError("total capital overflows: equity_value + debt_value is not a finite number")
    if total <= 0:
        raise DegenerateCapitalStructureError(
            "undefined weights: equity and debt values are both zero"
        )
    return equity_value / total, debt_value / total


def resolve_cost_of_equity(
    cost_of_equity: Optional[float],
    risk_free_rate: Optional[float],
    beta: Optional[float],
    market_risk_premium: Optional[float],
) -> Tuple[float, str]:
    """
    Pick the cost of equity and report where it came from.

    An explicit Re always wins; CAPM inputs are ignored in that case.
    """
    if cost_of_equity is not None:
        return cost_of_equity, COST_OF_EQUITY_DIRECT

    capm = {
        "risk_free_rate": risk_free_rate,
        "beta": beta,
        "market_risk_premium": market_risk_premium,
    }
    missing = [name for name, value in capm.items() if value is None]
    if missing:
        raise MissingInputsError(
            "missing cost of equity inputs: provide cost_of_equity or all of "
            f"risk_free_rate, beta, market_risk_premium (missing: {', '.join(missing)})"
        )
    return risk_free_rate + beta * market_risk_premium, COST_OF_EQUITY_CAPM


def after_tax_cost_of_debt(cost_of_debt: float, tax_rate: float) -> float:
    return cost_of_debt * (1.0 - tax_rate)


def compute_wacc(inputs: WaccInputs) -> WaccResult:
    validate_inputs(inputs)

    weight_e, weight_d = compute_weights(inputs.equity_value, inputs.debt_value)

    re, source = resolve_cost_of_equity(
        inputs.cost_of_equity,
        inputs.risk_free_rate,
        inputs.beta,
        inputs.market_risk_premium,
    )
    logger.debug(f"Cost of equity resolved from {source}: {re}")

    missing = [
        name for name in ("cost_of_debt", "tax_rate") if getattr(inputs, name) is None
    ]
    if missing:
        raise MissingInputsError(f"missing cost of debt/tax inputs: {', '.join(missing)}")

    rd_after_tax = after_tax_cost_of_debt(inputs.cost_of_debt, inputs.tax_rate)
    wacc = weight_e * re + weight_d * rd_after_tax

    return WaccResult(
        wacc=wacc,
        re=re,
        rd=inputs.cost_of_debt,
        tax_rate=inputs.tax_rate,
        weight_e=weight_e,
        weight_d=weight_d,
        equity_value=float(inputs.equity_value),
        debt_value=float(inputs.debt_value),
        total_capital=float(inputs.equity_value + inputs.debt_value),
        after_tax_cost_of_debt=rd_after_tax,
        cost_of_equity_source=source,
    )
