"""
WACC Engine
===========

Pure Weighted Average Cost of Capital engine with zero external dependencies.

Public API:
- ``WaccInputs`` / ``WaccResult`` — data contracts
- ``compute_wacc(inputs)`` — main computation (CAPM cost of equity when Re is absent)
- ``build_wacc_inputs(form, unit_scale)`` — canonical form normalization
- ``InputError`` / ``MissingInputsError`` / ``DegenerateCapitalStructureError``
- ``format_percent`` / ``format_currency`` / ``render_formula`` — display helpers
"""

from wacc_engine.engine import (
    COST_OF_EQUITY_CAPM,
    COST_OF_EQUITY_DIRECT,
    ERROR_KINDS,
    DegenerateCapitalStructureError,
    InputError,
    MissingInputsError,
    WaccInputs,
    WaccResult,
    after_tax_cost_of_debt,
    compute_wacc,
    compute_weights,
    resolve_cost_of_equity,
    validate_inputs,
)
from wacc_engine.formatting import (
    capital_split,
    format_currency,
    format_number,
    format_percent,
    format_result,
    render_formula,
)
from wacc_engine.normalization import (
    CRORE,
    DEFAULT_UNIT_SCALE,
    build_wacc_inputs,
    parse_number,
    percent_to_decimal,
    scale_currency,
)

__all__ = [
    "COST_OF_EQUITY_CAPM",
    "COST_OF_EQUITY_DIRECT",
    "CRORE",
    "DEFAULT_UNIT_SCALE",
    "ERROR_KINDS",
    "DegenerateCapitalStructureError",
    "InputError",
    "MissingInputsError",
    "WaccInputs",
    "WaccResult",
    "after_tax_cost_of_debt",
    "build_wacc_inputs",
    "capital_split",
    "compute_wacc",
    "compute_weights",
    "format_currency",
    "format_number",
    "format_percent",
    "format_result",
    "parse_number",
    "percent_to_decimal",
    "render_formula",
    "resolve_cost_of_equity",
    "scale_currency",
    "validate_inputs",
]
