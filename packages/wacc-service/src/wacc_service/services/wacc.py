"""
WACC Service
============

Thin orchestration layer: turn a request (decimal payload or raw form) into
``WaccInputs``, run the engine, and return API-friendly dicts.

All normalization and computation logic lives in **wacc_engine** so there is
exactly one source of truth.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from wacc_engine import (
    DEFAULT_UNIT_SCALE,
    WaccInputs,
    build_wacc_inputs,
    capital_split,
    compute_wacc,
    format_result,
    render_formula,
)
from wacc_service.connectors.base import BaseConnector

logger = logging.getLogger(__name__)


class WaccService:
    def __init__(self, connector: Optional[BaseConnector] = None):
        self.connector = connector

    def calculate(self, inputs: WaccInputs) -> Dict[str, Any]:
        result = compute_wacc(inputs)
        logger.info(
            f"WACC computed: {result.wacc:.6f} (Re from {result.cost_of_equity_source}, "
            f"E/V={result.weight_e:.4f})"
        )
        return result.to_dict()

    def calculate_from_form(
        self,
        form: Mapping[str, Any],
        unit_scale: float = DEFAULT_UNIT_SCALE,
    ) -> Dict[str, Any]:
        """
        Full calculator flow for raw form values.

        1. Normalize percent / display-unit strings into WaccInputs.
        2. Run the engine.
        3. Return the result plus its display strings and formula text.
        """
        inputs = build_wacc_inputs(form, unit_scale=unit_scale)
        result = compute_wacc(inputs)
        return {
            "result": result.to_dict(),
            "formatted": format_result(result),
            "split": capital_split(result),
            "formula": render_formula(result),
        }

    def prefill(self, ticker: str) -> Dict[str, Any]:
        """Suggested CAPM and capital structure inputs for a listed company."""
        if self.connector is None:
            raise ValueError("No market data connector configured.")
        data = self.connector.get_wacc_inputs(ticker)
        return {"ticker": ticker.upper(), **data}
