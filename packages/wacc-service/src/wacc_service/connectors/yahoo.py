import logging
from typing import Any, Dict, Optional

import pandas as pd
import yfinance as yf

from .base import BaseConnector, ConnectorFactory

logger = logging.getLogger(__name__)

# Country Tax Rates (Simplified Mock)
TAX_RATES = {
    "US": 0.21,
    "United States": 0.21,
    "IN": 0.25,
    "India": 0.25,
    "IE": 0.125,
    "GB": 0.25,
    "CN": 0.25,
    "DE": 0.30,
    "JP": 0.3062,
}
DEFAULT_TAX_RATE = 0.25
DEFAULT_RISK_FREE_RATE = 0.04
DEFAULT_MARKET_RISK_PREMIUM = 0.0460


class YahooFinanceConnector(BaseConnector):
    """Connector for fetching CAPM and capital structure inputs from Yahoo Finance."""

    def get_market_data(self, ticker: str) -> Dict[str, Any]:
        """Fetch market data from Yahoo Finance."""
        stock = yf.Ticker(ticker)
        info = stock.info

        total_debt = info.get("totalDebt")
        if not total_debt:
            total_debt = self._get_mrq_value(stock.quarterly_balance_sheet, "Total Debt")

        country = info.get("country", "US")

        return {
            "beta": self._to_float(info.get("beta")),
            "market_cap": self._to_float(info.get("marketCap")),
            "total_debt": self._to_float(total_debt),
            "currency": info.get("currency"),
            "country": country,
            "tax_rate": TAX_RATES.get(country, DEFAULT_TAX_RATE),
            "risk_free_rate": self._get_risk_free_rate(),
        }

    def get_wacc_inputs(self, ticker: str) -> Dict[str, Any]:
        """
        Map market data onto WACC engine fields.
        Cost of equity is left to CAPM; cost of debt stays with the user.
        """
        market = self.get_market_data(ticker)
        return {
            "equity_value": market["market_cap"] or 0.0,
            "debt_value": market["total_debt"] or 0.0,
            "risk_free_rate": market["risk_free_rate"],
            "beta": market["beta"],
            "market_risk_premium": DEFAULT_MARKET_RISK_PREMIUM,
            "tax_rate": market["tax_rate"],
        }

    # --- Helpers ---
    def _to_float(self, val: Any) -> Optional[float]:
        if val is None:
            return None
        try:
            val = float(val)
        except (TypeError, ValueError):
            return None
        return val if pd.notna(val) else None

    def _get_mrq_value(self, df: pd.DataFrame, row_name: str) -> float:
        """Gets the value from the Most Recent Quarter (first column)."""
        if not isinstance(df, pd.DataFrame) or df.empty or row_name not in df.index:
            return 0.0
        val = df.loc[row_name].iloc[0]
        return float(val) if pd.notna(val) else 0.0

    def _get_risk_free_rate(self) -> float:
        try:
            tnx = yf.download("^TNX", period="1d", progress=False)
            if not tnx.empty:
                if "Close" in tnx.columns:
                    val = tnx["Close"].iloc[-1]
                else:
                    val = tnx.iloc[-1, 0]

                if hasattr(val, "item"):
                    val = val.item()
                elif hasattr(val, "values"):
                    val = val.values[0]
                return float(val) / 100.0
        except Exception as e:
            logger.warning(f"Risk-free rate lookup failed, using fallback: {e}")
        return DEFAULT_RISK_FREE_RATE


# Register the connector
ConnectorFactory.register("yahoo", YahooFinanceConnector)
